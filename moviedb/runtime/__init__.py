"""Runtime layer: REST transport and paging."""

from .paging import PagePlan, PagePlanner, PagePolicy, Paginator
from .rest import HTTPClient, RestEndpointSpec, RestRunner, RESTTransport

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "RestRunner",
    "RestEndpointSpec",
    "PagePolicy",
    "PagePlan",
    "PagePlanner",
    "Paginator",
]
