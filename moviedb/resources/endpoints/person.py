"""Person endpoint definitions."""

from __future__ import annotations

from moviedb.core import EndpointKind
from moviedb.runtime.rest import RestEndpointSpec

BASE_PATH = "/person"

CREDIT_FIELDS = ("cast", "crew")


def _spec(
    name: str, path: str, kind: EndpointKind = EndpointKind.RAW, **kwargs
) -> RestEndpointSpec:
    return RestEndpointSpec(id=f"person.{name}", path=BASE_PATH + path, kind=kind, **kwargs)


def _credits(name: str) -> RestEndpointSpec:
    return _spec(name, f"/{{id}}/{name}", EndpointKind.LIST, list_fields=CREDIT_FIELDS)


MEDIA: dict[str, RestEndpointSpec] = {
    "details": _spec("details", "/{id}", EndpointKind.APPENDS),
    "changes": _spec("changes", "/{id}/changes"),
    "movie_credits": _credits("movie_credits"),
    "tv_credits": _credits("tv_credits"),
    "combined_credits": _credits("combined_credits"),
    "external_ids": _spec("external_ids", "/{id}/external_ids"),
    "images": _spec("images", "/{id}/images"),
    "tagged_images": _spec("tagged_images", "/{id}/tagged_images", EndpointKind.RESULTS),
    "translations": _spec("translations", "/{id}/translations"),
}

MORE: dict[str, RestEndpointSpec] = {
    "latest": _spec("latest", "/latest"),
    "popular": _spec("popular", "/popular", EndpointKind.RESULTS),
}
