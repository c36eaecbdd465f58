"""Data models.

All models are Pydantic v2 models and immutable (frozen=True). Result
records themselves are left as plain dicts since the library does not
validate the semantics of returned data.
"""

from .page import VirtualPage

__all__ = ["VirtualPage"]
