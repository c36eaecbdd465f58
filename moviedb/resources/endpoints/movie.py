"""Movie endpoint definitions.

See https://developer.themoviedb.org/reference/movie-details
"""

from __future__ import annotations

from moviedb.core import EndpointKind
from moviedb.runtime.rest import RestEndpointSpec

BASE_PATH = "/movie"

RAW = EndpointKind.RAW
APPENDS = EndpointKind.APPENDS
RESULTS = EndpointKind.RESULTS
LIST = EndpointKind.LIST

CREDIT_FIELDS = ("cast", "crew")


def _spec(name: str, path: str, kind: EndpointKind = RAW, **kwargs) -> RestEndpointSpec:
    return RestEndpointSpec(id=f"movie.{name}", path=BASE_PATH + path, kind=kind, **kwargs)


# Endpoints of a single movie; paths take an ``{id}``
MEDIA: dict[str, RestEndpointSpec] = {
    "details": _spec("details", "/{id}", APPENDS),
    "alternative_titles": _spec("alternative_titles", "/{id}/alternative_titles"),
    "changes": _spec("changes", "/{id}/changes"),
    "credits": _spec("credits", "/{id}/credits", LIST, list_fields=CREDIT_FIELDS),
    "external_ids": _spec("external_ids", "/{id}/external_ids"),
    "images": _spec("images", "/{id}/images"),
    "keywords": _spec("keywords", "/{id}/keywords"),
    "release_dates": _spec("release_dates", "/{id}/release_dates"),
    "videos": _spec("videos", "/{id}/videos"),
    "translations": _spec("translations", "/{id}/translations"),
    "recommendations": _spec("recommendations", "/{id}/recommendations", RESULTS),
    "similar": _spec("similar", "/{id}/similar", RESULTS),
    "reviews": _spec("reviews", "/{id}/reviews", RESULTS),
    "lists": _spec("lists", "/{id}/lists", RESULTS),
    "rating": _spec("rating", "/{id}/rating", method="POST"),
    "account_states": _spec("account_states", "/{id}/account_states"),
}

# Collection endpoints not tied to one movie
MORE: dict[str, RestEndpointSpec] = {
    "latest": _spec("latest", "/latest"),
    "now_playing": _spec("now_playing", "/now_playing", RESULTS),
    "popular": _spec("popular", "/popular", RESULTS),
    "top_rated": _spec("top_rated", "/top_rated", RESULTS),
    "upcoming": _spec("upcoming", "/upcoming", RESULTS),
}
