"""TV show endpoint definitions."""

from __future__ import annotations

from moviedb.core import EndpointKind
from moviedb.runtime.rest import RestEndpointSpec

BASE_PATH = "/tv"


def _spec(
    name: str, path: str, kind: EndpointKind = EndpointKind.RAW, **kwargs
) -> RestEndpointSpec:
    return RestEndpointSpec(id=f"tv.{name}", path=BASE_PATH + path, kind=kind, **kwargs)


MEDIA: dict[str, RestEndpointSpec] = {
    "details": _spec("details", "/{id}", EndpointKind.APPENDS),
    "alternative_titles": _spec("alternative_titles", "/{id}/alternative_titles"),
    "changes": _spec("changes", "/{id}/changes"),
    "content_ratings": _spec("content_ratings", "/{id}/content_ratings"),
    "credits": _spec("credits", "/{id}/credits"),
    "episode_groups": _spec("episode_groups", "/{id}/episode_groups"),
    "external_ids": _spec("external_ids", "/{id}/external_ids"),
    "images": _spec("images", "/{id}/images"),
    "keywords": _spec("keywords", "/{id}/keywords"),
    "recommendations": _spec("recommendations", "/{id}/recommendations", EndpointKind.RESULTS),
    "reviews": _spec("reviews", "/{id}/reviews", EndpointKind.RESULTS),
    "screened_theatrically": _spec("screened_theatrically", "/{id}/screened_theatrically"),
    "similar": _spec("similar", "/{id}/similar", EndpointKind.RESULTS),
    "translations": _spec("translations", "/{id}/translations"),
    "videos": _spec("videos", "/{id}/videos"),
    "rating": _spec("rating", "/{id}/rating", method="POST"),
    "account_states": _spec("account_states", "/{id}/account_states"),
}

MORE: dict[str, RestEndpointSpec] = {
    "latest": _spec("latest", "/latest"),
    "airing_today": _spec("airing_today", "/airing_today", EndpointKind.RESULTS),
    "on_the_air": _spec("on_the_air", "/on_the_air", EndpointKind.RESULTS),
    "popular": _spec("popular", "/popular", EndpointKind.RESULTS),
    "top_rated": _spec("top_rated", "/top_rated", EndpointKind.RESULTS),
}
