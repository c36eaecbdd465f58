"""Find endpoint definitions."""

from __future__ import annotations

import re

from moviedb.core import ResultType
from moviedb.runtime.rest import RestEndpointSpec

BASE_PATH = "/find"

FIND: dict[str, RestEndpointSpec] = {
    "external_id": RestEndpointSpec(id="find.external_id", path=BASE_PATH + "/{external_id}"),
}

# External sources recognised per result group, tried in order
EXTERNAL_SOURCES: dict[ResultType, dict[str, re.Pattern[str]]] = {
    ResultType.MOVIE: {"imdb_id": re.compile(r"^tt\d+$")},
    ResultType.TV: {"imdb_id": re.compile(r"^tt\d+$")},
    ResultType.PERSON: {"imdb_id": re.compile(r"^nm\d+$")},
}

# "t<digits>" is a literal TMDb ID when custom IDs are enabled
CUSTOM_ID = re.compile(r"^t(\d+)$")
