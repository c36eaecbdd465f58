"""TMDb API constants.

Base URL, API version and the fixed pagination limits of the backing API.
The page size and page limit are properties of the remote service and are
not configurable.
"""

from __future__ import annotations

BASE_URL = "https://api.themoviedb.org"
API_VERSION = 3

# Results per remote page served by every paginated endpoint
REMOTE_PAGE_SIZE = 20

# Highest remote page number the API will serve
REMOTE_PAGE_LIMIT = 500

DEFAULT_TIMEOUT = 30.0

DEFAULT_HEADERS = {"Content-Type": "application/json;charset=utf-8"}
