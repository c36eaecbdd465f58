"""Resource method surfaces over the shared dispatcher."""

from .base import Resource, ResourceContext
from .find import Find
from .movie import Movie, MovieMore
from .person import Person, PersonMore
from .search import Search
from .tv import TV, TVMore

__all__ = [
    "Resource",
    "ResourceContext",
    "Find",
    "Search",
    "Movie",
    "MovieMore",
    "TV",
    "TVMore",
    "Person",
    "PersonMore",
]
