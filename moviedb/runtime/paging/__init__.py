"""Re-windowing layer for paginated endpoints.

The API serves results in fixed pages of twenty. Callers may choose a
smaller page size that divides twenty; this layer maps each caller page
onto exactly one remote page and cuts the caller's slice out of it.

Architecture:
    - definitions.py: PagePolicy and PagePlan structures
    - planners.py: PagePlanner (virtual page -> remote page + offset)
    - paginator.py: Paginator (fetch, annotate, slice)
    - telemetry.py: Structured logging
"""

from __future__ import annotations

from .definitions import PagePlan, PagePolicy
from .paginator import Paginator
from .planners import PagePlanner

__all__ = [
    "PagePolicy",
    "PagePlan",
    "PagePlanner",
    "Paginator",
]
