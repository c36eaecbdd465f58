"""Structured logging for paging operations.

This module provides telemetry hooks for paging operations, emitting
structured logs for observability.
"""

from __future__ import annotations

import logging

from .definitions import PagePlan

logger = logging.getLogger(__name__)


def log_page_plan(*, endpoint_id: str, plan: PagePlan) -> None:
    """Log page plan creation.

    Args:
        endpoint_id: Endpoint identifier
        plan: The computed page plan
    """
    logger.debug(
        "page_plan_created",
        extra={
            "endpoint_id": endpoint_id,
            "virtual_page": plan.virtual_page,
            "remote_page": plan.remote_page,
            "offset_position": plan.offset_position,
            "page_size": plan.size,
        },
    )


def log_page_fetched(
    *,
    endpoint_id: str,
    plan: PagePlan,
    remote_results: int,
    results: int,
    total_results: int,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully re-windowed page.

    Args:
        endpoint_id: Endpoint identifier
        plan: Page plan that was executed
        remote_results: Number of records in the remote page
        results: Number of records returned to the caller
        total_results: Total result count reported by the API
        latency_ms: Request latency in milliseconds (optional)
    """
    logger.info(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "virtual_page": plan.virtual_page,
            "remote_page": plan.remote_page,
            "remote_results": remote_results,
            "results": results,
            "total_results": total_results,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    virtual_page: object,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page request.

    Args:
        endpoint_id: Endpoint identifier
        virtual_page: Page the caller asked for
        error_type: Exception class name
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "virtual_page": virtual_page,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
