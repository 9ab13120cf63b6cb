"""Outbound request builders for the upstream insight endpoints.

The upstream aggregate endpoints do not support filters yet, so the page
layer's filter bag is reduced to the single discriminator each endpoint
accepts. A missing discriminator is a caller bug and fails immediately.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.config.defaults import DEFAULT_STUCK_DAYS_THRESHOLD
from app.middleware.error_handler import ServiceError

# (query param, accepted filter keys) for the user workload endpoint
_WORKLOAD_FILTERS = (
    ("org_unit_id", ("org_unit_id", "orgUnitId")),
    ("role", ("role",)),
    ("min_items", ("min_items", "minItems")),
    ("sort_by", ("sort_by", "sortBy")),
    ("sort_order", ("sort_order", "sortOrder")),
)


class InsightRequestError(ServiceError, ValueError):
    """A required request parameter was not supplied by the caller."""


def _require(params: Any, field: str) -> Any:
    if not isinstance(params, Mapping) or params.get(field) is None:
        raise InsightRequestError(f"{field} required")
    return params[field]


def build_distribution_request(params: Any) -> dict[str, Any]:
    """Return ``{"dimension": ...}``; every other key in params is dropped.

    Empty string, 0 and False are valid dimensions; only None/missing fail.
    """
    return {"dimension": _require(params, "dimension")}


def build_trend_request(params: Any) -> dict[str, Any]:
    """Return ``{"bucket": params["interval"]}``."""
    return {"bucket": _require(params, "interval")}


def build_stuck_query(days_threshold: Any = None) -> dict[str, Any]:
    """Query params for the stuck-case endpoint.

    A supplied threshold is sent as-is, without coercion or range checks.
    """
    if days_threshold is None:
        return {"days_threshold": DEFAULT_STUCK_DAYS_THRESHOLD}
    return {"days_threshold": days_threshold}


def build_workload_query(filters: Mapping[str, Any] | None = None) -> dict[str, Any]:
    """Translate workload filters into query params, skipping empty values."""
    query: dict[str, Any] = {}
    if not isinstance(filters, Mapping):
        return query
    for param, keys in _WORKLOAD_FILTERS:
        for key in keys:
            value = filters.get(key)
            if value:
                query[param] = value
                break
    return query
