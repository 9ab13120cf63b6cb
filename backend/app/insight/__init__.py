"""Insight data normalization: status vocabulary, adapters, request builders, client."""

from app.insight.adapters import (
    adapt_distribution,
    adapt_grouped_inbox,
    adapt_kpi_summary,
    adapt_stuck_cases,
    adapt_trend,
    adapt_user_workload,
)
from app.insight.client import InsightClient
from app.insight.requests import (
    InsightRequestError,
    build_distribution_request,
    build_stuck_query,
    build_trend_request,
    build_workload_query,
)

__all__ = [
    "InsightClient",
    "InsightRequestError",
    "adapt_distribution",
    "adapt_grouped_inbox",
    "adapt_kpi_summary",
    "adapt_stuck_cases",
    "adapt_trend",
    "adapt_user_workload",
    "build_distribution_request",
    "build_stuck_query",
    "build_trend_request",
    "build_workload_query",
]
