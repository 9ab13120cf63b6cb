"""Insight client: upstream calls threaded through the request builders and adapters.

Callers only ever see normalized types. Transport failures are not caught
here; retry and user messaging belong to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping
from typing import Any

from app.insight.adapters import (
    adapt_distribution,
    adapt_grouped_inbox,
    adapt_kpi_summary,
    adapt_stuck_cases,
    adapt_trend,
    adapt_user_workload,
)
from app.insight.requests import (
    build_distribution_request,
    build_stuck_query,
    build_trend_request,
    build_workload_query,
)
from app.schemas.insight import (
    DistributionPoint,
    InboxSection,
    InsightOverview,
    KpiSummary,
    StuckCase,
    TrendPoint,
)
from app.transports.base import InsightTransport

logger = logging.getLogger(__name__)

KPI_SUMMARY_PATH = "/api/v2/insight/kpi-summary"
DISTRIBUTION_PATH = "/api/v2/insight/distribution"
TREND_PATH = "/api/v2/insight/trend"
STUCK_PATH = "/api/v2/insight/stuck"
GROUPED_INBOX_PATH = "/api/v2/insight/grouped-inbox"
USER_WORKLOAD_PATH = "/api/v2/insight/user-workload"


class InsightClient:
    """Loads dashboard insight data through an injected transport."""

    def __init__(self, transport: InsightTransport) -> None:
        self._transport = transport

    async def get_insight_kpis(self) -> KpiSummary:
        logger.debug("Fetching insight KPI summary")
        raw = await self._transport.get(KPI_SUMMARY_PATH)
        return adapt_kpi_summary(raw)

    async def get_insight_distribution(self, params: Any) -> list[DistributionPoint]:
        payload = build_distribution_request(params)
        logger.debug("Fetching insight distribution: %s", payload)
        raw = await self._transport.post(DISTRIBUTION_PATH, payload)
        return adapt_distribution(raw)

    async def get_insight_trend(self, params: Any) -> list[TrendPoint]:
        payload = build_trend_request(params)
        logger.debug("Fetching insight trend: %s", payload)
        raw = await self._transport.post(TREND_PATH, payload)
        return adapt_trend(raw)

    async def get_stuck_cases(self, days_threshold: Any = None) -> list[StuckCase]:
        query = build_stuck_query(days_threshold)
        logger.debug("Fetching stuck cases: %s", query)
        raw = await self._transport.get(STUCK_PATH, query)
        return adapt_stuck_cases(raw)

    async def get_grouped_inbox(self) -> list[InboxSection]:
        logger.debug("Fetching grouped inbox")
        raw = await self._transport.get(GROUPED_INBOX_PATH)
        sections = adapt_grouped_inbox(raw)
        logger.debug("Grouped inbox: %d sections with pending subcases", len(sections))
        return sections

    async def get_user_workload(
        self, filters: Mapping[str, Any] | None = None
    ) -> list[Any]:
        query = build_workload_query(filters)
        logger.debug("Fetching user workload: %s", query)
        raw = await self._transport.get(USER_WORKLOAD_PATH, query)
        return adapt_user_workload(raw)

    async def get_overview(
        self,
        distribution_params: Any,
        trend_params: Any,
        days_threshold: Any = None,
    ) -> InsightOverview:
        """Load the four dashboard datasets concurrently and wait for all of them.

        The first failure propagates; the remaining calls are not retried.
        """
        # Reject bad caller params before any upstream call is issued.
        build_distribution_request(distribution_params)
        build_trend_request(trend_params)

        kpis, distribution, trend, stuck_cases = await asyncio.gather(
            self.get_insight_kpis(),
            self.get_insight_distribution(distribution_params),
            self.get_insight_trend(trend_params),
            self.get_stuck_cases(days_threshold),
        )
        return InsightOverview(
            kpis=kpis,
            distribution=distribution,
            trend=trend,
            stuck_cases=stuck_cases,
        )
