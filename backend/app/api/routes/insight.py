"""Insight dashboard endpoints: normalized KPI, chart and table data."""

from __future__ import annotations

import httpx
from fastapi import APIRouter, Depends, Query

from app.api.deps import get_insight_client
from app.api.envelope import ok
from app.insight.client import InsightClient
from app.middleware.error_handler import upstream_error_response

router = APIRouter(prefix="/api/insight", tags=["insight"])


@router.get("/kpis")
async def get_kpis(client: InsightClient = Depends(get_insight_client)):
    try:
        kpis = await client.get_insight_kpis()
        return ok(kpis.model_dump())
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load KPI summary")


@router.get("/distribution")
async def get_distribution(
    dimension: str | None = None,
    client: InsightClient = Depends(get_insight_client),
):
    try:
        points = await client.get_insight_distribution({"dimension": dimension})
        return ok([point.model_dump() for point in points])
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load distribution data")


@router.get("/trend")
async def get_trend(
    interval: str | None = None,
    client: InsightClient = Depends(get_insight_client),
):
    try:
        points = await client.get_insight_trend({"interval": interval})
        return ok([point.model_dump() for point in points])
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load trend data")


@router.get("/stuck")
async def get_stuck(
    days_threshold: int | None = Query(default=None),
    client: InsightClient = Depends(get_insight_client),
):
    try:
        return ok(await client.get_stuck_cases(days_threshold))
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load stuck cases")


@router.get("/overview")
async def get_overview(
    dimension: str | None = None,
    interval: str | None = None,
    days_threshold: int | None = Query(default=None),
    client: InsightClient = Depends(get_insight_client),
):
    """All four dashboard datasets in one response; any upstream failure fails the whole load."""
    try:
        overview = await client.get_overview(
            {"dimension": dimension},
            {"interval": interval},
            days_threshold,
        )
        return ok(overview.model_dump())
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load insight overview")


@router.get("/grouped-inbox")
async def get_grouped_inbox(client: InsightClient = Depends(get_insight_client)):
    try:
        sections = await client.get_grouped_inbox()
        return ok([section.model_dump() for section in sections])
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load grouped inbox")


@router.get("/user-workload")
async def get_user_workload(
    org_unit_id: int | None = None,
    role: str | None = None,
    min_items: int | None = None,
    sort_by: str | None = None,
    sort_order: str | None = None,
    client: InsightClient = Depends(get_insight_client),
):
    filters = {
        "org_unit_id": org_unit_id,
        "role": role,
        "min_items": min_items,
        "sort_by": sort_by,
        "sort_order": sort_order,
    }
    try:
        return ok(await client.get_user_workload(filters))
    except httpx.HTTPError as exc:
        return upstream_error_response(exc, "Failed to load user workload")
