"""Normalize upstream insight payloads into the dashboard's types.

Every adapter accepts anything the upstream might send (None, primitives,
wrong-shaped containers) and returns a fully populated value instead of
raising. Backend data quality is not trusted, and a bad payload must never
take the dashboard down.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from app.insight.statuses import is_open_status, is_pending_approval_status
from app.schemas.insight import (
    ASSIGNED_LEVEL_PLACEHOLDER,
    DistributionPoint,
    InboxSection,
    InboxSubcase,
    KpiSummary,
    StuckCase,
    TrendPoint,
)
from app.utils.coercion import coerce_number, coerce_str

ORG_TYPE_DEPARTMENT = "DEPARTMENT"
ORG_TYPE_ADMINISTRATION = "ADMINISTRATION"
ORG_TYPE_SECTION = "SECTION"

_ADMINISTRATION_PATTERNS = (
    "الادارة",
    "الإدارة",
    "ادارة",
    "إدارة",
    "administration",
    "admin",
    "الادارية",
    "الإدارية",
)
_DEPARTMENT_PATTERNS = ("دائرة", "الدائرة", "department", "dept")


def _rows(raw: Any) -> list[Any]:
    """Return the non-None elements of a list payload, or [] for anything else."""
    if not isinstance(raw, (list, tuple)):
        return []
    return [row for row in raw if row is not None]


def _field(row: Any, name: str) -> Any:
    return row.get(name) if isinstance(row, Mapping) else None


def adapt_kpi_summary(raw: Any) -> KpiSummary:
    """Reduce ``{by_status: [...], action_items: {...}}`` to the four KPI counters."""
    if not isinstance(raw, Mapping):
        return KpiSummary()

    buckets = raw.get("by_status")
    if not isinstance(buckets, (list, tuple)):
        buckets = []

    open_subcases: int | float = 0
    pending_approvals: int | float = 0
    for bucket in buckets:
        if not isinstance(bucket, Mapping) or bucket.get("status") is None:
            continue
        status = bucket["status"]
        count = coerce_number(bucket.get("count"))
        if is_open_status(status):
            open_subcases += count
        if is_pending_approval_status(status):
            pending_approvals += count

    action_items = raw.get("action_items")
    if not isinstance(action_items, Mapping):
        action_items = {}

    return KpiSummary(
        open_subcases=open_subcases,
        pending_approvals=pending_approvals,
        active_action_items=coerce_number(action_items.get("open")),
        overdue_items=coerce_number(action_items.get("overdue")),
    )


def adapt_distribution(raw: Any) -> list[DistributionPoint]:
    """Map ``[{key, count}]`` to chart points ``[{label, value}]``, order preserved."""
    return [
        DistributionPoint(
            label=coerce_str(_field(row, "key")),
            value=coerce_number(_field(row, "count")),
        )
        for row in _rows(raw)
    ]


def adapt_trend(raw: Any) -> list[TrendPoint]:
    """Map ``[{bucket, count}]`` to ``[{period, count}]``.

    The bucket is only stringified, never parsed: upstream may send ISO
    dates, week codes, quarter labels or free text.
    """
    return [
        TrendPoint(
            period=coerce_str(_field(row, "bucket")),
            count=coerce_number(_field(row, "count")),
        )
        for row in _rows(raw)
    ]


def adapt_stuck_cases(raw: Any) -> list[StuckCase]:
    """Copy each stuck-case record and add the ``stage``/``assigned_level`` columns."""
    cases: list[StuckCase] = []
    for row in _rows(raw):
        record: dict[Any, Any] = dict(row) if isinstance(row, Mapping) else {}
        record["stage"] = record.get("status")
        record["assigned_level"] = ASSIGNED_LEVEL_PLACEHOLDER
        record["days_in_stage"] = coerce_number(record.get("days_in_stage"))
        cases.append(record)
    return cases


def infer_org_type(section_name: Any, upstream_org_type: Any) -> str:
    """Classify a section as DEPARTMENT, ADMINISTRATION or SECTION.

    A recognised upstream value wins. Upstream sometimes sends numeric type
    codes instead, so fall back to matching the (Arabic or English) name.
    """
    org_type = coerce_str(upstream_org_type).upper()
    if org_type in (ORG_TYPE_DEPARTMENT, ORG_TYPE_ADMINISTRATION):
        return org_type

    name = coerce_str(section_name).lower()
    if any(pattern in name for pattern in _ADMINISTRATION_PATTERNS):
        return ORG_TYPE_ADMINISTRATION
    if any(pattern in name for pattern in _DEPARTMENT_PATTERNS):
        return ORG_TYPE_DEPARTMENT
    return ORG_TYPE_SECTION


def _adapt_inbox_subcase(row: Any) -> InboxSubcase:
    if not isinstance(row, Mapping):
        row = {}
    incident_id = row.get("incident_request_case_id") or row.get("incident_id")
    severity = row.get("severity")
    return InboxSubcase(
        subcase_id=row.get("subcase_id"),
        case_type=row.get("case_type"),
        incident_id=incident_id,
        seasonal_report_id=row.get("seasonal_report_id"),
        case_description=coerce_str(row.get("case_description")),
        patient_name=coerce_str(row.get("patient_name")),
        severity="NEUTRAL" if severity is None else severity,
        severity_id=row.get("severity_id"),
        category=coerce_str(row.get("category")),
        waiting_days=coerce_number(row.get("waiting_days")),
        created_at=row.get("created_at"),
        status=row.get("status"),
        is_red_flag=bool(row.get("is_red_flag")),
        is_never_event=bool(row.get("is_never_event")),
    )


def adapt_grouped_inbox(raw: Any) -> list[InboxSection]:
    """Normalize the administration inbox, hiding sections with nothing pending."""
    sections: list[InboxSection] = []
    for row in _rows(raw):
        if not isinstance(row, Mapping):
            continue
        pending_count = coerce_number(row.get("pending_count"))
        if pending_count <= 0:
            continue
        subcases = row.get("subcases")
        sections.append(
            InboxSection(
                section_id=row.get("section_id"),
                section_name=coerce_str(row.get("section_name"), "Unknown Section"),
                org_type=infer_org_type(row.get("section_name"), row.get("org_type")),
                supervisor_name=coerce_str(row.get("supervisor_name"), "Unassigned"),
                pending_count=pending_count,
                subcases=[
                    _adapt_inbox_subcase(subcase)
                    for subcase in _rows(subcases)
                ],
            )
        )
    return sections


def adapt_user_workload(raw: Any) -> list[Any]:
    """Workload rows are already in display shape; only guarantee a list."""
    return _rows(raw)
