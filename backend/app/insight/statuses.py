"""Subcase status vocabulary used to classify KPI status buckets.

Any status outside OPEN_STATUSES (ADMIN_APPROVED, SECTION_DENIED,
FORCE_CLOSED, ...) is terminal and never counted as open.
"""

from __future__ import annotations

from typing import Any

SUBMITTED = "SUBMITTED"
PENDING_REVIEW = "PENDING_REVIEW"
SECTION_ACCEPTED_PENDING_DEPT = "SECTION_ACCEPTED_PENDING_DEPT"
DEPT_ACCEPTED_PENDING_ADMIN = "DEPT_ACCEPTED_PENDING_ADMIN"

ADMIN_APPROVED = "ADMIN_APPROVED"
SECTION_DENIED = "SECTION_DENIED"
FORCE_CLOSED = "FORCE_CLOSED"

PENDING_APPROVAL_STATUSES: frozenset[str] = frozenset(
    {
        SECTION_ACCEPTED_PENDING_DEPT,
        DEPT_ACCEPTED_PENDING_ADMIN,
    }
)

OPEN_STATUSES: frozenset[str] = frozenset(
    {
        SUBMITTED,
        PENDING_REVIEW,
        *PENDING_APPROVAL_STATUSES,
    }
)

TERMINAL_STATUSES: frozenset[str] = frozenset(
    {
        ADMIN_APPROVED,
        SECTION_DENIED,
        FORCE_CLOSED,
    }
)


def is_open_status(status: Any) -> bool:
    return isinstance(status, str) and status in OPEN_STATUSES


def is_pending_approval_status(status: Any) -> bool:
    return isinstance(status, str) and status in PENDING_APPROVAL_STATUSES
