"""Transport protocol the insight client issues upstream calls through."""

from __future__ import annotations

from typing import Any, Protocol


class InsightTransport(Protocol):
    """Issues one upstream HTTP call and returns the decoded response body."""

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any: ...

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> Any: ...
