"""Upstream insight transport over a shared httpx.AsyncClient."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from app.config.settings import get_settings

logger = logging.getLogger(__name__)


def create_http_client() -> httpx.AsyncClient:
    """Build the app-scoped upstream client from settings."""
    settings = get_settings()
    return httpx.AsyncClient(
        base_url=settings.upstream_base_url.rstrip("/"),
        timeout=settings.upstream_timeout_seconds,
        headers={"Content-Type": "application/json"},
    )


class HttpTransport:
    """Sends insight requests upstream, forwarding the caller's auth headers.

    The underlying AsyncClient is shared and owned by the app container;
    this wrapper is cheap and built per incoming request.
    """

    def __init__(
        self,
        client: httpx.AsyncClient,
        headers: Mapping[str, str] | None = None,
    ) -> None:
        self._client = client
        self._headers = dict(headers) if headers else {}

    async def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._send("GET", path, params=params)

    async def post(self, path: str, payload: dict[str, Any] | None = None) -> Any:
        return await self._send("POST", path, json=payload)

    async def _send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json: dict[str, Any] | None = None,
    ) -> Any:
        try:
            response = await self._client.request(
                method, path, params=params, json=json, headers=self._headers
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Upstream %s %s failed with status %s",
                method,
                path,
                e.response.status_code,
            )
            raise
        except httpx.RequestError:
            logger.warning("Upstream %s %s unreachable", method, path, exc_info=True)
            raise
        return self._decode(response)

    @staticmethod
    def _decode(response: httpx.Response) -> Any:
        # Non-JSON bodies are handed over as text; the adapters treat them as malformed.
        body = response.text or ""
        if not body.strip():
            return None
        try:
            return response.json()
        except ValueError:
            logger.debug(
                "Upstream returned non-JSON body (status %s, %d chars)",
                response.status_code,
                len(body),
            )
            return body
