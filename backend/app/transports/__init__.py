"""Upstream transports for the insight client: protocol and httpx implementation."""

from app.transports.base import InsightTransport
from app.transports.http_transport import HttpTransport, create_http_client

__all__ = ["HttpTransport", "InsightTransport", "create_http_client"]
