from fastapi import Depends, Request

from app.config.settings import get_settings
from app.core.container import get_container
from app.insight.client import InsightClient
from app.transports.base import InsightTransport
from app.transports.http_transport import HttpTransport


def get_insight_transport(request: Request) -> InsightTransport:
    container = get_container()
    if container is None:
        raise RuntimeError("App container is not initialized")
    forwarded = {}
    for name in get_settings().forward_headers:
        value = request.headers.get(name)
        if value:
            forwarded[name] = value
    return HttpTransport(container.http_client, headers=forwarded)


def get_insight_client(
    transport: InsightTransport = Depends(get_insight_transport),
) -> InsightClient:
    return InsightClient(transport)
