"""Correlation ID middleware: client value, else the request id, else a new UUID."""

import uuid
from typing import Callable

from drq_site.middleware._headers import append_response_header, get_header
from drq_site.middleware.request_id import sanitize_request_id


def CorrelationIDMiddleware(app: Callable, header_name: str = "X-Correlation-ID") -> Callable:
    """Add or forward the correlation id header. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        state = scope.setdefault("state", {})
        raw = get_header(scope, header_name)
        correlation_id = (
            sanitize_request_id(raw) if raw else state.get("request_id") or str(uuid.uuid4())
        )
        state["correlation_id"] = correlation_id
        await app(scope, receive, append_response_header(header_name, correlation_id, send))

    return asgi_app
