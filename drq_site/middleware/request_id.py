"""Request ID middleware.

Forwards a client X-Request-ID when it is short and log-safe, otherwise
generates one; stores it on scope state and echoes it on the response.
"""

import re
import uuid
from typing import Callable

from drq_site.middleware._headers import append_response_header, get_header

REQUEST_ID_MAX_LENGTH = 64
_REQUEST_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]{1,%d}$" % REQUEST_ID_MAX_LENGTH)


def sanitize_request_id(raw: str | None) -> str:
    """Return raw if it matches the safe pattern, else a new UUID."""
    if raw and _REQUEST_ID_PATTERN.match(raw.strip()):
        return raw.strip()
    return str(uuid.uuid4())


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Add or forward the request id header. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(get_header(scope, header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        await app(scope, receive, append_response_header(header_name, request_id, send))

    return asgi_app
