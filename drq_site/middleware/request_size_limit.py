"""Request body size limit middleware.

Rejects bodies above max_bytes with 413, whether announced by
Content-Length or streamed without one.
"""

from typing import Callable

from drq_site.middleware._headers import get_header, send_json_error


async def _reject(send: Callable, max_bytes: int, actual: int) -> None:
    await send_json_error(
        send,
        413,
        "PAYLOAD_TOO_LARGE",
        f"Request body must be at most {max_bytes} bytes",
        {"max_bytes": max_bytes, "content_length": actual},
    )


def RequestSizeLimitMiddleware(app: Callable, max_bytes: int) -> Callable:
    """Enforce max_bytes on request bodies. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        declared = get_header(scope, "content-length")
        if declared is not None and declared.isdigit():
            if int(declared) > max_bytes:
                await _reject(send, max_bytes, int(declared))
                return
            await app(scope, receive, send)
            return

        chunks: list[bytes] = []
        total = 0
        while True:
            message = await receive()
            if message["type"] != "http.request":
                break
            body = message.get("body", b"")
            total += len(body)
            if total > max_bytes:
                await _reject(send, max_bytes, total)
                return
            chunks.append(body)
            if not message.get("more_body", False):
                break

        buffered = iter([
            {"type": "http.request", "body": chunk, "more_body": i < len(chunks) - 1}
            for i, chunk in enumerate(chunks)
        ])

        async def replay() -> dict:
            # After the buffered body, defer to the real channel (disconnects).
            return next(buffered, None) or await receive()

        await app(scope, replay, send)

    return asgi_app
