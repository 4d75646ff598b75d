"""HTTP middleware (raw ASGI): timeout, body size limit, request/correlation ids, security headers.

Order matters (first added = outermost); wired in drq_site.main.
"""

from drq_site.middleware.correlation_id import CorrelationIDMiddleware
from drq_site.middleware.request_id import RequestIDMiddleware
from drq_site.middleware.request_size_limit import RequestSizeLimitMiddleware
from drq_site.middleware.security_headers import SecurityHeadersMiddleware
from drq_site.middleware.timeout import TimeoutMiddleware

__all__ = [
    "CorrelationIDMiddleware",
    "RequestIDMiddleware",
    "RequestSizeLimitMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
