"""HTTP middleware applied to every request."""

from recipex.core.middleware.logging import LoggingMiddleware
from recipex.core.middleware.request_id import RequestIDMiddleware
from recipex.core.middleware.security_headers import SecurityHeadersMiddleware
from recipex.core.middleware.timing import TimingMiddleware


__all__ = [
    "LoggingMiddleware",
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimingMiddleware",
]
