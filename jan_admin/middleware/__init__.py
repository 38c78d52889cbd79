"""Console middleware."""

from jan_admin.middleware.access_gate import AccessGateMiddleware
from jan_admin.middleware.logging import StructuredLoggingMiddleware
from jan_admin.middleware.request_id import RequestIdMiddleware

__all__ = [
    "AccessGateMiddleware",
    "RequestIdMiddleware",
    "StructuredLoggingMiddleware",
]
