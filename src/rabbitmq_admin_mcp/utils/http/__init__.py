"""HTTP utilities public API (barrel module).

This package provides:
- The request executor (send, classify, log, raise)
- The transport contract and its httpx implementation
- The response wrapper and status classification

Recommended import pattern for consumers:
    from rabbitmq_admin_mcp.utils.http import RequestExecutor, HttpxTransport
"""

from .executor import MAX_LOGGED_CONTENT, RequestExecutor
from .request import AdminResponse, is_error_status, is_json_content_type
from .transport import HttpTransport, HttpxTransport, create_timeout

__all__ = [
    "RequestExecutor",
    "MAX_LOGGED_CONTENT",
    "AdminResponse",
    "is_error_status",
    "is_json_content_type",
    "HttpTransport",
    "HttpxTransport",
    "create_timeout",
]
