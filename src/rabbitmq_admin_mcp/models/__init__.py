"""RabbitMQ admin models package.

Pydantic models describing client configuration and assembled requests.
"""

from .base_models import AdminRequest, ClientConfig, HttpMethod

__all__ = [
    "AdminRequest",
    "ClientConfig",
    "HttpMethod",
]
