"""RabbitMQ admin client and MCP server package.

This package provides a client for the RabbitMQ HTTP management API
(users, permissions, queues, bindings, topology queries) and a Model
Context Protocol (MCP) server exposing those operations as tools.

:var __version__: Current package version
:type __version__: str
"""

import logging

from .client import RabbitMQAdminClient
from .exceptions import (
    ConfigurationError,
    DecodeFailure,
    InvalidArgumentError,
    RabbitMQAdminError,
    RequestFailure,
    TransportFailure,
)
from .utils.url import DEFAULT_VHOST, DEFAULT_VHOST_ENCODED

__version__ = "0.1.0"

# Silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "RabbitMQAdminClient",
    "RabbitMQAdminError",
    "TransportFailure",
    "RequestFailure",
    "DecodeFailure",
    "ConfigurationError",
    "InvalidArgumentError",
    "DEFAULT_VHOST",
    "DEFAULT_VHOST_ENCODED",
]
