"""Tools module for the RabbitMQ admin MCP server.

Plain functions wrapping :class:`RabbitMQAdminClient` operations into
JSON-ready results. The server registers them in
:mod:`rabbitmq_admin_mcp.server.builtin_tools`.
"""

from . import queues, topology, users

__all__ = ["users", "queues", "topology"]
