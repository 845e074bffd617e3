"""Register the admin tools on the MCP server.

Handle registration of user, queue/binding and topology tools. Every tool
runs the blocking client call in a worker thread and reports client
failures as :class:`fastmcp.exceptions.ToolError`.

Examples
--------
.. code-block:: python

   import asyncio
   from fastmcp import FastMCP
   from rabbitmq_admin_mcp import RabbitMQAdminClient
   from rabbitmq_admin_mcp.server.builtin_tools import register_all_builtin_tools

   async def main():
       server = FastMCP("rabbitmq-admin")
       client = RabbitMQAdminClient("http://localhost:15672/api", "guest", "guest")
       await register_all_builtin_tools(server, client)

   asyncio.run(main())
"""

import asyncio
import logging
from typing import Any, Callable, Dict, List, Optional

from fastmcp import Context, FastMCP
from fastmcp.exceptions import ToolError

from ..client import RabbitMQAdminClient
from ..exceptions import RabbitMQAdminError
from ..tools import queues, topology, users
from ..utils.url import DEFAULT_VHOST

logger = logging.getLogger(__name__)


async def run_tool(func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
    """Run a blocking tool function off the event loop.

    :param func: Tool function from :mod:`rabbitmq_admin_mcp.tools`
    :return: The function's result
    :raises ToolError: If the client raised a RabbitMQAdminError
    """
    try:
        return await asyncio.to_thread(func, *args, **kwargs)
    except RabbitMQAdminError as e:
        logger.error("Tool %s failed: %s", func.__name__, e)
        raise ToolError(e.message) from e


async def register_user_tools(server: FastMCP, client: RabbitMQAdminClient):
    """Register user and permission tools.

    :param server: FastMCP server instance.
    :param client: Management API client shared by the tools.
    """

    @server.tool(name="create_user", description="Create or update a RabbitMQ user")
    async def create_user_tool(
        ctx: Context,
        name: str,
        password: str,
        tags: Optional[List[str]] = None,
    ):
        """Create a user with optional tags."""
        return await run_tool(users.create_user, client, name, password, tags)

    @server.tool(name="delete_user", description="Delete a RabbitMQ user")
    async def delete_user_tool(ctx: Context, name: str):
        """Delete a user."""
        return await run_tool(users.delete_user, client, name)

    @server.tool(name="get_user", description="Get a RabbitMQ user")
    async def get_user_tool(ctx: Context, name: str):
        """Get a user."""
        return await run_tool(users.get_user, client, name)

    @server.tool(name="user_exists", description="Check whether a RabbitMQ user exists")
    async def user_exists_tool(ctx: Context, name: str):
        """Check whether a user exists."""
        return await run_tool(users.user_exists, client, name)

    @server.tool(name="list_users", description="List RabbitMQ users")
    async def list_users_tool(ctx: Context):
        """List users."""
        return await run_tool(users.list_users, client)

    @server.tool(
        name="set_user_permissions",
        description="Set a user's configure/write/read permissions on a vhost",
    )
    async def set_user_permissions_tool(
        ctx: Context,
        name: str,
        vhost: str = DEFAULT_VHOST,
        configure: str = "",
        write: str = "",
        read: str = "",
    ):
        """Set a user's permissions."""
        return await run_tool(
            users.set_user_permissions,
            client,
            name,
            vhost=vhost,
            configure=configure,
            write=write,
            read=read,
        )


async def register_queue_tools(server: FastMCP, client: RabbitMQAdminClient):
    """Register queue and binding tools.

    :param server: FastMCP server instance.
    :param client: Management API client shared by the tools.
    """

    @server.tool(name="create_queue", description="Declare a durable queue")
    async def create_queue_tool(ctx: Context, name: str, vhost: str = DEFAULT_VHOST):
        """Declare a queue."""
        return await run_tool(queues.create_queue, client, name, vhost=vhost)

    @server.tool(name="delete_queue", description="Delete a queue")
    async def delete_queue_tool(ctx: Context, name: str, vhost: str = DEFAULT_VHOST):
        """Delete a queue."""
        return await run_tool(queues.delete_queue, client, name, vhost=vhost)

    @server.tool(name="list_queues", description="List queues with message counters")
    async def list_queues_tool(ctx: Context):
        """List queues."""
        return await run_tool(queues.list_queues, client)

    @server.tool(name="create_binding", description="Bind a queue to an exchange")
    async def create_binding_tool(
        ctx: Context,
        exchange_name: str,
        queue_name: str,
        routing_key: Optional[str] = None,
        vhost: str = DEFAULT_VHOST,
        args: Optional[Dict[str, Any]] = None,
    ):
        """Create a binding."""
        return await run_tool(
            queues.create_binding,
            client,
            exchange_name,
            queue_name,
            routing_key=routing_key,
            vhost=vhost,
            args=args,
        )


async def register_topology_tools(server: FastMCP, client: RabbitMQAdminClient):
    """Register overview and node tools.

    :param server: FastMCP server instance.
    :param client: Management API client shared by the tools.
    """

    @server.tool(name="get_overview", description="Get the RabbitMQ cluster overview")
    async def get_overview_tool(ctx: Context):
        """Get the overview."""
        return await run_tool(topology.get_overview, client)

    @server.tool(name="list_nodes", description="List RabbitMQ cluster nodes")
    async def list_nodes_tool(ctx: Context):
        """List nodes."""
        return await run_tool(topology.list_nodes, client)

    @server.tool(name="get_node", description="Get a RabbitMQ node, optionally with memory details")
    async def get_node_tool(ctx: Context, name: str, include_memory: bool = False):
        """Get a node."""
        return await run_tool(
            topology.get_node, client, name, include_memory=include_memory
        )


async def register_all_builtin_tools(server: FastMCP, client: RabbitMQAdminClient):
    """Register all built-in tools.

    :param server: FastMCP server instance.
    :param client: Management API client shared by the tools.
    """
    await register_user_tools(server, client)
    await register_queue_tools(server, client)
    await register_topology_tools(server, client)
    logger.info("Registered RabbitMQ admin tools")
