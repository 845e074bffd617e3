#!/usr/bin/env python3
"""RabbitMQ Admin MCP Server.

Exposes the management API client as MCP tools over stdio or HTTP.
"""

import argparse
import asyncio
import logging
from typing import Optional, Tuple

from fastmcp import FastMCP

from ..client import RabbitMQAdminClient
from ..config.settings import Settings
from ..utils.security import sanitize_url, setup_secure_logging
from .builtin_tools import register_all_builtin_tools

logger = logging.getLogger(__name__)


async def create_rabbitmq_admin_server(
    settings: Optional[Settings] = None,
    client: Optional[RabbitMQAdminClient] = None,
) -> Tuple[FastMCP, RabbitMQAdminClient]:
    """Create and configure the RabbitMQ admin MCP server.

    :param settings: Optional settings; loaded from the environment if omitted
    :param client: Optional pre-built client, e.g. one with a test transport
    :return: The configured server and the client its tools use
    :raises pydantic.ValidationError: If the environment settings are invalid

    Examples
    --------
    .. code-block:: python

        server, client = await create_rabbitmq_admin_server()
        server.run()
    """
    settings = settings or Settings()
    if client is None:
        client = RabbitMQAdminClient.from_settings(settings)

    server = FastMCP(settings.mcp_server_name)
    await register_all_builtin_tools(server, client)

    logger.info(
        "MCP server setup complete for %s", sanitize_url(settings.api_url)
    )
    return server, client


def main() -> None:
    """Run the RabbitMQ admin MCP server.

    Parses command line arguments, initializes logging, creates the server
    and starts it with the requested transport:

    - stdio: Standard input/output communication
    - http: HTTP-based communication
    - streamable-http: Streamable HTTP communication

    Examples
    --------
    .. code-block:: bash

        RABBITMQ_ADMIN_API_URL=http://rabbit:15672/api rabbitmq-admin-mcp --transport http --port 9080
    """
    settings = Settings()
    setup_secure_logging(level=settings.log_level)

    parser = argparse.ArgumentParser(description="RabbitMQ Admin MCP Server")
    parser.add_argument(
        "--transport",
        choices=["stdio", "http", "streamable-http"],
        default="stdio",
    )
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=9080)
    args = parser.parse_args()

    logger.info("Creating RabbitMQ admin MCP server...")
    mcp, client = asyncio.run(create_rabbitmq_admin_server(settings))

    try:
        if args.transport in ("http", "streamable-http"):
            logger.info(
                "Starting %s server on %s:%d", args.transport, args.host, args.port
            )
            mcp.run(transport=args.transport, host=args.host, port=args.port)
        else:
            logger.info("Running in stdio mode")
            mcp.run()
    except KeyboardInterrupt:
        logger.info("Server stopped by user")
    finally:
        client.close()
        logger.info("HTTP client closed")


if __name__ == "__main__":
    main()
