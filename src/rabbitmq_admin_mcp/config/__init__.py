"""Configuration for the RabbitMQ admin MCP server."""

from .settings import Settings

__all__ = ["Settings"]
