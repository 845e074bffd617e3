"""MCP server exposing the RabbitMQ admin operations as tools."""
