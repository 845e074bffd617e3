"""Queue and binding tools for the RabbitMQ admin MCP server."""

from typing import Any, Dict, Optional

from ..client import RabbitMQAdminClient
from ..utils.url import DEFAULT_VHOST

# Fields kept when summarizing queue listings
QUEUE_SUMMARY_FIELDS = (
    "name",
    "vhost",
    "durable",
    "auto_delete",
    "state",
    "messages",
    "consumers",
)


def create_queue(client: RabbitMQAdminClient, name: str, vhost: str = DEFAULT_VHOST) -> dict:
    """Declare a durable queue."""
    client.create_queue(name, vhost=vhost)
    return {
        "success": True,
        "queue": name,
        "vhost": vhost,
        "message": f"Queue '{name}' created on vhost '{vhost}'",
    }


def delete_queue(client: RabbitMQAdminClient, name: str, vhost: str = DEFAULT_VHOST) -> dict:
    """Delete a queue."""
    client.delete_queue(name, vhost=vhost)
    return {
        "success": True,
        "queue": name,
        "vhost": vhost,
        "message": f"Queue '{name}' deleted from vhost '{vhost}'",
    }


def list_queues(client: RabbitMQAdminClient) -> dict:
    """List queues with their main counters.

    :param client: Management API client
    :type client: RabbitMQAdminClient
    :return: Queue count and per-queue summaries
    :rtype: dict
    """
    queues = client.get_queues()
    summary = [
        {field: queue.get(field) for field in QUEUE_SUMMARY_FIELDS}
        for queue in queues
        if isinstance(queue, dict)
    ]
    return {"count": len(summary), "queues": summary}


def create_binding(
    client: RabbitMQAdminClient,
    exchange_name: str,
    queue_name: str,
    routing_key: Optional[str] = None,
    vhost: str = DEFAULT_VHOST,
    args: Optional[Dict[str, Any]] = None,
) -> dict:
    """Bind a queue to an exchange."""
    client.create_binding(
        exchange_name, queue_name, routing_key=routing_key, vhost=vhost, args=args
    )
    return {
        "success": True,
        "exchange": exchange_name,
        "queue": queue_name,
        "routing_key": routing_key,
        "vhost": vhost,
    }
