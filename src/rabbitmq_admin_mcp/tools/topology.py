"""Cluster topology tools: overview and nodes."""

from ..client import RabbitMQAdminClient


def get_overview(client: RabbitMQAdminClient) -> dict:
    """Return the cluster overview as reported by the broker."""
    return client.get_overview()


def list_nodes(client: RabbitMQAdminClient) -> dict:
    """List cluster nodes with their running state."""
    nodes = client.get_nodes()
    summary = [
        {
            "name": node.get("name"),
            "type": node.get("type"),
            "running": node.get("running"),
            "mem_used": node.get("mem_used"),
        }
        for node in nodes
        if isinstance(node, dict)
    ]
    return {"count": len(summary), "nodes": summary}


def get_node(client: RabbitMQAdminClient, name: str, include_memory: bool = False) -> dict:
    """Return one node, with the memory breakdown when requested."""
    return client.get_node(name, include_memory=include_memory)
