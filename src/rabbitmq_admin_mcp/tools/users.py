"""User and permission tools for the RabbitMQ admin MCP server.

Each function takes a :class:`RabbitMQAdminClient` and returns a
JSON-ready dictionary. Failures propagate as
:class:`~rabbitmq_admin_mcp.exceptions.RabbitMQAdminError` subclasses;
the server layer turns them into tool errors.

Examples:
    >>> create_user(client, "alice", "secret", ["monitoring"])
    {'success': True, 'user': 'alice', 'tags': ['monitoring'], 'message': "User 'alice' created"}
"""

import logging
from typing import Iterable, Optional

from ..client import RabbitMQAdminClient
from ..utils.url import DEFAULT_VHOST

logger = logging.getLogger(__name__)

HIDDEN_USER_FIELDS = ("password_hash", "hashing_algorithm")


def create_user(
    client: RabbitMQAdminClient,
    name: str,
    password: str,
    tags: Optional[Iterable[str]] = None,
) -> dict:
    """Create or update a broker user.

    :param client: Management API client
    :type client: RabbitMQAdminClient
    :param name: User name
    :type name: str
    :param password: User password
    :type password: str
    :param tags: Optional broker tags (administrator, monitoring, ...)
    :type tags: Optional[Iterable[str]]
    :return: Success response with the user name
    :rtype: dict
    """
    tags = list(tags or [])
    client.create_user(name, password, tags)
    return {
        "success": True,
        "user": name,
        "tags": tags,
        "message": f"User '{name}' created",
    }


def delete_user(client: RabbitMQAdminClient, name: str) -> dict:
    """Delete a broker user."""
    client.delete_user(name)
    return {"success": True, "user": name, "message": f"User '{name}' deleted"}


def get_user(client: RabbitMQAdminClient, name: str) -> dict:
    """Return the broker's description of one user without its password hash."""
    user = client.get_user(name)
    return {key: value for key, value in user.items() if key not in HIDDEN_USER_FIELDS}


def user_exists(client: RabbitMQAdminClient, name: str) -> dict:
    """Report whether a user exists; never fails."""
    return {"user": name, "exists": client.user_exists(name)}


def list_users(client: RabbitMQAdminClient) -> dict:
    """List all users.

    Only names and tags are returned.
    """
    users = client.get_users()
    summary = [
        {"name": user.get("name"), "tags": user.get("tags")}
        for user in users
        if isinstance(user, dict)
    ]
    return {"count": len(summary), "users": summary}


def set_user_permissions(
    client: RabbitMQAdminClient,
    name: str,
    vhost: str = DEFAULT_VHOST,
    configure: str = "",
    write: str = "",
    read: str = "",
) -> dict:
    """Grant a user configure/write/read patterns on a vhost.

    :param client: Management API client
    :param name: User name
    :param vhost: Virtual host
    :param configure: Configure permission regex
    :param write: Write permission regex
    :param read: Read permission regex
    :return: Success response echoing the applied permissions
    :rtype: dict
    """
    client.set_user_permissions(
        name, vhost=vhost, configure=configure, write=write, read=read
    )
    logger.info("Permissions for %s on vhost %s updated", name, vhost)
    return {
        "success": True,
        "user": name,
        "vhost": vhost,
        "permissions": {"configure": configure, "write": write, "read": read},
    }
