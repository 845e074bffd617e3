"""RabbitMQ management API client.

:class:`RabbitMQAdminClient` exposes the administrative operations of the
broker's HTTP management API: users, permissions, queues, bindings and
topology queries. Each operation assembles one :class:`AdminRequest` and
hands it to the shared :class:`RequestExecutor`, so logging and error
translation are identical for every call.

Names are passed raw. Each path segment is percent-encoded exactly once
when the URL is built, so the default vhost ``/`` is sent as ``%2F``.

Examples:
    >>> with RabbitMQAdminClient("http://localhost:15672/api", "guest", "guest") as client:
    ...     client.create_queue("jobs")
    ...     client.create_binding("amq.direct", "jobs", routing_key="jobs")
    ...     queues = client.get_queues()
"""

import logging
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple
from urllib.parse import urlsplit

from .config.settings import Settings
from .exceptions import ConfigurationError, InvalidArgumentError
from .models.base_models import AdminRequest, ClientConfig, HttpMethod
from .utils.http.executor import LoggerLike, RequestExecutor
from .utils.http.request import AdminResponse
from .utils.http.transport import HttpTransport, HttpxTransport
from .utils.url import DEFAULT_VHOST, build_url

logger = logging.getLogger(__name__)


class RabbitMQAdminClient:
    """Client for the RabbitMQ HTTP management API.

    Configuration is fixed at construction. The client keeps no per-call
    state, so one instance can serve several threads when its transport
    allows it (the default httpx transport does).

    :param api_url: Management API base URL, e.g. ``http://host:15672/api``
    :type api_url: str
    :param username: Basic auth user name
    :type username: str
    :param password: Basic auth password
    :type password: str
    :param transport: Optional transport; defaults to :class:`HttpxTransport`
    :type transport: Optional[HttpTransport]
    :param logger: Optional logger for request records
    :type logger: Optional[LoggerLike]
    :raises ConfigurationError: If ``api_url`` is not an http(s) URL
    """

    def __init__(
        self,
        api_url: str,
        username: str,
        password: str,
        *,
        transport: Optional[HttpTransport] = None,
        logger: Optional[LoggerLike] = None,
    ):
        parts = urlsplit(api_url or "")
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ConfigurationError(
                f"Management API URL must be an http(s) URL, got {api_url!r}",
                setting="api_url",
            )
        self.config = ClientConfig(
            api_url=api_url.rstrip("/"), username=username, password=password
        )
        self.transport: HttpTransport = transport or HttpxTransport()
        self.executor = RequestExecutor(self.transport, logger=logger)

    @classmethod
    def from_settings(cls, settings: Settings, **kwargs: Any) -> "RabbitMQAdminClient":
        """Build a client from application settings.

        :param settings: Loaded settings
        :type settings: Settings
        :return: Configured client
        :rtype: RabbitMQAdminClient
        """
        if "transport" not in kwargs:
            kwargs["transport"] = HttpxTransport(
                timeout=settings.http_timeout_seconds, verify=settings.verify_tls
            )
        return cls(settings.api_url, settings.username, settings.password, **kwargs)

    def set_logger(self, new_logger: LoggerLike) -> None:
        """Replace the logger used for request records."""
        self.executor.set_logger(new_logger)

    def close(self) -> None:
        """Release the transport's connections."""
        self.transport.close()

    def __enter__(self) -> "RabbitMQAdminClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return (
            f"RabbitMQAdminClient(api_url={self.config.api_url!r}, "
            f"username={self.config.username!r})"
        )

    # ------------------------------------------------------------------
    # Request assembly
    # ------------------------------------------------------------------

    def _request(
        self,
        method: HttpMethod,
        segments: Sequence[str],
        body: Optional[Dict[str, Any]] = None,
        query: Optional[Iterable[Tuple[str, str]]] = None,
    ) -> AdminResponse:
        try:
            url = build_url(self.config.api_url, segments)
        except InvalidArgumentError as e:
            self.executor.logger.error(
                "Error executing request! [%s] %s: %s",
                method.value,
                "/".join(str(s) for s in segments),
                e,
                extra={
                    "request_method": method.value,
                    "request_url": None,
                    "request_params": {},
                    "response_code": None,
                    "response_message": e.message,
                    "response_content": None,
                },
            )
            raise
        request = AdminRequest(
            method=method,
            url=url,
            query_params=tuple(query or ()),
            body_params=body or {},
            auth=self.config.auth,
        )
        return self.executor.execute(request)

    # ------------------------------------------------------------------
    # Users
    # ------------------------------------------------------------------

    def create_user(self, name: str, password: str, tags: Iterable[str] = ()) -> bool:
        """Create or update a user.

        :param name: User name
        :param password: User password
        :param tags: Broker tags such as ``administrator`` or ``monitoring``
        :return: True on success
        :raises RequestFailure: If the broker rejects the request
        :raises TransportFailure: If the broker cannot be reached
        """
        tags_str = tags if isinstance(tags, str) else ",".join(tags)
        self._request(
            HttpMethod.PUT,
            ["users", name],
            body={"password": password, "tags": tags_str},
        )
        return True

    def delete_user(self, name: str) -> bool:
        """Delete a user."""
        self._request(HttpMethod.DELETE, ["users", name])
        return True

    def get_user(self, name: str) -> Dict[str, Any]:
        """Fetch one user.

        :param name: User name
        :return: Decoded user object
        :raises RequestFailure: With status 404 if the user does not exist
        :raises DecodeFailure: If the body is not JSON
        """
        return self._request(HttpMethod.GET, ["users", name]).decode()

    def user_exists(self, name: str) -> bool:
        """Check whether a user exists.

        Any failure of :meth:`get_user` (missing user, unreachable broker,
        undecodable body) is reported as ``False``.
        """
        try:
            self.get_user(name)
        except Exception as e:
            logger.debug("User %r treated as absent: %s", name, e)
            return False
        return True

    def get_users(self) -> List[Dict[str, Any]]:
        """List all users."""
        return self._request(HttpMethod.GET, ["users"]).decode()

    def set_user_permissions(
        self,
        name: str,
        vhost: str = DEFAULT_VHOST,
        configure: str = "",
        write: str = "",
        read: str = "",
    ) -> bool:
        """Set a user's permissions on a vhost.

        ``configure``, ``write`` and ``read`` are regular expressions over
        resource names; an empty string grants nothing.

        :param name: User name
        :param vhost: Virtual host, ``/`` by default
        :param configure: Configure permission pattern
        :param write: Write permission pattern
        :param read: Read permission pattern
        :return: True on success
        """
        self._request(
            HttpMethod.PUT,
            ["permissions", vhost, name],
            body={"configure": configure, "write": write, "read": read},
        )
        return True

    # ------------------------------------------------------------------
    # Queues and bindings
    # ------------------------------------------------------------------

    def create_queue(self, name: str, vhost: str = DEFAULT_VHOST) -> bool:
        """Declare a durable, non auto-delete queue without arguments."""
        self._request(
            HttpMethod.PUT,
            ["queues", vhost, name],
            body={"auto_delete": False, "durable": True, "arguments": {}},
        )
        return True

    def delete_queue(self, name: str, vhost: str = DEFAULT_VHOST) -> bool:
        """Delete a queue."""
        self._request(HttpMethod.DELETE, ["queues", vhost, name])
        return True

    def get_queues(self) -> List[Dict[str, Any]]:
        """List all queues across vhosts."""
        return self._request(HttpMethod.GET, ["queues"]).decode()

    def create_binding(
        self,
        exchange_name: str,
        queue_name: str,
        routing_key: Optional[str] = None,
        vhost: str = DEFAULT_VHOST,
        args: Optional[Dict[str, Any]] = None,
    ) -> bool:
        """Bind a queue to an exchange.

        :param exchange_name: Source exchange
        :param queue_name: Destination queue
        :param routing_key: Optional routing key; omitted from the body if None
        :param vhost: Virtual host, ``/`` by default
        :param args: Optional binding arguments
        :return: True on success
        """
        body: Dict[str, Any] = {"arguments": dict(args or {})}
        if routing_key is not None:
            body["routing_key"] = routing_key
        self._request(
            HttpMethod.POST,
            ["bindings", vhost, "e", exchange_name, "q", queue_name],
            body=body,
        )
        return True

    # ------------------------------------------------------------------
    # Topology
    # ------------------------------------------------------------------

    def get_overview(self) -> Dict[str, Any]:
        """Fetch the cluster overview."""
        return self._request(HttpMethod.GET, ["overview"]).decode()

    def get_nodes(self) -> List[Dict[str, Any]]:
        """List cluster nodes."""
        return self._request(HttpMethod.GET, ["nodes"]).decode()

    def get_node(self, name: str, include_memory: bool = False) -> Dict[str, Any]:
        """Fetch one node, optionally with its memory breakdown.

        :param name: Node name, e.g. ``rabbit@host``
        :param include_memory: Add ``memory=true`` to the query
        :return: Decoded node object
        """
        query = [("memory", "true")] if include_memory else None
        return self._request(HttpMethod.GET, ["nodes", name], query=query).decode()
