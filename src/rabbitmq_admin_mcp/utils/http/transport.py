"""HTTP transport used by the request executor.

The executor talks to the network through the small :class:`HttpTransport`
contract: one assembled request in, one response out, a single attempt.
:class:`HttpxTransport` is the default implementation on top of a
synchronous ``httpx.Client``; tests and embedding applications can pass
any object with a matching ``send``/``close`` pair.
"""

import logging
from typing import Optional, Protocol, Union, runtime_checkable

import httpx

from ...models.base_models import AdminRequest
from .request import AdminResponse

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 30.0


def create_timeout(
    connect: float = 5.0,
    read: float = DEFAULT_TIMEOUT_SECONDS,
    write: float = 10.0,
    pool: float = 5.0,
) -> httpx.Timeout:
    """Create a timeout configuration for the management API client.

    :param connect: Connection timeout in seconds
    :param read: Read timeout in seconds
    :param write: Write timeout in seconds
    :param pool: Pool acquisition timeout in seconds
    :return: Configured timeout object
    :rtype: httpx.Timeout
    """
    return httpx.Timeout(connect=connect, read=read, write=write, pool=pool)


@runtime_checkable
class HttpTransport(Protocol):
    """Contract for sending one admin request.

    Implementations perform exactly one exchange and raise an
    ``httpx.HTTPError`` subclass or an ``OSError`` (including
    ``ConnectionError``) when no response could be obtained. Both are
    reported as :class:`~rabbitmq_admin_mcp.exceptions.TransportFailure`.
    """

    def send(self, request: AdminRequest) -> AdminResponse:
        """Send the request and return the broker's response."""
        ...

    def close(self) -> None:
        """Release any held connections."""
        ...


class HttpxTransport:
    """Transport backed by a synchronous ``httpx.Client``.

    :param timeout: Timeout in seconds or a full ``httpx.Timeout``
    :type timeout: Union[float, httpx.Timeout, None]
    :param verify: Verify TLS certificates
    :type verify: bool
    :param client: Optional pre-built client, e.g. one using
                   ``httpx.MockTransport`` in tests
    :type client: Optional[httpx.Client]
    """

    def __init__(
        self,
        timeout: Union[float, httpx.Timeout, None] = None,
        verify: bool = True,
        client: Optional[httpx.Client] = None,
    ):
        if client is None:
            if timeout is None:
                timeout = create_timeout()
            elif not isinstance(timeout, httpx.Timeout):
                timeout = create_timeout(read=float(timeout))
            client = httpx.Client(timeout=timeout, verify=verify)
            logger.debug("Created httpx client (verify=%s)", verify)
        self._client = client

    def send(self, request: AdminRequest) -> AdminResponse:
        """Send one request without retries."""
        response = self._client.request(
            request.method.value,
            request.url,
            params=list(request.query_params) or None,
            json=dict(request.body_params) if request.body_params else None,
            auth=request.auth,
        )
        return AdminResponse.from_httpx(response, url=request.full_url)

    def close(self) -> None:
        """Close the underlying httpx client."""
        self._client.close()
