"""Shared Pydantic models for the RabbitMQ admin client.

The models describe the request side of the execution pipeline:

- Client configuration (base URL and credentials)
- HTTP methods accepted by the management API
- Assembled admin requests handed to the executor
"""

from enum import Enum
from typing import Any, Dict, Tuple

from pydantic import BaseModel, ConfigDict, Field

from ..utils.url import render_query


class HttpMethod(str, Enum):
    """HTTP methods used against the management API."""

    GET = "GET"
    PUT = "PUT"
    POST = "POST"
    DELETE = "DELETE"


class ClientConfig(BaseModel):
    """Immutable connection settings owned by a client instance.

    :param api_url: Base URL of the management API, e.g.
                    ``http://localhost:15672/api``
    :type api_url: str
    :param username: Basic auth user name
    :type username: str
    :param password: Basic auth password, never included in ``repr``
    :type password: str
    """

    model_config = ConfigDict(frozen=True)

    api_url: str
    username: str
    password: str = Field(repr=False)

    @property
    def auth(self) -> Tuple[str, str]:
        """Basic auth credentials as a ``(username, password)`` pair."""
        return (self.username, self.password)


class AdminRequest(BaseModel):
    """One assembled call against the management API.

    Built fresh for every operation and never reused. Path segments inside
    ``url`` are already percent-encoded; query parameters are kept apart so
    the transport encodes them.

    :param method: HTTP method
    :type method: HttpMethod
    :param url: Absolute URL without query string
    :type url: str
    :param query_params: Ordered query parameters
    :type query_params: Tuple[Tuple[str, str], ...]
    :param body_params: JSON body fields, empty for bodiless requests
    :type body_params: Dict[str, Any]
    :param auth: Basic auth credentials
    :type auth: Tuple[str, str]
    """

    model_config = ConfigDict(frozen=True)

    method: HttpMethod
    url: str
    query_params: Tuple[Tuple[str, str], ...] = ()
    body_params: Dict[str, Any] = Field(default_factory=dict)
    auth: Tuple[str, str] = Field(repr=False)

    @property
    def full_url(self) -> str:
        """URL including the encoded query string."""
        if not self.query_params:
            return self.url
        return f"{self.url}?{render_query(self.query_params)}"

    @property
    def params(self) -> Tuple[Tuple[str, Any], ...]:
        """Query and body parameters together, query first."""
        return tuple(self.query_params) + tuple(self.body_params.items())
