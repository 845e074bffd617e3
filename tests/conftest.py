import json
import sys
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rabbitmq_admin_mcp.client import RabbitMQAdminClient  # noqa: E402
from rabbitmq_admin_mcp.utils.http.transport import HttpxTransport  # noqa: E402

API_URL = "http://rabbit.test:15672/api"


def pytest_configure(config):
    # Register the asyncio marker so pytest doesn't warn when it's used.
    config.addinivalue_line(
        "markers", "asyncio: mark test to run in an asyncio event loop"
    )
    # Add custom markers for test organization
    config.addinivalue_line(
        "markers", "unit: mark test as a unit test"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as an integration test"
    )


@pytest.fixture(autouse=True)
def mock_env_vars(monkeypatch):
    """Set the environment variables read by Settings during tests."""
    monkeypatch.setenv("RABBITMQ_ADMIN_API_URL", API_URL)
    monkeypatch.setenv("RABBITMQ_ADMIN_USERNAME", "admin")
    monkeypatch.setenv("RABBITMQ_ADMIN_PASSWORD", "admin-secret")
    monkeypatch.setenv("RABBITMQ_ADMIN_LOG_LEVEL", "INFO")
    yield


Route = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class FakeBroker:
    """In-memory stand-in for the management API.

    Routes are keyed by method and raw (still percent-encoded) path.
    Unrouted writes answer 204, unrouted reads answer the broker's 404 body.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.routes: Dict[Tuple[str, str], Route] = {}
        self.error: Optional[Exception] = None

    def respond(
        self,
        method: str,
        path: str,
        status_code: int = 200,
        json_body: Any = None,
        content: Optional[bytes] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        if json_body is not None:
            response = httpx.Response(status_code, json=json_body, headers=headers)
        else:
            response = httpx.Response(status_code, content=content or b"", headers=headers)
        self.routes[(method, path)] = response

    def fail_with(self, error: Exception) -> None:
        self.error = error

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        path = request.url.raw_path.split(b"?", 1)[0].decode("ascii")
        route = self.routes.get((request.method, path))
        if callable(route):
            return route(request)
        if route is not None:
            return route
        if request.method == "GET":
            return httpx.Response(
                404, json={"error": "Object Not Found", "reason": "Not Found"}
            )
        return httpx.Response(204)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    @property
    def last_path(self) -> str:
        return self.last.url.raw_path.split(b"?", 1)[0].decode("ascii")

    @property
    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def broker():
    """Fake management API recording every request."""
    return FakeBroker()


@pytest.fixture
def transport(broker):
    """Httpx transport wired to the fake broker."""
    http_client = httpx.Client(transport=httpx.MockTransport(broker.handler))
    t = HttpxTransport(client=http_client)
    yield t
    t.close()


@pytest.fixture
def client(transport):
    """Admin client talking to the fake broker."""
    return RabbitMQAdminClient(API_URL, "admin", "admin-secret", transport=transport)


@pytest.fixture
def sample_queues():
    """Sample /api/queues payload."""
    return [
        {
            "name": "jobs",
            "vhost": "/",
            "durable": True,
            "auto_delete": False,
            "state": "running",
            "messages": 3,
            "consumers": 1,
            "arguments": {},
        },
        {
            "name": "events",
            "vhost": "tenant-a",
            "durable": False,
            "auto_delete": True,
            "state": "idle",
            "messages": 0,
            "consumers": 0,
            "arguments": {"x-queue-type": "classic"},
        },
    ]
