"""Unit tests for the MCP tool functions."""

import pytest

from rabbitmq_admin_mcp.exceptions import RequestFailure
from rabbitmq_admin_mcp.tools import queues, topology, users


class TestUserTools:
    """User tool results."""

    def test_create_user(self, client, broker):
        result = users.create_user(client, "alice", "secret", ["monitoring"])
        assert result == {
            "success": True,
            "user": "alice",
            "tags": ["monitoring"],
            "message": "User 'alice' created",
        }
        assert broker.last_json == {"password": "secret", "tags": "monitoring"}

    def test_get_user_hides_password_hash(self, client, broker):
        broker.respond(
            "GET",
            "/api/users/alice",
            json_body={
                "name": "alice",
                "tags": ["administrator"],
                "password_hash": "abc",
                "hashing_algorithm": "rabbit_password_hashing_sha256",
            },
        )
        assert users.get_user(client, "alice") == {
            "name": "alice",
            "tags": ["administrator"],
        }

    def test_user_exists(self, client):
        assert users.user_exists(client, "missing") == {"user": "missing", "exists": False}

    def test_list_users(self, client, broker):
        broker.respond(
            "GET",
            "/api/users",
            json_body=[{"name": "guest", "tags": ["administrator"], "password_hash": "h"}],
        )
        assert users.list_users(client) == {
            "count": 1,
            "users": [{"name": "guest", "tags": ["administrator"]}],
        }

    def test_set_user_permissions(self, client, broker):
        result = users.set_user_permissions(client, "alice", read=".*")
        assert result["permissions"] == {"configure": "", "write": "", "read": ".*"}
        assert broker.last_path == "/api/permissions/%2F/alice"

    def test_delete_user_failure_propagates(self, client, broker):
        broker.respond("DELETE", "/api/users/alice", status_code=404, json_body={
            "error": "Object Not Found", "reason": "Not Found",
        })
        with pytest.raises(RequestFailure):
            users.delete_user(client, "alice")


class TestQueueTools:
    """Queue tool results."""

    def test_list_queues_summary(self, client, broker, sample_queues):
        broker.respond("GET", "/api/queues", json_body=sample_queues)
        result = queues.list_queues(client)
        assert result["count"] == 2
        assert result["queues"][0] == {
            "name": "jobs",
            "vhost": "/",
            "durable": True,
            "auto_delete": False,
            "state": "running",
            "messages": 3,
            "consumers": 1,
        }
        assert "arguments" not in result["queues"][1]

    def test_create_and_delete_queue(self, client, broker):
        assert queues.create_queue(client, "jobs")["success"] is True
        assert broker.last.method == "PUT"
        assert queues.delete_queue(client, "jobs", vhost="tenant-a")["vhost"] == "tenant-a"
        assert broker.last_path == "/api/queues/tenant-a/jobs"

    def test_create_binding(self, client, broker):
        result = queues.create_binding(client, "amq.direct", "jobs", routing_key="jobs")
        assert result["routing_key"] == "jobs"
        assert broker.last_json == {"arguments": {}, "routing_key": "jobs"}


class TestTopologyTools:
    """Topology tool results."""

    def test_list_nodes(self, client, broker):
        broker.respond(
            "GET",
            "/api/nodes",
            json_body=[{"name": "rabbit@n1", "type": "disc", "running": True, "mem_used": 1024}],
        )
        assert topology.list_nodes(client) == {
            "count": 1,
            "nodes": [{"name": "rabbit@n1", "type": "disc", "running": True, "mem_used": 1024}],
        }

    def test_get_node_with_memory(self, client, broker):
        broker.respond("GET", "/api/nodes/rabbit%40n1", json_body={"memory": {"total": 1}})
        assert topology.get_node(client, "rabbit@n1", include_memory=True) == {
            "memory": {"total": 1}
        }
        assert broker.last.url.params["memory"] == "true"

    def test_get_overview(self, client, broker):
        broker.respond("GET", "/api/overview", json_body={"rabbitmq_version": "3.13.0"})
        assert topology.get_overview(client) == {"rabbitmq_version": "3.13.0"}
