"""Unit tests for the exception hierarchy."""

import json

import httpx

from rabbitmq_admin_mcp.exceptions import (
    ConfigurationError,
    DecodeFailure,
    InvalidArgumentError,
    RabbitMQAdminError,
    RequestFailure,
    TransportFailure,
    format_params,
)


def test_all_failures_share_base_class():
    for cls in (TransportFailure, RequestFailure, DecodeFailure, ConfigurationError):
        assert issubclass(cls, RabbitMQAdminError)


def test_base_error_to_dict_and_json():
    err = RabbitMQAdminError("boom", details={"a": 1})
    assert err.code == "RabbitMQAdminError"
    assert err.to_dict() == {"error": "RabbitMQAdminError", "message": "boom", "details": {"a": 1}}
    assert json.loads(err.to_json())["message"] == "boom"


def test_format_params():
    assert format_params([("configure", ".*"), ("read", "")]) == "configure=.*, read="
    assert format_params([]) == ""


def test_request_failure_message():
    err = RequestFailure(
        method="GET",
        url="http://h/api/users/missing",
        params=[],
        status_code=404,
        status_message="Not Found",
        broker_reason="Object Not Found",
    )
    assert str(err) == (
        "Error executing request [GET] http://h/api/users/missing (): "
        "404 Not Found (Object Not Found)"
    )
    assert err.code == "REQUEST_ERROR"
    assert err.details["status_code"] == 404
    assert err.details["broker_reason"] == "Object Not Found"


def test_request_failure_without_broker_reason():
    err = RequestFailure("DELETE", "http://h/api/queues/%2F/q", [], 500, "Internal Server Error")
    assert str(err).endswith("500 Internal Server Error")
    assert "broker_reason" not in err.details


def test_transport_failure_keeps_original_error():
    cause = httpx.ConnectError("connection refused")
    err = TransportFailure("GET", "http://h/api/overview", cause)
    assert err.original_error is cause
    assert err.details["error_type"] == "ConnectError"
    assert "connection refused" in err.message


def test_decode_failure_details():
    err = DecodeFailure("http://h/api/overview", 200, "text/html", reason="content type is not JSON")
    assert err.code == "DECODE_ERROR"
    assert err.details == {
        "url": "http://h/api/overview",
        "status_code": 200,
        "content_type": "text/html",
    }
    assert "content type is not JSON" in str(err)


def test_configuration_error_setting():
    err = ConfigurationError("bad url", setting="api_url")
    assert err.details == {"setting": "api_url"}


def test_request_failure_keeps_duplicate_param_keys():
    err = RequestFailure(
        "GET",
        "http://h/api/nodes/n1",
        [("memory", "true"), ("memory", "false")],
        400,
        "Bad Request",
    )
    assert err.details["params"] == [["memory", "true"], ["memory", "false"]]
    assert json.loads(err.to_json())["details"]["params"] == err.details["params"]


def test_invalid_argument_error():
    err = InvalidArgumentError("URL path segments must not be empty", value="")
    assert isinstance(err, RabbitMQAdminError)
    assert err.code == "INVALID_ARGUMENT"
    assert err.details == {"value": ""}
