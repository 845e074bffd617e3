"""Structured exception classes for the RabbitMQ admin client."""

import json
from typing import Any, Dict, Optional, Sequence, Tuple


class RabbitMQAdminError(Exception):
    """Base exception for all RabbitMQ admin errors.

    Every failure raised by the client derives from this class, so callers
    can catch one type and still reach the structured context through
    :attr:`code` and :attr:`details`.

    :param message: Human-readable error message
    :param code: Optional error code for programmatic handling
    :param details: Optional dictionary containing additional error context
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        """Initialize the exception with message, code, and details."""
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format.

        :return: Dictionary containing error code, message, and details
        """
        return {
            "error": self.code,
            "message": self.message,
            "details": self.details,
        }

    def to_json(self) -> str:
        """Convert exception to JSON string.

        :return: JSON-encoded string representation of the exception
        """
        return json.dumps(self.to_dict(), default=str)


def format_params(params: Sequence[Tuple[str, Any]]) -> str:
    """Render request parameters as ``key=value`` pairs for diagnostics."""
    return ", ".join(f"{key}={value}" for key, value in params)


class TransportFailure(RabbitMQAdminError):
    """Raised when the HTTP exchange could not be completed.

    Covers connection refusals, DNS failures, TLS errors and timeouts.
    The original transport exception is kept on :attr:`original_error`
    and chained as ``__cause__``.

    :param method: HTTP method of the failed request
    :param url: Target URL of the failed request
    :param original_error: Exception raised by the transport
    """

    def __init__(self, method: str, url: str, original_error: Exception):
        """Initialize transport failure with the request and cause."""
        message = (
            f"Error executing request [{method}] {url}: "
            f"{type(original_error).__name__}: {original_error}"
        )
        details = {
            "method": method,
            "url": url,
            "error_type": type(original_error).__name__,
            "original_error": str(original_error),
        }
        super().__init__(message=message, code="TRANSPORT_ERROR", details=details)
        self.method = method
        self.url = url
        self.original_error = original_error


class RequestFailure(RabbitMQAdminError):
    """Raised when the broker answers with a 4xx or 5xx status.

    :param method: HTTP method of the failed request
    :param url: Target URL of the failed request
    :param params: Query and body parameters sent, as ``(key, value)`` pairs
    :param status_code: HTTP status code returned by the broker
    :param status_message: HTTP reason phrase returned by the broker
    :param broker_reason: Optional error text from the broker's JSON body
    """

    def __init__(
        self,
        method: str,
        url: str,
        params: Sequence[Tuple[str, Any]],
        status_code: int,
        status_message: str,
        broker_reason: Optional[str] = None,
    ):
        """Initialize request failure with the request and response context."""
        reason = status_message
        if broker_reason and broker_reason != status_message:
            reason = f"{status_message} ({broker_reason})" if status_message else broker_reason
        message = (
            f"Error executing request [{method}] {url} "
            f"({format_params(params)}): {status_code} {reason}"
        )
        details: Dict[str, Any] = {
            "method": method,
            "url": url,
            "params": [list(pair) for pair in params],
            "status_code": status_code,
            "status_message": status_message,
        }
        if broker_reason:
            details["broker_reason"] = broker_reason
        super().__init__(message=message, code="REQUEST_ERROR", details=details)
        self.method = method
        self.url = url
        self.params = list(params)
        self.status_code = status_code
        self.status_message = status_message
        self.broker_reason = broker_reason


class DecodeFailure(RabbitMQAdminError):
    """Raised when a successful response body is not valid JSON.

    The status code of the response is preserved; only decoding failed.

    :param url: URL the response came from
    :param status_code: HTTP status code of the response
    :param content_type: Content type reported by the broker
    :param reason: Optional description of the parse failure
    """

    def __init__(
        self,
        url: str,
        status_code: int,
        content_type: str,
        reason: Optional[str] = None,
    ):
        """Initialize decode failure with response context."""
        message = (
            f"Could not decode response from {url} "
            f"(status {status_code}, content type {content_type or 'unknown'!r})"
        )
        if reason:
            message = f"{message}: {reason}"
        details = {
            "url": url,
            "status_code": status_code,
            "content_type": content_type,
        }
        super().__init__(message=message, code="DECODE_ERROR", details=details)
        self.url = url
        self.status_code = status_code
        self.content_type = content_type


class ConfigurationError(RabbitMQAdminError):
    """Raised for configuration-related errors.

    :param message: Description of the configuration error
    :param setting: Optional name of the problematic setting
    """

    def __init__(self, message: str, setting: Optional[str] = None):
        """Initialize configuration error with message and optional setting."""
        details = {}
        if setting:
            details["setting"] = setting
        super().__init__(message=message, code="CONFIGURATION_ERROR", details=details)


class InvalidArgumentError(RabbitMQAdminError):
    """Raised when an operation argument cannot form a valid request.

    Raised before anything is sent, e.g. for an empty user or queue name.

    :param message: Description of the invalid argument
    :param value: The rejected value
    """

    def __init__(self, message: str, value: Any = None):
        """Initialize with the rejected value."""
        super().__init__(
            message=message, code="INVALID_ARGUMENT", details={"value": value}
        )
        self.value = value
