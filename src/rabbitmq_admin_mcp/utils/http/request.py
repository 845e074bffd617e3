"""Response handling for management API calls.

This module provides the response side of the execution pipeline: a
wrapper holding the status line and raw body of one exchange, lazy JSON
decoding, and the status classification used to decide between success
and failure.
"""

import json
from typing import Any, Optional

import httpx

from ...exceptions import DecodeFailure

_NOT_DECODED = object()


def is_error_status(status_code: int) -> bool:
    """Check whether a status code denotes a failed request.

    Client and server errors (400-599) are failures. Everything else,
    including 3xx responses that reach the client, counts as success.

    :param status_code: HTTP status code
    :type status_code: int
    :return: True if the status code is in the 400-599 range
    :rtype: bool
    """
    return 400 <= status_code <= 599


def is_json_content_type(content_type: str) -> bool:
    """Check whether a Content-Type header announces JSON."""
    media_type = (content_type or "").split(";", 1)[0].strip().lower()
    return media_type == "application/json" or media_type.endswith("+json")


class AdminResponse:
    """Result of one management API exchange.

    The body is kept raw; :meth:`decode` parses it on first use and caches
    the result.

    :param status_code: HTTP status code
    :type status_code: int
    :param status_message: HTTP reason phrase
    :type status_message: str
    :param raw_body: Undecoded response body
    :type raw_body: bytes
    :param content_type: Content-Type header value, empty if absent
    :type content_type: str
    :param url: URL the response came from, used in decode errors
    :type url: str
    """

    def __init__(
        self,
        status_code: int,
        status_message: str = "",
        raw_body: bytes = b"",
        content_type: str = "",
        url: str = "",
    ):
        self.status_code = status_code
        self.status_message = status_message
        self.raw_body = raw_body
        self.content_type = content_type
        self.url = url
        self._decoded: Any = _NOT_DECODED
        self._decode_error: Optional[str] = None

    @classmethod
    def from_httpx(cls, response: httpx.Response, url: str = "") -> "AdminResponse":
        """Build a response wrapper from an ``httpx.Response``."""
        return cls(
            status_code=response.status_code,
            status_message=response.reason_phrase,
            raw_body=response.content,
            content_type=response.headers.get("content-type", ""),
            url=url,
        )

    @property
    def text(self) -> str:
        """Response body decoded as UTF-8 text."""
        return self.raw_body.decode("utf-8", errors="replace")

    def _try_decode(self) -> None:
        if self._decoded is not _NOT_DECODED or self._decode_error is not None:
            return
        if not is_json_content_type(self.content_type):
            self._decode_error = "content type is not JSON"
            return
        try:
            self._decoded = json.loads(self.raw_body)
        except ValueError as e:
            self._decode_error = str(e)

    @property
    def decoded_body(self) -> Optional[Any]:
        """Parsed JSON body, or None when the body is not valid JSON."""
        self._try_decode()
        if self._decoded is _NOT_DECODED:
            return None
        return self._decoded

    def decode(self) -> Any:
        """Return the parsed JSON body.

        :return: Decoded JSON value
        :rtype: Any
        :raises DecodeFailure: If the body is not JSON content
        """
        self._try_decode()
        if self._decoded is _NOT_DECODED:
            raise DecodeFailure(
                url=self.url,
                status_code=self.status_code,
                content_type=self.content_type,
                reason=self._decode_error,
            )
        return self._decoded

    def broker_reason(self) -> Optional[str]:
        """Error text from a broker error body.

        The broker answers errors with ``{"error": ..., "reason": ...}``.
        ``reason`` is preferred unless it only repeats the status line.
        """
        body = self.decoded_body
        if not isinstance(body, dict):
            return None
        reason = body.get("reason")
        error = body.get("error")
        if reason and str(reason) != self.status_message:
            return str(reason)
        if error:
            return str(error)
        return str(reason) if reason else None

    def is_error(self) -> bool:
        """Check if the response status denotes a failure."""
        return is_error_status(self.status_code)

    def __repr__(self) -> str:
        return f"<AdminResponse [{self.status_code} {self.status_message}]>"
