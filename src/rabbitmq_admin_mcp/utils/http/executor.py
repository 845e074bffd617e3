"""Request execution pipeline for management API calls.

Every admin operation funnels through :class:`RequestExecutor`, which:

1. Sends the assembled request through the transport (single attempt)
2. Classifies the response status
3. Emits exactly one log record with structured fields
4. Returns the response or raises a typed failure

Log records carry their fields in ``extra`` so structured handlers can pick
them up: ``request_method``, ``request_url``, ``request_params``,
``response_code``, ``response_message`` and ``response_content``.
Password-like parameters are redacted before they reach a log record or an
exception message.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple, Union

import httpx

from ...exceptions import RequestFailure, TransportFailure
from ...models.base_models import AdminRequest
from ..security import safe_log_dict
from .request import AdminResponse, is_error_status
from .transport import HttpTransport

LoggerLike = Union[logging.Logger, logging.LoggerAdapter]

# Long listings (queues, nodes) are cut in log records
MAX_LOGGED_CONTENT = 2048


def _redacted_params(request: AdminRequest) -> List[Tuple[str, Any]]:
    safe = safe_log_dict(dict(request.params))
    return [(key, safe[key]) for key, _ in request.params]


def _logged_content(response: AdminResponse) -> str:
    text = response.text
    if len(text) > MAX_LOGGED_CONTENT:
        return text[:MAX_LOGGED_CONTENT] + "..."
    return text


class RequestExecutor:
    """Execute admin requests, log the outcome, translate failures.

    The executor holds no per-call state. It is safe to share across
    threads as long as the transport is.

    :param transport: Transport performing the HTTP exchange
    :type transport: HttpTransport
    :param logger: Optional logger; defaults to this module's logger, which
                   stays silent unless the application configures logging
    :type logger: Optional[LoggerLike]
    """

    def __init__(self, transport: HttpTransport, logger: Optional[LoggerLike] = None):
        self.transport = transport
        self.logger: LoggerLike = (
            logger if logger is not None else logging.getLogger(__name__)
        )

    def set_logger(self, new_logger: LoggerLike) -> None:
        """Replace the logger used for request records."""
        self.logger = new_logger

    def execute(self, request: AdminRequest) -> AdminResponse:
        """Execute one request.

        :param request: Assembled admin request
        :type request: AdminRequest
        :return: The broker's response for a non-error status
        :rtype: AdminResponse
        :raises TransportFailure: If no response could be obtained
        :raises RequestFailure: If the broker answered with 4xx/5xx
        """
        method = request.method.value
        url = request.full_url
        params = _redacted_params(request)
        fields: Dict[str, Any] = {
            "request_method": method,
            "request_url": url,
            "request_params": dict(params),
        }

        try:
            response = self.transport.send(request)
        except (httpx.HTTPError, OSError) as e:
            fields.update(
                response_code=None,
                response_message=f"{type(e).__name__}: {e}",
                response_content=None,
            )
            self.logger.error(
                "Error executing request! [%s] %s: %s", method, url, e, extra=fields
            )
            raise TransportFailure(method, url, e) from e

        fields.update(
            response_code=response.status_code,
            response_message=response.status_message,
            response_content=_logged_content(response),
        )

        if not is_error_status(response.status_code):
            self.logger.info(
                "Request execution success! [%s] %s -> %s",
                method,
                url,
                response.status_code,
                extra=fields,
            )
            return response

        self.logger.error(
            "Error executing request! [%s] %s -> %s %s",
            method,
            url,
            response.status_code,
            response.status_message,
            extra=fields,
        )
        raise RequestFailure(
            method=method,
            url=url,
            params=params,
            status_code=response.status_code,
            status_message=response.status_message,
            broker_reason=response.broker_reason(),
        )
