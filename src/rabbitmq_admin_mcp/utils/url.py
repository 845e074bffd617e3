"""URL composition for the management API.

Every path segment (vhost, user, queue, exchange, node names) is
percent-encoded on its own before the segments are joined, so names
containing ``/`` or ``%`` reach the broker intact. The default vhost ``/``
therefore always renders as ``%2F``.
"""

from typing import Iterable, Optional, Sequence, Tuple
from urllib.parse import quote, urlencode

from ..exceptions import InvalidArgumentError

DEFAULT_VHOST = "/"
DEFAULT_VHOST_ENCODED = quote(DEFAULT_VHOST, safe="")


def encode_segment(segment: str) -> str:
    """Percent-encode a single path segment, including ``/``.

    The encoded default vhost token (``%2F`` or ``%2f``) is passed through
    unchanged so it addresses the default vhost, not one named ``%2F``.

    :param segment: Raw segment value
    :type segment: str
    :return: Encoded segment
    :rtype: str
    :raises InvalidArgumentError: If the segment is empty
    """
    if segment is None or str(segment) == "":
        raise InvalidArgumentError(
            "URL path segments must not be empty", value=segment
        )
    segment = str(segment)
    if segment.upper() == DEFAULT_VHOST_ENCODED:
        return DEFAULT_VHOST_ENCODED
    return quote(segment, safe="")


def render_query(params: Iterable[Tuple[str, str]]) -> str:
    """Encode ordered ``(key, value)`` pairs as a query string."""
    return urlencode(list(params))


def build_url(
    base_url: str,
    segments: Sequence[str],
    query: Optional[Sequence[Tuple[str, str]]] = None,
) -> str:
    """Join a base URL and raw path segments into an absolute URL.

    :param base_url: Management API base URL, with or without trailing slash
    :type base_url: str
    :param segments: Raw path segments, each encoded exactly once here
    :type segments: Sequence[str]
    :param query: Optional ordered query parameters
    :type query: Optional[Sequence[Tuple[str, str]]]
    :return: Absolute URL
    :rtype: str

    .. example::
       >>> build_url("http://localhost:15672/api", ["queues", "/", "q1"])
       'http://localhost:15672/api/queues/%2F/q1'
    """
    url = base_url.rstrip("/")
    if segments:
        url = url + "/" + "/".join(encode_segment(s) for s in segments)
    if query:
        url = f"{url}?{render_query(query)}"
    return url
