"""
Classification of transport-level failures.

Maps exceptions raised by httpx (or the socket layer underneath it) onto
the SDK's TransportError family.
"""

from typing import Optional

import httpx

from ..exceptions import RequestClosedError, TimeoutError, TransportError

# Exceptions the executor treats as transport failures.
TRANSPORT_EXCEPTIONS = (httpx.HTTPError, httpx.InvalidURL, OSError)

_RESET_MARKERS = ("econnreset", "connection reset")


def _iter_causes(exception: Optional[BaseException]):
    seen = set()
    while exception is not None and id(exception) not in seen:
        seen.add(id(exception))
        yield exception
        exception = exception.__cause__ or exception.__context__


def is_connection_reset(exception: BaseException) -> bool:
    """Check the exception and its causes for a connection reset."""
    for error in _iter_causes(exception):
        if isinstance(error, ConnectionResetError):
            return True
        message = str(error).lower()
        if any(marker in message for marker in _RESET_MARKERS):
            return True
    return False


def classify_transport_exception(
    exception: BaseException, response_started: bool = False
) -> TransportError:
    """
    Convert a transport exception to an SDK error.

    Args:
        exception: The exception raised while sending or streaming
        response_started: True once response headers were received

    Returns:
        TimeoutError for timeouts and connection resets, RequestClosedError
        when the peer hung up mid-body, TransportError otherwise.
    """
    if isinstance(exception, httpx.TimeoutException) or is_connection_reset(exception):
        return TimeoutError(cause=exception)

    if response_started and isinstance(exception, httpx.RemoteProtocolError):
        return RequestClosedError(cause=exception)

    return TransportError(f"request failed: {exception}", cause=exception)
