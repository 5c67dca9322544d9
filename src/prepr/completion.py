"""
Single-fire completion cell for one request.

The transport can report several terminal signals for the same call (an
error after a close, a close racing a normal end). Completion records
them and delivers exactly one outcome to the callback, chosen by priority
rather than arrival order: error, then premature close, then the normal
result.
"""

from typing import Any, Callable, Optional

from .config import get_logger
from .exceptions import PreprError, RequestClosedError

logger = get_logger("completion")

Callback = Callable[[Optional[PreprError], Any], None]


class Completion:
    """Collects terminal signals and settles a call exactly once."""

    def __init__(self, callback: Callback):
        self._callback = callback
        self._error: Optional[PreprError] = None
        self._closed: Optional[RequestClosedError] = None
        self._finished = False
        self._finish_error: Optional[PreprError] = None
        self._finish_result: Any = None
        self._settled = False

    @property
    def settled(self) -> bool:
        return self._settled

    def fail(self, error: PreprError) -> None:
        """Record a transport error. The first one wins."""
        if self._error is None:
            self._error = error

    def close(self, error: Optional[RequestClosedError] = None) -> None:
        """Record that the connection closed before the response ended."""
        if self._closed is None:
            self._closed = error or RequestClosedError()

    def finish(self, error: Optional[PreprError], result: Any) -> None:
        """Record the classified outcome of a fully received response."""
        if not self._finished:
            self._finished = True
            self._finish_error = error
            self._finish_result = result

    def settle(self) -> bool:
        """
        Deliver the highest-priority outcome to the callback.

        Returns:
            True if this call invoked the callback, False if the completion
            had already been settled.
        """
        if self._settled:
            logger.debug("Ignoring duplicate completion")
            return False

        if self._error is not None:
            error, result = self._error, None
        elif self._closed is not None:
            error, result = self._closed, None
        elif self._finished:
            error, result = self._finish_error, self._finish_result
        else:
            raise RuntimeError("settle() called before any terminal signal")

        self._settled = True
        self._callback(error, None if error is not None else result)
        return True
