from .cancellable import CancellationToken
from .config import Default
from .exceptions import IllegalStateError
from threading import Condition
from typing import Generic, Optional, Tuple, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')


class FutureState(object):
    pending = 0
    completed = 1
    cancelled = -1


class FutureCore(Generic[T]):
    """Completion/cancellation state machine of a single future.

    The result slot is written once by the execution driver through
    ``_publish``. Cancellation arrives through the shared token. Whichever of
    the two reaches the future first decides its terminal state.
    """

    def __init__(self, token=None):
        self._mutex = Condition()
        self._state = FutureState.pending
        self._value = None
        self._error = None
        self._error_retrieved = False
        self._token = token if token is not None else CancellationToken()
        # must be last, listener fires immediately on an already raised token
        self._token.add_listener(self._on_cancelled)

    def __del__(self):
        with self._mutex:
            if (self._state == FutureState.completed
                    and self._error is not None
                    and not self._error_retrieved):
                Default.on_unhandled_error(self._error)

    @property
    def token(self):
        """Cancellation token shared with the rest of the chain."""
        return self._token

    @property
    def is_completed(self):
        """Returns True if future is completed or cancelled."""
        with self._mutex:
            return self._state != FutureState.pending

    @property
    def is_cancelled(self):
        """Returns True if cancellation of the chain was requested."""
        return self._token.is_cancelled

    def cancel(self):
        """Requests cancellation of future and of every chained future
        that has not completed yet.

        The running computation is not interrupted, its outcome is discarded.

        Returns:
            True if this call raised the shared cancellation signal. The
            future itself may still complete with its value if its
            computation finishes before the signal reaches it.
        """
        with self._mutex:
            if self._state == FutureState.completed:
                return False
        # token listeners lock other futures of the chain
        return self._token.cancel()

    def wait(self, timeout=None):
        """Blocking wait for future to complete or be cancelled.

        Args:
            timeout: time in seconds to wait for completion (default - infinite).

        Returns:
            True if future is completed or cancelled.
        """
        with self._mutex:
            return self._mutex.wait_for(self._is_terminal, timeout)

    def get(self) -> Tuple[Optional[T], Optional[BaseException]]:
        """Blocking wait for future outcome.

        Returns:
            ``(value, error)`` pair of completed future, or ``(None, None)``
            if the future was cancelled first.
        """
        with self._mutex:
            self._mutex.wait_for(self._is_terminal)
            return self._outcome()

    def get_with_timeout(self, timeout) -> Tuple[Optional[T], Optional[BaseException], bool]:
        """Blocking wait for future outcome bounded by timeout.

        Args:
            timeout: time in seconds to wait for completion.

        Returns:
            ``(value, error, timed_out)``. When the timeout elapses first
            ``(None, None, True)`` is returned and the future is left
            untouched, so later calls may still observe its outcome.
        """
        with self._mutex:
            if not self._mutex.wait_for(self._is_terminal, timeout):
                return None, None, True
            value, error = self._outcome()
            return value, error, False

    def _publish(self, value, error):
        """Stores computation outcome and wakes up waiters.

        Returns:
            False if the future was cancelled first and the outcome discarded.
        """
        with self._mutex:
            if self._state == FutureState.cancelled:
                discarded = True
            elif self._state == FutureState.completed:
                raise IllegalStateError("result was already set")
            else:
                discarded = False
                self._value = value
                self._error = error
                self._state = FutureState.completed
                self._mutex.notify_all()

        if discarded:
            logger.debug("Discarding outcome of cancelled %r", self)
            return False

        self._token.remove_listener(self._on_cancelled)
        return True

    def _on_cancelled(self):
        with self._mutex:
            if self._state != FutureState.pending:
                return
            self._state = FutureState.cancelled
            self._mutex.notify_all()
        logger.debug("%r cancelled before completion", self)

    def _is_terminal(self):
        return self._state != FutureState.pending

    def _outcome(self):
        if self._state == FutureState.cancelled:
            return None, None
        if self._error is not None:
            self._error_retrieved = True
        return self._value, self._error

    def __repr__(self):
        res = self.__class__.__name__
        with self._mutex:
            if self._state == FutureState.completed:
                if self._error is not None:
                    res += '<error={!r}>'.format(self._error)
                else:
                    res += '<result={!r}>'.format(self._value)
            elif self._state == FutureState.cancelled:
                res += '<CANCELLED>'
            else:
                res += '<PENDING>'
        return res
