from .future_core import FutureCore
from .driver import capture, execute
from typing import Callable, TypeVar
import logging

logger = logging.getLogger(__name__)

T = TypeVar('T')
R = TypeVar('R')


class Future(FutureCore[T]):
    @classmethod
    def successful(cls, result=None):
        """Returns future completed with provided value."""
        f = cls()
        f._publish(result, None)
        return f

    @classmethod
    def failed(cls, error):
        """Returns future completed with provided error."""
        assert isinstance(error, BaseException), "Future.failed expects exception instance"
        f = cls()
        f._publish(None, error)
        return f

    @classmethod
    def completed(cls, fun, *args, **kwargs):
        """Returns future completed synchronously from outcome of provided function."""
        f = cls()
        f._publish(*capture(fun, *args, **kwargs))
        return f

    def then(self, step: Callable[[T], R]) -> 'Future[R]':
        """Returns future which runs provided function on the value of this one.

        The new future shares cancellation with this one. Error or
        cancellation of this future is passed through without calling the
        function, so the first error stops the rest of the chain.

        Args:
            step: function that accepts value of this future and returns
            value of the next one (or raises to fail it).
        """
        assert callable(step), "Future.then expects callable"
        parent = self

        def run_step():
            value, error = parent.get()
            if error is not None:
                return value, error
            if parent.is_cancelled:
                logger.debug("Chain cancelled, skipping %r", step)
                return value, error
            return capture(step, value)

        return execute(type(self)(self._token), run_step)


def new_future(fn: Callable[..., T], *args, **kwargs) -> Future[T]:
    """Starts computation on its own thread and returns future of its outcome.

    Args:
        fn: function computing the value, an exception raised by it becomes
        the error of the future.
    """
    assert callable(fn), "new_future expects callable"
    return execute(Future(), capture, fn, *args, **kwargs)
