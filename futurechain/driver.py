"""Execution driver: runs computations on their own threads and publishes
their outcome into a future exactly once."""

from .config import Default
from threading import Thread
import itertools
import logging

logger = logging.getLogger(__name__)

_counter = itertools.count(1)


def capture(fn, *args, **kwargs):
    """Calls function and returns its outcome as ``(value, error)`` pair.

    An exception raised by the function becomes the error.
    """
    try:
        return fn(*args, **kwargs), None
    except Exception as ex:
        return None, ex


def execute(future, fn, *args, **kwargs):
    """Starts computation of future on a new thread.

    Args:
        future: pending future to publish outcome into.
        fn: function returning ``(value, error)`` pair.

    Returns:
        The future passed in.
    """
    assert callable(fn), "execute expects callable"

    def run():
        try:
            value, error = fn(*args, **kwargs)
        except Exception as ex:
            # fn broke the (value, error) contract, reported on collection
            # if nobody retrieves it
            value, error = None, ex
        except BaseException as ex:
            future._publish(None, ex)
            raise
        future._publish(value, error)

    name = '{}-{}'.format(Default.THREAD_NAME_PREFIX, next(_counter))
    thread = Thread(target=run, name=name, daemon=Default.DAEMON_THREADS)
    thread.start()
    logger.debug("Started %s for %r", name, future)
    return future
