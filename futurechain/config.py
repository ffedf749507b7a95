import traceback
import logging

logger = logging.getLogger(__package__)


def log_error_handler(cls, tb):
    logger.error('Future exception was never retrieved:\n%s', ''.join(tb))


class Default(object):
    # Called when a future completed with an error that no caller ever
    # retrieved through get(), get_with_timeout() or then()
    UNHANDLED_FAILURE_CALLBACK = staticmethod(log_error_handler)

    # Threads started by the execution driver
    THREAD_NAME_PREFIX = 'future'
    DAEMON_THREADS = True

    @staticmethod
    def on_unhandled_error(exc):
        tb = traceback.format_exception(exc.__class__, exc,
                                        exc.__traceback__)
        Default.UNHANDLED_FAILURE_CALLBACK(exc.__class__, tb)
