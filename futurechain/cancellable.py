from threading import Lock


class CancellationToken(object):
    """One-shot cancellation signal shared by every future of a chain."""

    def __init__(self):
        self._cancelled = False
        self._listeners = []
        self._mutex = Lock()

    @property
    def is_cancelled(self):
        with self._mutex:
            return self._cancelled

    def cancel(self):
        """Raises the signal and notifies listeners.

        Returns:
            True if this call raised the signal, False if it was already raised.
        """
        with self._mutex:
            if self._cancelled:
                return False
            self._cancelled = True
            listeners, self._listeners = self._listeners, []

        for fn in listeners:
            fn()
        return True

    def add_listener(self, fn):
        """Registers function to be called once the signal is raised.

        If the signal was already raised the function is called immediately.
        """
        assert callable(fn), "CancellationToken.add_listener expects callable"
        with self._mutex:
            if not self._cancelled:
                self._listeners.append(fn)
                return
        fn()

    def remove_listener(self, fn):
        """Returns the number of listener entries removed."""
        with self._mutex:
            remaining = [f for f in self._listeners if f != fn]
            removed = len(self._listeners) - len(remaining)
            if removed:
                self._listeners[:] = remaining
            return removed

    def __repr__(self):
        state = 'CANCELLED' if self.is_cancelled else 'ACTIVE'
        return '{}<{}>'.format(self.__class__.__name__, state)
