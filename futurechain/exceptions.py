class Error(Exception):
    """Base class for all future-related exceptions."""
    pass


class IllegalStateError(Error):
    """The operation is not allowed in the future's current state."""
    pass
