"""Futures that run computations on their own threads, support cancellation
shared across a chain and composition through ``then``."""

from .cancellable import CancellationToken
from .config import Default
from .exceptions import Error, IllegalStateError
from .future import Future, new_future

__all__ = ['CancellationToken', 'Default', 'Error', 'IllegalStateError',
           'Future', 'new_future']
