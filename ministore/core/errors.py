"""
Exception types for the state container.
"""


class StoreError(Exception):
    """Base class for all store errors."""
    pass


class InvalidArgumentError(StoreError, TypeError):
    """Raised when a reducer, listener, enhancer or observer has the wrong shape."""
    pass


class InvalidActionError(StoreError, TypeError):
    """Raised when a dispatched action is not a plain record or has no type."""
    pass


class IllegalReentryError(StoreError, RuntimeError):
    """Raised when dispatch is called while a dispatch is already in progress."""
    pass


class InvalidTransitionError(StoreError):
    """Raised when a reducer cannot produce a valid next state."""
    pass
