"""
Listener registry with copy-on-write generations.

Two generations of subscriptions are kept: "current" is the list being
iterated by a notification pass, "next" is the list that
subscribe/unsubscribe mutate. They alias until the first mutation after a
snapshot, at which point "next" becomes a private copy.

Each entry is the Unsubscribe handle of one registration, so removal
never touches another subscription.
"""

import threading
from typing import Any, Callable, List, Optional

from .errors import InvalidArgumentError

Listener = Callable[[], None]


class Unsubscribe:
    """
    One-shot handle removing a single subscription.

    Calling it more than once is a no-op.
    """

    def __init__(self, registry: "ListenerRegistry", listener: Listener) -> None:
        self._registry = registry
        self._listener = listener
        self._subscribed = True

    @property
    def listener(self) -> Listener:
        return self._listener

    @property
    def subscribed(self) -> bool:
        return self._subscribed

    def __call__(self) -> None:
        self._registry._unsubscribe(self)


class ListenerRegistry:
    """
    Ordered subscriber bookkeeping.

    Listeners are notified in registration order. Registering the same
    callable twice creates two independent subscriptions.
    """

    def __init__(self, lock: Optional[Any] = None) -> None:
        self._lock = lock if lock is not None else threading.RLock()
        self._current: List[Unsubscribe] = []
        self._next: List[Unsubscribe] = self._current

    def _ensure_can_mutate_next(self) -> None:
        if self._next is self._current:
            self._next = list(self._current)

    def register(self, listener: Listener) -> Unsubscribe:
        """
        Add listener to the next generation.

        Raises:
            InvalidArgumentError: If listener is not callable
        """
        if not callable(listener):
            raise InvalidArgumentError("Expected the listener to be a function.")
        handle = Unsubscribe(self, listener)
        with self._lock:
            self._ensure_can_mutate_next()
            self._next.append(handle)
        return handle

    def _unsubscribe(self, handle: Unsubscribe) -> None:
        with self._lock:
            if not handle._subscribed:
                return
            handle._subscribed = False
            self._ensure_can_mutate_next()
            index = next(i for i, entry in enumerate(self._next) if entry is handle)
            del self._next[index]

    def snapshot_for_notification(self) -> List[Listener]:
        """
        Promote "next" to "current" and return its listeners for iteration.

        Call exactly once per dispatch, right before notifying.
        """
        self._current = self._next
        return [entry.listener for entry in self._current]

    def __len__(self) -> int:
        return len(self._next)
