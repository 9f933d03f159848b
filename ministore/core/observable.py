"""
Observable view of a store.

Built only on subscribe + get_state: a new observer receives the current
state at once and then after every dispatch.
"""

import inspect
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Callable, Optional

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from .store import Store


def _next_callback(observer: Any) -> Optional[Callable[[Any], None]]:
    if isinstance(observer, Mapping):
        return observer.get("next")
    return getattr(observer, "next", None)


class ObservableSubscription:
    def __init__(self, unsubscribe: Callable[[], None]) -> None:
        self._unsubscribe = unsubscribe

    def unsubscribe(self) -> None:
        self._unsubscribe()


class StoreObservable:
    """Minimal observable over store state changes."""

    def __init__(self, store: "Store") -> None:
        self._store = store

    def subscribe(self, observer: Any) -> ObservableSubscription:
        """
        Subscribe an observer exposing an optional next(state).

        Raises:
            InvalidArgumentError: If observer is None or a bare function
        """
        if observer is None or inspect.isroutine(observer):
            raise InvalidArgumentError("Expected the observer to be an object.")

        store = self._store

        def observe_state() -> None:
            on_next = _next_callback(observer)
            if on_next is not None:
                on_next(store.get_state())

        observe_state()
        return ObservableSubscription(store.subscribe(observe_state))

    def as_observable(self) -> "StoreObservable":
        return self
