"""
Store facade and construction functions.

A store is the single point of truth for one application instance. Create
it explicitly and pass it where it is needed; there is no global store.
"""

import logging
import threading
from typing import Any, Callable, Optional

from .actions import ActionTypes
from .dispatch import DispatchCoordinator, DispatchState
from .errors import InvalidArgumentError
from .listeners import Listener, ListenerRegistry, Unsubscribe
from .observable import StoreObservable
from .reducer import ReducerFn, TransitionEngine

logger = logging.getLogger(__name__)

# (create_store) -> create_store'
StoreCreator = Callable[..., "Store"]
Enhancer = Callable[[StoreCreator], StoreCreator]


class Store:
    """
    State container.

    Construction dispatches INIT once so the reducer can set up its state.

    State changes only through dispatch. Listeners run after every
    dispatch, in registration order, against the listener set as of the
    end of the reducer call.
    """

    def __init__(self, reducer: ReducerFn, preloaded_state: Any = None) -> None:
        self._engine = TransitionEngine(reducer, preloaded_state)
        lock = threading.RLock()
        self._listeners = ListenerRegistry(lock)
        self._coordinator = DispatchCoordinator(self._engine, self._listeners, lock)
        self._coordinator.dispatch({"type": ActionTypes.INIT})

    @property
    def dispatch_state(self) -> DispatchState:
        return self._coordinator.state

    def get_state(self) -> Any:
        """Return the current state. Treat it as read-only."""
        return self._engine.read()

    def dispatch(self, action: Any) -> Any:
        """
        Dispatch an action.

        Returns:
            The action, unchanged

        Raises:
            InvalidActionError: If action is not a plain record or has no type
            IllegalReentryError: If called from a reducer or a listener
        """
        return self._coordinator.dispatch(action)

    def subscribe(self, listener: Listener) -> Unsubscribe:
        """
        Register a zero-argument listener.

        Returns:
            Idempotent unsubscribe handle
        """
        unsubscribe = self._listeners.register(listener)
        logger.debug("Listener subscribed (%d active)", len(self._listeners))
        return unsubscribe

    def replace_reducer(self, next_reducer: ReducerFn) -> None:
        """
        Swap the active reducer and dispatch INIT.

        Raises:
            InvalidArgumentError: If next_reducer is not callable
        """
        self._coordinator.replace_reducer(next_reducer)
        logger.debug("Reducer replaced")

    def as_observable(self) -> StoreObservable:
        return StoreObservable(self)


def create_store(
    reducer: ReducerFn,
    preloaded_state: Any = None,
    *,
    enhancer: Optional[Enhancer] = None,
) -> Store:
    """
    Create a store and bootstrap it with an INIT dispatch.

    Args:
        reducer: Pure function (state, action) -> state
        preloaded_state: Initial state; None lets the reducer pick a default
        enhancer: Optional (create_store) -> create_store' wrapper

    Raises:
        InvalidArgumentError: If reducer or enhancer is not callable
    """
    if enhancer is not None:
        if not callable(enhancer):
            raise InvalidArgumentError("Expected the enhancer to be a function.")
        return enhancer(create_store)(reducer, preloaded_state)

    if not callable(reducer):
        raise InvalidArgumentError("Expected the reducer to be a function.")

    store = Store(reducer, preloaded_state)
    logger.debug("Store created with reducer %r", reducer)
    return store


def create_enhanced_store(
    reducer: ReducerFn, enhancer: Enhancer, preloaded_state: Any = None
) -> Store:
    """
    Create a store through enhancer.

    Raises:
        InvalidArgumentError: If reducer or enhancer is not callable
    """
    if not callable(enhancer):
        raise InvalidArgumentError("Expected the enhancer to be a function.")
    return create_store(reducer, preloaded_state, enhancer=enhancer)
