"""
Dispatch coordinator: the store's state machine.

    IDLE --dispatch--> DISPATCHING --reducer returned--> NOTIFYING --> IDLE

A dispatch observed outside IDLE raises IllegalReentryError before the
reducer or any listener runs. Every phase is released in a finally block,
so a failing reducer or listener never wedges the store.
"""

import threading
from enum import Enum
from typing import Any, Optional

from .actions import ActionTypes, validate_action
from .errors import IllegalReentryError
from .listeners import ListenerRegistry
from .reducer import ReducerFn, TransitionEngine


class DispatchState(Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"
    NOTIFYING = "notifying"


class DispatchCoordinator:
    """
    Validates actions, guards against reentry and runs
    "apply reducer -> snapshot listeners -> notify" as one step.

    The lock is reentrant: another thread waits for the dispatch to finish,
    the same thread gets through and is rejected by the state check.
    """

    def __init__(
        self,
        engine: TransitionEngine,
        registry: ListenerRegistry,
        lock: Optional[Any] = None,
    ) -> None:
        self._engine = engine
        self._registry = registry
        self._lock = lock if lock is not None else threading.RLock()
        self._state = DispatchState.IDLE

    @property
    def state(self) -> DispatchState:
        return self._state

    def dispatch(self, action: Any) -> Any:
        """
        Apply action and notify listeners.

        Returns:
            The action, unchanged

        Raises:
            InvalidActionError: If action is not a plain record or has no type
            IllegalReentryError: If called from a reducer or a listener
        """
        validate_action(action)

        with self._lock:
            self._check_idle()

            self._state = DispatchState.DISPATCHING
            try:
                self._engine.apply(action)
            finally:
                self._state = DispatchState.IDLE

            listeners = self._registry.snapshot_for_notification()
            self._state = DispatchState.NOTIFYING
            try:
                for listener in listeners:
                    listener()
            finally:
                self._state = DispatchState.IDLE

        return action

    def replace_reducer(self, next_reducer: ReducerFn) -> None:
        """
        Install next_reducer and dispatch INIT so it can set up its state.

        Raises:
            InvalidArgumentError: If next_reducer is not callable
            IllegalReentryError: If called from a reducer or a listener
        """
        with self._lock:
            self._check_idle()
            self._engine.replace(next_reducer)
            self.dispatch({"type": ActionTypes.INIT})

    def _check_idle(self) -> None:
        if self._state is DispatchState.DISPATCHING:
            raise IllegalReentryError("Reducers may not dispatch actions.")
        if self._state is DispatchState.NOTIFYING:
            raise IllegalReentryError("Listeners may not dispatch actions.")
