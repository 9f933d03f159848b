"""
Reducer: pure state transition functions.

The reducer is the heart of the store. It must be:
- Pure (no side effects, no I/O)
- Deterministic (same input -> same output)
- Total over the actions it declares

TransitionEngine holds the active reducer and the current state.
Reducer is a registry of per-type handlers that can serve as one.
"""

from typing import Any, Callable, Dict, Optional

from .actions import ActionTypes, action_type
from .errors import InvalidArgumentError, InvalidTransitionError

# Reducer signature: (current_state, action) -> next_state
ReducerFn = Callable[[Any, Any], Any]


class TransitionEngine:
    """
    Current state plus the reducer that produces the next one.

    State is only ever replaced by the reducer's return value. A reducer
    error leaves the previous state in place.
    """

    def __init__(self, reducer: ReducerFn, initial_state: Any = None) -> None:
        if not callable(reducer):
            raise InvalidArgumentError("Expected the reducer to be a function.")
        self._reducer = reducer
        self._state = initial_state

    @property
    def reducer(self) -> ReducerFn:
        return self._reducer

    def apply(self, action: Any) -> Any:
        """
        Apply action to the current state.

        Errors raised by the reducer propagate unchanged.

        Returns:
            The new state
        """
        next_state = self._reducer(self._state, action)
        self._state = next_state
        return next_state

    def replace(self, next_reducer: ReducerFn) -> None:
        """
        Swap the active reducer. The stored state is not touched.

        Raises:
            InvalidArgumentError: If next_reducer is not callable
        """
        if not callable(next_reducer):
            raise InvalidArgumentError("Expected the next reducer to be a function.")
        self._reducer = next_reducer

    def read(self) -> Any:
        """Return the current state by reference."""
        return self._state


class Reducer:
    """
    Registry of action handlers usable as a reducer.

    Usage:
        reducer = Reducer(initial_state={"n": 0})
        reducer.register("INC", handle_inc)
        store = create_store(reducer)
    """

    def __init__(self, initial_state: Any = None, strict: bool = False) -> None:
        self._handlers: Dict[Any, ReducerFn] = {}
        self._initial_state = initial_state
        self._strict = strict

    def register(self, type_: Any, handler: ReducerFn) -> None:
        """
        Register action handler.

        Args:
            type_: Action type
            handler: Pure function (current_state, action) -> next_state
        """
        if not callable(handler):
            raise InvalidArgumentError(f"Handler for {type_!r} must be callable.")
        self._handlers[type_] = handler

    def handler_for(self, type_: Any) -> Optional[ReducerFn]:
        return self._handlers.get(type_)

    def __call__(self, state: Any, action: Any) -> Any:
        """
        Apply the handler registered for the action's type.

        Raises:
            InvalidTransitionError: In strict mode, if no handler is registered
                for a non-reserved action type
        """
        if state is None:
            state = self._initial_state

        type_ = action_type(action)
        handler = self._handlers.get(type_)
        if handler is None:
            if self._strict and type_ != ActionTypes.INIT:
                raise InvalidTransitionError(f"No handler for action type: {type_!r}")
            return state
        return handler(state, action)
