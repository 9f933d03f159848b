"""
Combine slice reducers into one reducer over a dict state.

Each key of the state is owned by one slice reducer, the way aggregates
are owned by their handlers.
"""

from collections.abc import Mapping
from typing import Any, Dict

from .core.actions import action_type
from .core.errors import InvalidArgumentError, InvalidTransitionError
from .core.reducer import ReducerFn


def combine_reducers(reducers: Mapping) -> ReducerFn:
    """
    Build a reducer from a mapping of key -> slice reducer.

    The combined reducer returns the previous state object when no slice
    changed, so listeners can compare by identity. Keys of the incoming
    state without a slice reducer are dropped.

    Raises:
        InvalidArgumentError: If a slice reducer is not callable
    """
    final: Dict[str, ReducerFn] = {}
    for key, reducer in reducers.items():
        if not callable(reducer):
            raise InvalidArgumentError(f"No reducer provided for key {key!r}.")
        final[key] = reducer

    def combination(state: Any, action: Any) -> Dict[str, Any]:
        if state is None:
            state = {}

        has_changed = len(state) != len(final)
        next_state: Dict[str, Any] = {}
        for key, reducer in final.items():
            previous = state.get(key)
            next_slice = reducer(previous, action)
            if next_slice is None:
                raise InvalidTransitionError(
                    f"Reducer for key {key!r} returned None for action type "
                    f"{action_type(action)!r}. Return the previous state to "
                    "ignore an action."
                )
            next_state[key] = next_slice
            has_changed = has_changed or next_slice is not previous
        return next_state if has_changed else state

    return combination
