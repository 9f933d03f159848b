"""
Replay runner: reconstruct state from a list of actions.
"""

from dataclasses import dataclass
from typing import Any, Iterable, Optional

from ..core.reducer import ReducerFn
from ..core.store import create_store


@dataclass(frozen=True)
class ReplayResult:
    """
    Result of replay operation.

    Fields:
        state: Final state after applying actions
        applied: Number of actions dispatched (INIT not counted)
    """
    state: Any
    applied: int


def replay(
    reducer: ReducerFn,
    actions: Iterable[Any],
    preloaded_state: Any = None,
    to_index: Optional[int] = None,
) -> ReplayResult:
    """
    Dispatch actions in order against a new store.

    Args:
        reducer: Pure reducer
        actions: Actions to dispatch
        preloaded_state: Initial state passed to create_store
        to_index: Stop after this zero-based index (inclusive, None = all)

    Returns:
        ReplayResult with final state and count
    """
    store = create_store(reducer, preloaded_state)
    count = 0

    for index, action in enumerate(actions):
        if to_index is not None and index > to_index:
            break
        store.dispatch(action)
        count += 1

    return ReplayResult(state=store.get_state(), applied=count)
