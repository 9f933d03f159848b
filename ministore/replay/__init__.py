"""
Replay an action sequence through a fresh store.

Replay must be 100% deterministic: same reducer + same actions -> same state.
"""

from .runner import ReplayResult, replay

__all__ = [
    "ReplayResult",
    "replay",
]
