"""
ministore

A minimal, predictable container for application state: one state value,
changed only by serially applied pure reducers, observed through
subscriptions.
"""

from .bind import bind_action_creator, bind_action_creators
from .combine import combine_reducers
from .compose import compose
from .core import (
    Action,
    ActionTypes,
    IllegalReentryError,
    InvalidActionError,
    InvalidArgumentError,
    InvalidTransitionError,
    Reducer,
    Store,
    StoreError,
    create_enhanced_store,
    create_store,
)
from .replay import ReplayResult, replay

__version__ = "0.1.0"

__all__ = [
    "Action",
    "ActionTypes",
    "Reducer",
    "Store",
    "create_store",
    "create_enhanced_store",
    "combine_reducers",
    "compose",
    "bind_action_creator",
    "bind_action_creators",
    "replay",
    "ReplayResult",
    "StoreError",
    "InvalidArgumentError",
    "InvalidActionError",
    "IllegalReentryError",
    "InvalidTransitionError",
]
