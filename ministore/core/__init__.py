"""
Core state container primitives.

This module provides:
- Store: single mutable state changed only through dispatch
- TransitionEngine: active reducer plus current state
- ListenerRegistry: copy-on-write subscriber lists
- DispatchCoordinator: validation, reentry guard, notification
- Reducer: per-type handler registry usable as a reducer
- Canonical: deterministic state serialization
"""

from .actions import Action, ActionTypes, action_type, is_plain_object, validate_action
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str, compute_state_hash
from .dispatch import DispatchCoordinator, DispatchState
from .errors import (
    IllegalReentryError,
    InvalidActionError,
    InvalidArgumentError,
    InvalidTransitionError,
    StoreError,
)
from .listeners import ListenerRegistry, Unsubscribe
from .observable import ObservableSubscription, StoreObservable
from .reducer import Reducer, TransitionEngine
from .store import Store, create_enhanced_store, create_store

__all__ = [
    "Action",
    "ActionTypes",
    "action_type",
    "is_plain_object",
    "validate_action",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "compute_state_hash",
    "DispatchCoordinator",
    "DispatchState",
    "StoreError",
    "InvalidArgumentError",
    "InvalidActionError",
    "IllegalReentryError",
    "InvalidTransitionError",
    "ListenerRegistry",
    "Unsubscribe",
    "ObservableSubscription",
    "StoreObservable",
    "Reducer",
    "TransitionEngine",
    "Store",
    "create_store",
    "create_enhanced_store",
]
