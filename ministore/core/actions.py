"""
Action model for store dispatch.

Actions are plain records describing an intended state change. Any mapping
with a "type" key works; Action is a frozen record for callers that prefer
attribute access.
"""

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict

from .errors import InvalidActionError


class ActionTypes:
    """
    Action types reserved by the store.

    Compare against these constants, never against their literal text.
    """
    INIT = "@@ministore/INIT"


@dataclass(frozen=True)
class Action:
    """
    Immutable action record.

    Fields:
        type: Action type (e.g., "INC", "TodoAdded")
        payload: Action-specific data
        meta: Metadata (source, correlation id, etc.)
    """
    type: Any
    payload: Dict[str, Any] = field(default_factory=dict)
    meta: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.type,
            "payload": dict(self.payload),
            "meta": dict(self.meta),
        }


def is_plain_object(value: Any) -> bool:
    """
    Check whether value is a plain structured record.

    Mappings and dataclass instances qualify. Classes, callables, scalars,
    strings, sequences and None do not.
    """
    if isinstance(value, Mapping):
        return True
    return dataclasses.is_dataclass(value) and not isinstance(value, type)


def action_type(action: Any) -> Any:
    """
    Read the type of a plain record.

    Returns:
        The type value, or None when the record has no type
    """
    if isinstance(action, Mapping):
        return action.get("type")
    return getattr(action, "type", None)


def validate_action(action: Any) -> Any:
    """
    Validate an action before dispatch.

    Raises:
        InvalidActionError: If action is not a plain record or has no type
    """
    if not is_plain_object(action):
        raise InvalidActionError(
            "Actions must be plain objects (a mapping or a dataclass instance), "
            f"got {type(action).__name__}."
        )
    if action_type(action) is None:
        raise InvalidActionError(
            'Actions may not have a missing "type" property. '
            "Have you misspelled a constant?"
        )
    return action
