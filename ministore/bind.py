"""
Bind action creators to a dispatch function.
"""

import functools
import logging
from collections.abc import Mapping
from typing import Any, Callable, Dict, Union

from .core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

ActionCreator = Callable[..., Any]
Dispatch = Callable[[Any], Any]


def bind_action_creator(action_creator: ActionCreator, dispatch: Dispatch) -> Callable[..., Any]:
    @functools.wraps(action_creator)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return dispatch(action_creator(*args, **kwargs))

    return bound


def bind_action_creators(
    action_creators: Union[ActionCreator, Mapping],
    dispatch: Dispatch,
) -> Union[Callable[..., Any], Dict[str, Callable[..., Any]]]:
    """
    Wrap action creators so that calling them dispatches their result.

    Args:
        action_creators: A single action creator, or a mapping of them
        dispatch: Usually store.dispatch

    Returns:
        A bound function for a single creator, otherwise a dict with the
        same keys. Entries that are not callable are skipped with a
        warning.

    Raises:
        InvalidArgumentError: If action_creators is neither callable nor a mapping
    """
    if callable(action_creators):
        return bind_action_creator(action_creators, dispatch)

    if not isinstance(action_creators, Mapping):
        received = "None" if action_creators is None else type(action_creators).__name__
        raise InvalidArgumentError(
            "bind_action_creators expected a mapping or a function, "
            f"instead received {received}."
        )

    bound_creators: Dict[str, Callable[..., Any]] = {}
    for key, action_creator in action_creators.items():
        if callable(action_creator):
            bound_creators[key] = bind_action_creator(action_creator, dispatch)
        else:
            logger.warning(
                "NonFunctionActionCreator: bind_action_creators expected a function "
                "action creator for key %r, instead received type %r.",
                key,
                type(action_creator).__name__,
                extra={"action_creator_key": key},
            )
    return bound_creators
