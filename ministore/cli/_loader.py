"""
Resolve "module:attribute" references to reducers.
"""

import importlib
import json
from typing import Any, Iterator, List

from ..core.errors import InvalidArgumentError


def load_reducer(ref: str) -> Any:
    """
    Import a reducer given as "package.module:attribute".

    Raises:
        InvalidArgumentError: If ref is malformed or does not name a callable
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidArgumentError(f"Expected 'module:attribute', got {ref!r}")

    obj: Any = importlib.import_module(module_name)
    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise InvalidArgumentError(f"{module_name!r} has no attribute {attr_path!r}") from None

    if not callable(obj):
        raise InvalidArgumentError(f"{ref!r} is not callable")
    return obj


def iter_actions(lines: Iterator[str]) -> Iterator[Any]:
    for line in lines:
        if not line.strip():
            continue
        yield json.loads(line)


def read_actions(path: str) -> List[Any]:
    with open(path, "r", encoding="utf-8") as f:
        return list(iter_actions(f))
