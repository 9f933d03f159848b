"""
Function composition for enhancer authors.
"""

from functools import reduce
from typing import Any, Callable


def _identity(arg: Any) -> Any:
    return arg


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """
    Compose functions right to left.

    compose(f, g, h)(*args) == f(g(h(*args)))

    With no functions, returns the identity function; with one, returns it
    unchanged.
    """
    if not funcs:
        return _identity
    if len(funcs) == 1:
        return funcs[0]

    def _pair(a: Callable[..., Any], b: Callable[..., Any]) -> Callable[..., Any]:
        return lambda *args, **kwargs: a(b(*args, **kwargs))

    return reduce(_pair, funcs)
