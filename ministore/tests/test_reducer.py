"""
Tests for the transition engine and the handler registry reducer.

Critical: Reducer must be pure (no side effects, deterministic).
"""

import pytest

from ministore import (
    Action,
    ActionTypes,
    InvalidArgumentError,
    InvalidTransitionError,
    Reducer,
    create_store,
)
from ministore.core import TransitionEngine
from ministore.core.canonical import canonical_json_str


def make_reducer(**kwargs):
    r = Reducer(initial_state={"n": 0}, **kwargs)

    def inc_handler(cur, action):
        return {"n": cur["n"] + action["inc"]}

    def mul_handler(cur, action):
        return {"n": cur["n"] * action["mul"]}

    r.register("INC", inc_handler)
    r.register("MUL", mul_handler)
    return r


def test_engine_apply_stores_result():
    engine = TransitionEngine(lambda s, a: (s or 0) + 1)

    assert engine.apply({"type": "X"}) == 1
    assert engine.read() == 1


def test_engine_keeps_state_when_reducer_raises():
    def reducer(state, action):
        if action["type"] == "FAIL":
            raise KeyError("boom")
        return "ok"

    engine = TransitionEngine(reducer, "start")
    with pytest.raises(KeyError):
        engine.apply({"type": "FAIL"})
    assert engine.read() == "start"


def test_engine_replace_does_not_touch_state():
    engine = TransitionEngine(lambda s, a: s, {"a": 1})
    replacement = lambda s, a: None  # noqa: E731

    engine.replace(replacement)

    assert engine.read() == {"a": 1}
    assert engine.reducer is replacement
    with pytest.raises(InvalidArgumentError):
        engine.replace(3)


def test_reducer_deterministic_output():
    """Same (state, action) must produce same output."""
    r = make_reducer()
    action = {"type": "INC", "inc": 2}

    s1 = r({"n": 1}, action)
    s2 = r({"n": 1}, action)

    assert canonical_json_str(s1) == canonical_json_str(s2)


def test_reducer_immutability():
    """Reducer must not mutate input state."""
    r = make_reducer()
    s0 = {"n": 3}

    s1 = r(s0, {"type": "MUL", "mul": 2})

    assert s0 == {"n": 3}
    assert s1 == {"n": 6}


def test_reducer_sequence_in_store():
    """(0+5)*2+3 = 13"""
    store = create_store(make_reducer())
    for action in [
        {"type": "INC", "inc": 5},
        {"type": "MUL", "mul": 2},
        {"type": "INC", "inc": 3},
    ]:
        store.dispatch(action)

    assert store.get_state() == {"n": 13}


def test_unknown_type_returns_state_unchanged():
    r = make_reducer()
    state = {"n": 9}
    assert r(state, {"type": "NOPE"}) is state


def test_strict_reducer_rejects_unknown_types_but_not_init():
    store = create_store(make_reducer(strict=True))
    assert store.get_state() == {"n": 0}

    with pytest.raises(InvalidTransitionError, match="NOPE"):
        store.dispatch({"type": "NOPE"})
    assert store.get_state() == {"n": 0}


def test_handlers_accept_dataclass_actions():
    r = Reducer(initial_state=[])
    r.register("PUSH", lambda cur, action: cur + [action.payload["value"]])

    store = create_store(r)
    store.dispatch(Action(type="PUSH", payload={"value": 1}))
    store.dispatch(Action(type="PUSH", payload={"value": 2}))

    assert store.get_state() == [1, 2]


def test_register_rejects_non_callable_handler():
    r = Reducer()
    with pytest.raises(InvalidArgumentError):
        r.register("X", "handler")
    assert r.handler_for("X") is None


def test_action_to_dict():
    action = Action(type=ActionTypes.INIT, payload={"a": 1})
    assert action.to_dict() == {"type": ActionTypes.INIT, "payload": {"a": 1}, "meta": {}}
