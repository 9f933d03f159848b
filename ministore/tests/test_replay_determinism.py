"""
Tests for replay determinism.

Critical: Replay must produce identical state across multiple runs.
"""

from ministore import Reducer, replay
from ministore.core.canonical import canonical_json_str


def make_reducer():
    r = Reducer(initial_state={"n": 0})
    r.register("INC", lambda cur, action: {"n": cur["n"] + action["inc"]})
    r.register("SET", lambda cur, action: {"n": action["val"]})
    return r


def test_replay_determinism_100_runs():
    """Replay same actions 100 times must produce identical state."""
    actions = [{"type": "INC", "inc": i} for i in range(10)]

    results = set()
    for _ in range(100):
        result = replay(make_reducer(), actions)
        results.add(canonical_json_str(result.state))

    assert len(results) == 1

    final = replay(make_reducer(), actions)
    assert final.state == {"n": 45}
    assert final.applied == 10


def test_replay_partial():
    actions = [{"type": "SET", "val": i} for i in range(20)]

    result = replay(make_reducer(), actions, to_index=9)

    assert result.applied == 10
    assert result.state == {"n": 9}


def test_replay_with_preloaded_state():
    result = replay(make_reducer(), [{"type": "INC", "inc": 1}], preloaded_state={"n": 41})
    assert result.state == {"n": 42}


def test_replay_empty_runs_only_init():
    result = replay(make_reducer(), [])
    assert result.applied == 0
    assert result.state == {"n": 0}
