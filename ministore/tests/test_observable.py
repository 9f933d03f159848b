"""
Tests for the observable view.
"""

import pytest

from ministore import InvalidArgumentError


class Recorder:
    def __init__(self):
        self.values = []

    def next(self, state):
        self.values.append(state)


def test_observer_gets_current_state_immediately(store):
    recorder = Recorder()
    store.as_observable().subscribe(recorder)
    assert recorder.values == [0]


def test_observer_gets_every_change(store):
    recorder = Recorder()
    store.as_observable().subscribe(recorder)

    store.dispatch({"type": "INC"})
    store.dispatch({"type": "ADD", "amount": 3})

    assert recorder.values == [0, 1, 4]


def test_unsubscribe_stops_observer(store):
    recorder = Recorder()
    subscription = store.as_observable().subscribe(recorder)

    store.dispatch({"type": "INC"})
    subscription.unsubscribe()
    subscription.unsubscribe()
    store.dispatch({"type": "INC"})

    assert recorder.values == [0, 1]


def test_mapping_observer(store):
    values = []
    store.as_observable().subscribe({"next": values.append})
    store.dispatch({"type": "INC"})
    assert values == [0, 1]


def test_observer_without_next_is_allowed(store):
    class Silent:
        pass

    subscription = store.as_observable().subscribe(Silent())
    store.dispatch({"type": "INC"})
    subscription.unsubscribe()


@pytest.mark.parametrize("observer", [None, print, lambda state: None])
def test_observer_must_be_an_object(store, observer):
    with pytest.raises(InvalidArgumentError, match="observer"):
        store.as_observable().subscribe(observer)


def test_as_observable_returns_itself(store):
    observable = store.as_observable()
    assert observable.as_observable() is observable
