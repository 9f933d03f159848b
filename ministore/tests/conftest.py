import pytest

from ministore import create_store

from .sample_reducers import counter


@pytest.fixture
def store():
    return create_store(counter)
