import pytest

from factories import FakeSupabaseClient


@pytest.fixture
def fake_client():
    return FakeSupabaseClient()
