import pytest

from studio.clients import supabase as supabase_module
from studio.clients.supabase import SupabaseClient, SupabaseError


class FakeResponse:
    def __init__(self, status_code=200, data=None):
        self.status_code = status_code
        self._data = data
        self.ok = 200 <= status_code < 300
        self.content = b"" if data is None else b"x"

    def json(self):
        if self._data is None:
            raise ValueError("no body")
        return self._data


@pytest.fixture
def recorded(monkeypatch):
    calls = []
    responses = []

    def fake_request(method, url, params=None, json=None, headers=None, timeout=None):
        calls.append({"method": method, "url": url, "params": params, "json": json, "headers": headers})
        return responses.pop(0)

    monkeypatch.setattr(supabase_module.requests, "request", fake_request)
    monkeypatch.setattr(supabase_module.time, "sleep", lambda seconds: None)
    return calls, responses


def test_select_encodes_filters_and_order(recorded):
    calls, responses = recorded
    responses.append(FakeResponse(data=[{"id": "t1"}]))
    client = SupabaseClient("https://db.example.test/", "key")

    rows = client.select(
        "manual_templates",
        filters={"print_size": "4R", "is_active": True},
        order=[("sort_order", True), ("created_at", False)],
        limit=5,
    )

    assert rows == [{"id": "t1"}]
    call = calls[0]
    assert call["method"] == "GET"
    assert call["url"] == "https://db.example.test/rest/v1/manual_templates"
    assert call["params"] == {
        "select": "*",
        "print_size": "eq.4R",
        "is_active": "eq.true",
        "order": "sort_order.asc,created_at.desc",
        "limit": "5",
    }
    assert call["headers"]["apikey"] == "key"
    assert call["headers"]["Authorization"] == "Bearer key"


def test_retries_on_rate_limit(recorded):
    calls, responses = recorded
    responses.extend([FakeResponse(429), FakeResponse(429), FakeResponse(data=[])])
    client = SupabaseClient("https://db.example.test", "key")

    assert client.select("sessions") == []
    assert len(calls) == 3


def test_error_response_raises_with_message(recorded):
    _, responses = recorded
    responses.append(FakeResponse(400, data={"message": "column does not exist"}))
    client = SupabaseClient("https://db.example.test", "key")

    with pytest.raises(SupabaseError, match="column does not exist") as exc_info:
        client.select("sessions")
    assert exc_info.value.status_code == 400


def test_upsert_sets_conflict_target(recorded):
    calls, responses = recorded
    responses.append(FakeResponse(201, data=[{"position": 1}]))
    client = SupabaseClient("https://db.example.test", "key")

    client.insert("session_templates", {"position": 1}, upsert_on="session_id,position")

    call = calls[0]
    assert call["method"] == "POST"
    assert call["params"] == {"on_conflict": "session_id,position"}
    assert call["headers"]["Prefer"] == "return=representation,resolution=merge-duplicates"


def test_delete_with_empty_body(recorded):
    calls, responses = recorded
    responses.append(FakeResponse(204))
    client = SupabaseClient("https://db.example.test", "key")

    client.delete("sessions", {"id": "s1"})

    assert calls[0]["params"] == {"id": "eq.s1"}
