"""Tempo worklog reader against a mocked transport."""

import httpx
import pytest

from quicklog.adapters.tempo_client import TempoClient, tempo_day_url, tempo_week_url
from quicklog.config.settings import Settings
from quicklog.infrastructure.cache import MemoryCache
from quicklog.shared.exceptions import ExternalServiceError, KeyMissingError

_SETTINGS = Settings(
    jira_base_url="acme.atlassian.net",
    jira_email="dev@acme.test",
    jira_api_token="jira-secret",
    tempo_api_token="tempo-secret",
)


def _client(handler, settings: Settings = _SETTINGS, cache: MemoryCache | None = None) -> TempoClient:
    http = httpx.Client(transport=httpx.MockTransport(handler))
    return TempoClient(settings, cache or MemoryCache(), http=http)


def _handler(calls: list[httpx.Request], worklogs_payload):
    def handle(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        if request.url.path == "/rest/api/3/myself":
            return httpx.Response(200, json={"accountId": "acc-1"})
        if request.url.path == "/4/worklogs/user/acc-1":
            return httpx.Response(200, json=worklogs_payload)
        return httpx.Response(404, text="not found")

    return handle


def test_get_my_worklogs_reads_results():
    calls: list[httpx.Request] = []
    payload = {
        "results": [
            {
                "tempoWorklogId": 5,
                "issue": {"id": 10001, "key": "ABC-1"},
                "timeSpentSeconds": 1800,
                "startDate": "2026-10-16",
                "startTime": "09:30:00",
                "author": {"accountId": "acc-1"},
            }
        ]
    }
    client = _client(_handler(calls, payload))

    logs = client.get_my_worklogs("2026-10-16", "2026-10-16")

    assert len(logs) == 1
    assert logs[0].issue.key == "ABC-1"
    assert logs[0].time_spent_seconds == 1800
    tempo_call = calls[-1]
    assert tempo_call.url.host == "api.tempo.io"
    assert tempo_call.url.params["from"] == "2026-10-16"
    assert tempo_call.headers["Authorization"] == "Bearer tempo-secret"
    assert calls[0].headers["Authorization"].startswith("Basic ")


def test_bare_list_payload_and_account_id_cached():
    calls: list[httpx.Request] = []
    client = _client(_handler(calls, [{"issue": {"id": 1}, "timeSpentSeconds": 60, "startDate": "2026-10-16"}]))

    client.get_my_worklogs("2026-10-16", "2026-10-16")
    client.get_my_worklogs("2026-10-17", "2026-10-17")

    myself_calls = [c for c in calls if c.url.path == "/rest/api/3/myself"]
    assert len(myself_calls) == 1

    client.invalidate()
    client.get_my_worklogs("2026-10-18", "2026-10-18")
    assert len([c for c in calls if c.url.path == "/rest/api/3/myself"]) == 2


def test_http_error_becomes_external_service_error():
    def handle(request: httpx.Request) -> httpx.Response:
        if request.url.path == "/rest/api/3/myself":
            return httpx.Response(200, json={"accountId": "acc-1"})
        return httpx.Response(401, text="token expired")

    with pytest.raises(ExternalServiceError) as excinfo:
        _client(handle).get_my_worklogs("2026-10-16", "2026-10-16")
    assert excinfo.value.status_code == 401
    assert "token expired" in str(excinfo.value)


def test_transport_error_becomes_external_service_error():
    def handle(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(ExternalServiceError):
        _client(handle).account_id()


def test_missing_credentials():
    with pytest.raises(KeyMissingError):
        _client(_handler([], []), settings=_SETTINGS.model_copy(update={"tempo_api_token": ""})).get_my_worklogs(
            "2026-10-16", "2026-10-16"
        )
    with pytest.raises(KeyMissingError):
        _client(_handler([], []), settings=Settings()).account_id()


def test_tempo_links():
    assert tempo_week_url("acme.atlassian.net") == "https://acme.atlassian.net/jira/tempo-app/my-work/week"
    assert (
        tempo_day_url("acme.atlassian.net", "2026-10-16")
        == "https://acme.atlassian.net/jira/tempo-app/my-work/day?date=2026-10-16"
    )
