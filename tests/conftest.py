"""pytest global fixtures: environment isolation."""

import pytest

from quicklog.infrastructure.logging import reset_logger

_ENV_VARS = (
    "JIRA_BASE_URL",
    "JIRA_EMAIL",
    "JIRA_API_TOKEN",
    "TEMPO_API_TOKEN",
    "ROUNDING_MODE",
    "TIMER_NOTIFY_AT",
    "QUICKLOG_STATE_FILE",
    "QUICKLOG_HTTP_TIMEOUT",
)


@pytest.fixture(autouse=True)
def no_real_services(monkeypatch, tmp_path):
    """No credentials and a throwaway state file, so nothing reaches Jira or Tempo."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("QUICKLOG_STATE_FILE", str(tmp_path / "quicklog-state.json"))
    # the structured logger binds its output stream on first use
    reset_logger()
    yield
    reset_logger()
