"""Runtime settings resolved from the environment."""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from quicklog.domain.constants import DEFAULT_TIMER_NOTIFY_AT
from quicklog.domain.enums import RoundingMode

_DEFAULT_STATE_FILE = Path.home() / ".config" / "quicklog" / "state.json"


def _clean(value: str | None) -> str:
    return str(value or "").strip()


def resolve_rounding_mode(raw: str | None = None) -> RoundingMode:
    value = _clean(raw if raw is not None else os.getenv("ROUNDING_MODE")).lower()
    try:
        return RoundingMode(value)
    except ValueError:
        return RoundingMode.NONE


def normalize_base_url(raw: str | None) -> str:
    """``https://acme.atlassian.net/`` -> ``acme.atlassian.net``."""
    value = _clean(raw)
    for prefix in ("https://", "http://"):
        if value.lower().startswith(prefix):
            value = value[len(prefix):]
    return value.rstrip("/")


class Settings(BaseModel):
    jira_base_url: str = Field(default="")
    jira_email: str = Field(default="")
    jira_api_token: str = Field(default="")
    tempo_api_token: str = Field(default="")
    rounding_mode: RoundingMode = Field(default=RoundingMode.NONE)
    timer_notify_at: str = Field(default=DEFAULT_TIMER_NOTIFY_AT)
    state_file: Path = Field(default=_DEFAULT_STATE_FILE)
    http_timeout: float = Field(default=10.0)

    @property
    def jira_configured(self) -> bool:
        return bool(self.jira_base_url and self.jira_email and self.jira_api_token)


def resolve_settings() -> Settings:
    state_file = _clean(os.getenv("QUICKLOG_STATE_FILE"))
    timeout = _clean(os.getenv("QUICKLOG_HTTP_TIMEOUT"))
    return Settings(
        jira_base_url=normalize_base_url(os.getenv("JIRA_BASE_URL")),
        jira_email=_clean(os.getenv("JIRA_EMAIL")),
        jira_api_token=_clean(os.getenv("JIRA_API_TOKEN")),
        tempo_api_token=_clean(os.getenv("TEMPO_API_TOKEN")),
        rounding_mode=resolve_rounding_mode(),
        timer_notify_at=_clean(os.getenv("TIMER_NOTIFY_AT")) or DEFAULT_TIMER_NOTIFY_AT,
        state_file=Path(state_file).expanduser() if state_file else _DEFAULT_STATE_FILE,
        http_timeout=float(timeout) if timeout else 10.0,
    )


__all__ = ["Settings", "normalize_base_url", "resolve_rounding_mode", "resolve_settings"]
