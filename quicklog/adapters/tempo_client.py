"""Tempo worklog reader.

Environment: JIRA_BASE_URL, JIRA_EMAIL, JIRA_API_TOKEN, TEMPO_API_TOKEN
Tempo API docs: https://apidocs.tempo.io/
"""

from __future__ import annotations

import logging
from typing import Any, Optional
from urllib.parse import quote

import httpx

from quicklog.config.settings import Settings
from quicklog.domain.models import TempoWorklog
from quicklog.infrastructure.cache import MemoryCache
from quicklog.shared.exceptions import ExternalServiceError, KeyMissingError

_logger = logging.getLogger("quicklog.tempo")

TEMPO_API_BASE = "https://api.tempo.io/4"
ACCOUNT_ID_CACHE_KEY = "jira.account_id"
ACCOUNT_ID_TTL = 12 * 3600.0


def tempo_week_url(jira_base_url: str) -> str:
    return f"https://{jira_base_url}/jira/tempo-app/my-work/week"


def tempo_day_url(jira_base_url: str, date_iso: str) -> str:
    return f"https://{jira_base_url}/jira/tempo-app/my-work/day?date={quote(date_iso, safe='')}"


class TempoClient:
    """Reads the current user's worklogs; one attempt per call."""

    def __init__(self, settings: Settings, cache: MemoryCache, http: Optional[httpx.Client] = None):
        self._settings = settings
        self._cache = cache
        self._http = http or httpx.Client(timeout=settings.http_timeout)

    def close(self) -> None:
        self._http.close()

    def _request(self, service: str, url: str, **kwargs: Any) -> Any:
        try:
            resp = self._http.get(url, **kwargs)
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as exc:
            body = exc.response.text[:300]
            message = f"HTTP {exc.response.status_code} {exc.response.reason_phrase}"
            if body:
                message += f" – {body}"
            raise ExternalServiceError(service, message, status_code=exc.response.status_code) from None
        except httpx.TimeoutException:
            raise ExternalServiceError(service, f"request timed out after {self._settings.http_timeout}s") from None
        except httpx.HTTPError as exc:
            raise ExternalServiceError(service, f"request failed: {exc}") from None

    def account_id(self) -> str:
        cached = self._cache.get(ACCOUNT_ID_CACHE_KEY)
        if cached:
            return cached

        settings = self._settings
        if not settings.jira_base_url:
            raise KeyMissingError("JIRA_BASE_URL")
        if not settings.jira_email or not settings.jira_api_token:
            raise KeyMissingError("JIRA_API_TOKEN")

        me = self._request(
            "jira",
            f"https://{settings.jira_base_url}/rest/api/3/myself",
            auth=(settings.jira_email, settings.jira_api_token),
            headers={"Accept": "application/json"},
        )
        account_id = str(me.get("accountId") or "")
        if not account_id:
            raise ExternalServiceError("jira", "response did not contain an accountId")
        self._cache.set(ACCOUNT_ID_CACHE_KEY, account_id, ttl=ACCOUNT_ID_TTL)
        return account_id

    def invalidate(self) -> None:
        self._cache.invalidate(ACCOUNT_ID_CACHE_KEY)

    def _tempo_headers(self) -> dict[str, str]:
        if not self._settings.tempo_api_token:
            raise KeyMissingError("TEMPO_API_TOKEN")
        return {
            "Authorization": f"Bearer {self._settings.tempo_api_token}",
            "Accept": "application/json",
        }

    def get_my_worklogs(self, date_from: str, date_to: str) -> list[TempoWorklog]:
        headers = self._tempo_headers()
        account_id = self.account_id()
        payload = self._request(
            "tempo",
            f"{TEMPO_API_BASE}/worklogs/user/{account_id}",
            params={"from": date_from, "to": date_to},
            headers=headers,
        )
        rows = payload if isinstance(payload, list) else (payload or {}).get("results") or []
        worklogs = [TempoWorklog.model_validate(row) for row in rows]
        _logger.info("fetched %d worklogs for %s..%s", len(worklogs), date_from, date_to)
        return worklogs


__all__ = ["TEMPO_API_BASE", "TempoClient", "tempo_day_url", "tempo_week_url"]
