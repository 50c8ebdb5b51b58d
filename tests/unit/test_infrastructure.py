"""Cache, key-value stores, settings and structured logging."""

import io
import json

from quicklog.config.settings import normalize_base_url, resolve_rounding_mode, resolve_settings
from quicklog.domain.enums import RoundingMode
from quicklog.infrastructure.cache import MemoryCache, make_cache_key
from quicklog.infrastructure.kv_store import JsonFileKeyValueStore, MemoryKeyValueStore
from quicklog.infrastructure.logging import StructuredLogger


class _Tick:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def test_memory_cache_ttl_and_invalidate():
    tick = _Tick()
    cache = MemoryCache(default_ttl=10.0, clock=tick)
    cache.set("k", "v")
    assert cache.get("k") == "v"
    tick.now += 11
    assert cache.get("k") is None
    cache.set("k", "v2")
    cache.invalidate("k")
    assert cache.get("k") is None
    assert cache.stats["hits"] == 1
    assert cache.stats["misses"] == 2


def test_memory_cache_evicts_soonest_expiry():
    cache = MemoryCache(default_ttl=10.0, max_size=2, clock=_Tick())
    cache.set("a", 1, ttl=5)
    cache.set("b", 2)
    cache.set("c", 3)
    assert cache.get("a") is None
    assert cache.get("b") == 2
    assert cache.get("c") == 3


def test_make_cache_key_is_stable():
    assert make_cache_key("worklogs", {"b": 1, "a": 2}) == make_cache_key("worklogs", {"a": 2, "b": 1})


def test_memory_kv_store():
    store = MemoryKeyValueStore()
    assert store.get_item("x") is None
    store.set_item("x", "1")
    assert store.get_item("x") == "1"
    store.remove_item("x")
    assert store.get_item("x") is None


def test_json_file_kv_store(tmp_path):
    path = tmp_path / "nested" / "state.json"
    store = JsonFileKeyValueStore(path)
    store.set_item("timer", '{"a": 1}')
    assert json.loads(path.read_text(encoding="utf-8")) == {"timer": '{"a": 1}'}
    assert JsonFileKeyValueStore(path).get_item("timer") == '{"a": 1}'
    store.remove_item("timer")
    assert store.get_item("timer") is None


def test_json_file_kv_store_ignores_corrupt_file(tmp_path):
    path = tmp_path / "state.json"
    path.write_text("{not json", encoding="utf-8")
    assert JsonFileKeyValueStore(path).get_item("timer") is None


def test_resolve_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("JIRA_BASE_URL", "https://acme.atlassian.net/")
    monkeypatch.setenv("JIRA_EMAIL", "dev@acme.test")
    monkeypatch.setenv("JIRA_API_TOKEN", "t1")
    monkeypatch.setenv("ROUNDING_MODE", "UP15")
    monkeypatch.setenv("QUICKLOG_STATE_FILE", str(tmp_path / "s.json"))
    settings = resolve_settings()
    assert settings.jira_base_url == "acme.atlassian.net"
    assert settings.jira_configured
    assert settings.rounding_mode == RoundingMode.UP_15
    assert settings.timer_notify_at == "1,4,8"
    assert settings.state_file == tmp_path / "s.json"


def test_settings_defaults():
    settings = resolve_settings()
    assert settings.rounding_mode == RoundingMode.NONE
    assert not settings.jira_configured
    assert resolve_rounding_mode("sideways") == RoundingMode.NONE
    assert normalize_base_url("http://x.example.com") == "x.example.com"


def test_structured_logger_masks_tokens(monkeypatch):
    monkeypatch.setenv("TEMPO_API_TOKEN", "super-secret-token")
    out = io.StringIO()
    logger = StructuredLogger(trace_id="t-1", output=out)
    logger.event("request", header="Bearer super-secret-token")
    logger.step_start("fetch")
    logger.step_end("fetch", count=2)
    lines = [json.loads(line) for line in out.getvalue().splitlines()]
    assert lines[0]["header"] == "Bearer ***"
    assert lines[0]["trace_id"] == "t-1"
    assert lines[2]["event"] == "step_end"
    assert lines[2]["count"] == 2
    assert "duration_ms" in lines[2]
