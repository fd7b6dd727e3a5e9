from __future__ import annotations

import pytest

from config.settings import DEFAULT_USER_AGENTS, get_settings


@pytest.fixture(autouse=True)
def _fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def test_defaults(monkeypatch):
    for name in ("MAX_PAGES", "MAX_RETRIES", "RETRY_DELAY_SECONDS", "PROXIES", "USER_AGENTS",
                 "DEDUPE_POLICY", "ABORT_ON_BLOCKED", "OUTPUT_PATH", "PACING_MIN_SECONDS",
                 "PACING_MAX_SECONDS", "REQUEST_TIMEOUT"):
        monkeypatch.delenv(name, raising=False)
    s = get_settings()
    assert s.max_pages == 2
    assert s.max_retries == 3
    assert s.retry_delay_seconds == 5
    assert (s.pacing_min_seconds, s.pacing_max_seconds) == (5, 14)
    assert s.request_timeout_seconds == 10
    assert s.output_path == "linkedin_candidates.csv"
    assert s.user_agents == DEFAULT_USER_AGENTS
    assert s.proxies == ()
    assert s.abort_on_blocked is True
    assert s.dedupe_policy == "first"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("PROXIES", "http://p1:8080, http://p2:8080")
    monkeypatch.setenv("USER_AGENTS", "agent-one||agent-two")
    monkeypatch.setenv("ABORT_ON_BLOCKED", "false")
    monkeypatch.setenv("DEDUPE_POLICY", "LAST")
    monkeypatch.setenv("RANDOM_SEED", "7")
    s = get_settings()
    assert s.proxies == ("http://p1:8080", "http://p2:8080")
    assert s.user_agents == ("agent-one", "agent-two")
    assert s.abort_on_blocked is False
    assert s.dedupe_policy == "last"
    assert s.random_seed == 7


def test_invalid_pacing_range_rejected(monkeypatch):
    monkeypatch.setenv("PACING_MIN_SECONDS", "10")
    monkeypatch.setenv("PACING_MAX_SECONDS", "2")
    with pytest.raises(RuntimeError):
        get_settings()


def test_invalid_dedupe_policy_rejected(monkeypatch):
    monkeypatch.setenv("DEDUPE_POLICY", "sometimes")
    with pytest.raises(RuntimeError):
        get_settings()
