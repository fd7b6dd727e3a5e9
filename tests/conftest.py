from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import List, Optional

import pytest


def pytest_configure():
    # Ensure project root is on sys.path for absolute imports like 'pipelines.steps'
    root = Path(__file__).resolve().parents[1]
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))
    # Set test environment knobs
    os.environ.setdefault("RUN_ENV", "test")


class FakeResponse:
    def __init__(self, status_code: int = 200, text: str = ""):
        self.status_code = status_code
        self.text = text


class FakeSession:
    """Replays queued responses (or raises queued exceptions) per URL, recording calls."""

    def __init__(self, routes: Optional[dict] = None, default=None):
        self.routes = {url: list(items) for url, items in (routes or {}).items()}
        self.default = default
        self.calls: List[dict] = []

    def get(self, url, headers=None, proxies=None, timeout=None, allow_redirects=True):
        self.calls.append({
            "url": url,
            "headers": dict(headers or {}),
            "proxies": proxies,
            "timeout": timeout,
            "allow_redirects": allow_redirects,
        })
        queue = self.routes.get(url)
        item = queue.pop(0) if queue else self.default
        if item is None:
            return FakeResponse(404, "")
        if isinstance(item, Exception):
            raise item
        return item


class RecordingDelayPolicy:
    def __init__(self):
        self.pacing_calls = 0
        self.retry_calls: List[float] = []

    def pacing_delay(self) -> None:
        self.pacing_calls += 1

    def retry_delay(self, seconds: float) -> None:
        self.retry_calls.append(seconds)


def result_html(slug: str, name: str = "", snippet: str = "", href: Optional[str] = None) -> str:
    href = href if href is not None else f"https://www.linkedin.com/in/{slug}?trk=public"
    return (
        '<div class="tF2Cxc">'
        f'<a href="{href}"><div class="e2BEnf hAyfcb"><span class="AP7Wnd">{name}</span></div></a>'
        f'<div class="VwiC3b yXK7lf MUxGbd yDYNvb lyLwlc lEBKkf">{snippet}</div>'
        '</div>'
    )


def malformed_result_html(snippet: str = "No profile here") -> str:
    return (
        '<div class="tF2Cxc">'
        '<a href="https://example.com/about">Example</a>'
        f'<div class="VwiC3b yXK7lf MUxGbd yDYNvb lyLwlc lEBKkf">{snippet}</div>'
        '</div>'
    )


def search_page_html(*results: str) -> str:
    return "<html><body><div id='search'>" + "".join(results) + "</div></body></html>"


def profile_html(name: str, body: str = "") -> str:
    return (
        "<html><body>"
        f'<h1 class="top-card-layout__title"> {name} </h1>'
        f"<section>{body}</section>"
        "</body></html>"
    )


@pytest.fixture
def fake_session_cls():
    return FakeSession


@pytest.fixture
def fake_response_cls():
    return FakeResponse


@pytest.fixture
def recording_delay():
    return RecordingDelayPolicy()


@pytest.fixture
def settings(monkeypatch):
    """Fresh settings with tiny limits and no real sleeping values."""
    from config.settings import get_settings

    monkeypatch.setenv("MAX_PAGES", "2")
    monkeypatch.setenv("MAX_RETRIES", "3")
    monkeypatch.setenv("RETRY_DELAY_SECONDS", "5")
    monkeypatch.setenv("PACING_MIN_SECONDS", "0")
    monkeypatch.setenv("PACING_MAX_SECONDS", "0")
    monkeypatch.delenv("PROXIES", raising=False)
    monkeypatch.delenv("OUTPUT_PATH", raising=False)
    get_settings.cache_clear()
    yield get_settings()
    get_settings.cache_clear()


# html.parser rejects unknown marked-section keywords
UNPARSABLE_HTML = "<html><![foo[ x ]]><body>broken</body></html>"
