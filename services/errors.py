from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base error for the candidate scraper."""


class FetchError(ScraperError):
    def __init__(self, url: str, status: Optional[int] = None, message: str = ""):
        self.url = url
        self.status = status
        super().__init__(message or f"Fetch failed for {url} (status={status})")


class FetchBlockedError(FetchError):
    """Rate-limited or redirected away; the target should not be retried."""

    def __init__(self, url: str, status: Optional[int] = None):
        super().__init__(url, status, f"Blocked (status={status}) while fetching {url}")


class FetchFailedError(FetchError):
    """Retry ceiling reached without a successful response."""

    def __init__(self, url: str, status: Optional[int] = None, attempts: int = 0, reason: str = ""):
        self.attempts = attempts
        detail = f": {reason}" if reason else ""
        super().__init__(url, status, f"Giving up on {url} after {attempts} attempts (last status={status}){detail}")


class RunCancelled(ScraperError):
    pass


class OutputWriteError(ScraperError):
    def __init__(self, path: str, reason: str):
        self.path = path
        super().__init__(f"Failed to write candidates to {path}: {reason}")


class ExtractionError(ScraperError):
    """Markup could not be parsed into a document."""

    def __init__(self, reason: str, url: str = ""):
        self.url = url
        where = f" for {url}" if url else ""
        super().__init__(f"Failed to parse HTML{where}: {reason}")
