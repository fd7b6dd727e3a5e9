"""
Plain HTTP GET with fixed-delay retries and blocked-status short-circuiting.
"""
from __future__ import annotations

import logging
import threading
from typing import Any, Optional

import requests

from ports.delay import DelayPolicyPort
from ports.identity import IdentityProviderPort
from services.errors import FetchBlockedError, FetchFailedError, RunCancelled


# Rate limit and anti-scraping redirect; retrying only digs the hole deeper
BLOCKED_STATUS_CODES = frozenset({429, 302})


class PageFetcher:
    """Fetches pages with a fresh identity per attempt."""

    def __init__(
        self,
        identity_provider: IdentityProviderPort,
        delay_policy: DelayPolicyPort,
        session: Optional[Any] = None,
        max_retries: int = 3,
        retry_delay_seconds: float = 5.0,
        timeout_seconds: float = 10,
        cancel_event: Optional[threading.Event] = None,
    ):
        if max_retries < 1:
            raise ValueError("max_retries must be at least 1")
        self.identity_provider = identity_provider
        self.delay_policy = delay_policy
        self.session = session or requests.Session()
        self.max_retries = max_retries
        self.retry_delay_seconds = retry_delay_seconds
        self.timeout_seconds = timeout_seconds
        self.cancel_event = cancel_event
        self.requests_made = 0

    def fetch(self, url: str, referer: str, pace: bool = True) -> str:
        """Return the response body for ``url``.

        Raises FetchBlockedError on 429/302 without retrying, and
        FetchFailedError once ``max_retries`` attempts have failed.
        """
        if pace:
            self.delay_policy.pacing_delay()

        last_status: Optional[int] = None
        last_reason = ""
        for attempt in range(1, self.max_retries + 1):
            if self.cancel_event is not None and self.cancel_event.is_set():
                raise RunCancelled(f"Interrupted before fetching {url}")

            identity = self.identity_provider.next()
            headers = {"User-Agent": identity.user_agent, "Referer": referer}
            log_extra = {"step": "fetch", "url": url, "attempt": attempt}
            try:
                response = self.session.get(
                    url,
                    headers=headers,
                    proxies=identity.requests_proxies(),
                    timeout=self.timeout_seconds,
                    allow_redirects=False,
                )
                self.requests_made += 1
            except requests.exceptions.RequestException as e:
                last_status = None
                last_reason = str(e)
                logging.warning(
                    f"Request error on attempt {attempt}/{self.max_retries} for {url}: {e}",
                    extra={**log_extra, "status": "error", "error": type(e).__name__},
                )
            else:
                status = response.status_code
                if status == 200:
                    logging.debug(f"Fetched {url}", extra={**log_extra, "status": status})
                    return response.text
                if status in BLOCKED_STATUS_CODES:
                    logging.error(
                        f"Encountered potential CAPTCHA or rate limit (status {status}) for {url}",
                        extra={**log_extra, "status": status},
                    )
                    raise FetchBlockedError(url, status)
                last_status = status
                last_reason = ""
                logging.warning(
                    f"Received status code {status} on attempt {attempt}/{self.max_retries} for {url}",
                    extra={**log_extra, "status": status},
                )

            if attempt < self.max_retries:
                logging.info(f"Retrying in {self.retry_delay_seconds:.0f} seconds", extra=log_extra)
                self.delay_policy.retry_delay(self.retry_delay_seconds)

        raise FetchFailedError(url, last_status, self.max_retries, last_reason)
