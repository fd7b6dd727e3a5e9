from __future__ import annotations

import logging
import random
import threading
from typing import Optional

from services.errors import RunCancelled


class SleepDelayPolicy:
    """Real wall-clock delays that return early when the cancel event is set."""

    def __init__(
        self,
        min_seconds: int,
        max_seconds: int,
        rng: Optional[random.Random] = None,
        cancel_event: Optional[threading.Event] = None,
    ):
        self.min_seconds = min_seconds
        self.max_seconds = max_seconds
        self.rng = rng or random.Random()
        self.cancel_event = cancel_event or threading.Event()

    def pacing_delay(self) -> None:
        delay = self.rng.randint(self.min_seconds, self.max_seconds)
        logging.info(f"Waiting {delay} seconds before next request", extra={"step": "pacing"})
        self._wait(delay)

    def retry_delay(self, seconds: float) -> None:
        self._wait(seconds)

    def _wait(self, seconds: float) -> None:
        if self.cancel_event.wait(seconds):
            raise RunCancelled("Interrupted while waiting")


class NoDelayPolicy:
    def pacing_delay(self) -> None:
        return None

    def retry_delay(self, seconds: float) -> None:
        return None
