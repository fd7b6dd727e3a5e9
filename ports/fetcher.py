from __future__ import annotations

from typing import Protocol


class FetcherPort(Protocol):
    requests_made: int

    def fetch(self, url: str, referer: str, pace: bool = True) -> str:
        ...
