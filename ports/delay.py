from __future__ import annotations

from typing import Protocol


class DelayPolicyPort(Protocol):
    def pacing_delay(self) -> None:
        ...

    def retry_delay(self, seconds: float) -> None:
        ...
