from __future__ import annotations

from typing import Protocol

from models.fetch_identity import FetchIdentity


class IdentityProviderPort(Protocol):
    def next(self) -> FetchIdentity:
        ...
