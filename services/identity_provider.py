from __future__ import annotations

import random
from typing import Optional, Sequence

from models.fetch_identity import FetchIdentity


class RandomIdentityProvider:
    """Picks a user agent and, when configured, a proxy independently per call."""

    def __init__(self, user_agents: Sequence[str], proxies: Sequence[str] = (), rng: Optional[random.Random] = None):
        if not user_agents:
            raise ValueError("At least one user agent is required")
        self.user_agents = list(user_agents)
        self.proxies = list(proxies)
        self.rng = rng or random.Random()

    def next(self) -> FetchIdentity:
        proxy = self.rng.choice(self.proxies) if self.proxies else None
        return FetchIdentity(user_agent=self.rng.choice(self.user_agents), proxy=proxy)


class FixedSequenceIdentityProvider:
    """Cycles through a fixed list of identities; used for deterministic runs."""

    def __init__(self, identities: Sequence[FetchIdentity]):
        if not identities:
            raise ValueError("At least one identity is required")
        self.identities = list(identities)
        self._index = 0

    def next(self) -> FetchIdentity:
        identity = self.identities[self._index % len(self.identities)]
        self._index += 1
        return identity
