from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict


class FetchIdentity(BaseModel):
    """Outbound identity for a single request attempt."""

    user_agent: str
    proxy: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    def requests_proxies(self) -> Optional[Dict[str, str]]:
        if not self.proxy:
            return None
        return {"http": self.proxy, "https": self.proxy}
