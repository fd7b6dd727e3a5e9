from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class SearchQuery(BaseModel):
    """Search-engine query for LinkedIn profiles, built once per run."""

    keywords: str = ""
    location: str = ""
    industry: str = ""
    experience_range: str = ""
    site: str = "linkedin.com/in"

    model_config = ConfigDict(frozen=True)

    @property
    def text(self) -> str:
        return f"site:{self.site} {self.keywords} {self.location} {self.industry} {self.experience_range}"
