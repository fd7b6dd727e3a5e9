from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Candidate(BaseModel):
    """One extracted candidate; frozen once appended to a run's results."""

    profile_url: str
    name: str = ""
    email: str = ""
    phone: str = ""
    experience_years: int = 0

    model_config = ConfigDict(extra="ignore", frozen=True)

    def with_profile_details(self, details: "Candidate") -> "Candidate":
        """Overwrite contact fields from a profile page, keeping link and experience."""
        return self.model_copy(
            update={
                "name": details.name,
                "email": details.email,
                "phone": details.phone,
            }
        )
