from __future__ import annotations

import logging
from typing import Optional

from data_extractor import LinkedInDataExtractor
from models.candidate import Candidate
from ports.fetcher import FetcherPort
from services.errors import ExtractionError, FetchBlockedError, FetchFailedError


DEFAULT_PROFILE_REFERER = "https://www.google.com/"


class ProfileEnricher:
    """Re-fetches a candidate's public profile to refresh name, email and phone."""

    def __init__(
        self,
        fetcher: FetcherPort,
        extractor: Optional[LinkedInDataExtractor] = None,
        referer: str = DEFAULT_PROFILE_REFERER,
    ):
        self.fetcher = fetcher
        self.extractor = extractor or LinkedInDataExtractor()
        self.referer = referer
        self.stats = {'enriched': 0, 'failed': 0}

    def fetch_profile_details(self, profile_url: str) -> Candidate:
        """Fetch and parse a profile page. Fetch and parse errors propagate to the caller."""
        body = self.fetcher.fetch(profile_url, self.referer)
        return self.extractor.extract_profile_details(body, profile_url)

    def enrich(self, candidate: Candidate) -> Candidate:
        """Return the candidate with profile details applied.

        A failed fetch or an unparsable profile page keeps the page-level
        fields. A blocked fetch is re-raised so the driver can decide
        whether to stop the run.
        """
        try:
            details = self.fetch_profile_details(candidate.profile_url)
        except FetchBlockedError:
            self.stats['failed'] += 1
            raise
        except FetchFailedError as e:
            self.stats['failed'] += 1
            logging.error(
                f"Error scraping profile details for {candidate.profile_url}: {e}",
                extra={"step": "enrich", "status": e.status or "error", "url": candidate.profile_url},
            )
            return candidate
        except ExtractionError as e:
            self.stats['failed'] += 1
            logging.error(
                f"Error parsing profile page for {candidate.profile_url}: {e}",
                extra={"step": "enrich", "status": "parse_error", "url": candidate.profile_url},
            )
            return candidate
        self.stats['enriched'] += 1
        return candidate.with_profile_details(details)
