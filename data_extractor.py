import re
import logging
from typing import Dict, List, Optional, Union

from bs4 import BeautifulSoup
from bs4.exceptions import ParserRejectedMarkup

from config.extraction_rules import DEFAULT_RULES, ExtractionRules
from models.candidate import Candidate
from services.errors import ExtractionError
from utils.number_parsing import parse_experience_years


Document = Union[BeautifulSoup, str, bytes]


class LinkedInDataExtractor:
    """Pulls candidate records out of Google result pages and LinkedIn profiles."""

    def __init__(self, rules: Optional[ExtractionRules] = None):
        self.rules = rules or DEFAULT_RULES
        self._profile_url_re = re.compile(self.rules.profile_url_pattern)
        self._email_re = re.compile(self.rules.email_pattern)
        self._phone_re = re.compile(self.rules.phone_pattern)
        self.extraction_stats = {
            'successful_extractions': 0,
            'skipped_containers': 0,
            'experience_parse_failures': 0,
        }

    @staticmethod
    def parse_document(document: Document, url: str = "") -> BeautifulSoup:
        """Parse markup; raises ExtractionError when the parser rejects it."""
        if isinstance(document, BeautifulSoup):
            return document
        try:
            return BeautifulSoup(document, "html.parser")
        except ParserRejectedMarkup as e:
            raise ExtractionError(str(e), url) from e

    def clean_linkedin_url(self, href: Optional[str]) -> Optional[str]:
        """Return the canonical profile link, or None for foreign/malformed links."""
        if not href:
            return None
        match = self._profile_url_re.search(href)
        if not match:
            return None
        return match.group(1)

    def extract_email(self, text: str) -> str:
        match = self._email_re.search(text or "")
        return match.group(0) if match else ""

    def extract_phone(self, text: str) -> str:
        match = self._phone_re.search(text or "")
        return match.group(0) if match else ""

    def extract_experience(self, snippet: str, profile_url: str = "") -> int:
        try:
            return parse_experience_years(
                snippet, self.rules.experience_pattern, self.rules.experience_word_pattern
            )
        except ValueError as e:
            self.extraction_stats['experience_parse_failures'] += 1
            logging.warning(
                f"Experience not parsed for {profile_url or 'candidate'}: {e}",
                extra={"step": "extract", "status": "parse_error", "url": profile_url or "-"},
            )
            return 0

    @staticmethod
    def _select_text(node, selector: str) -> str:
        element = node.select_one(selector)
        if element is None:
            return ""
        return element.get_text()

    def extract_candidate(self, container) -> Optional[Candidate]:
        """Build a candidate from one result container, or None if it has no usable profile link."""
        link = container.select_one(self.rules.profile_link_selector)
        href = link.get("href") if link is not None else None
        profile_url = self.clean_linkedin_url(href)
        if not profile_url:
            logging.debug(f"Skipping result without a canonical profile link: {href!r}")
            return None

        name = self._select_text(container, self.rules.name_selector).strip()
        snippet = self._select_text(container, self.rules.snippet_selector)

        return Candidate(
            profile_url=profile_url,
            name=name,
            email=self.extract_email(snippet),
            phone=self.extract_phone(snippet),
            experience_years=self.extract_experience(snippet, profile_url),
        )

    def extract_records(self, document: Document, url: str = "") -> List[Candidate]:
        """Extract candidates from a search result page, in document order."""
        soup = self.parse_document(document, url)
        candidates: List[Candidate] = []

        containers = soup.select(self.rules.result_container_selector)
        for container in containers:
            candidate = self.extract_candidate(container)
            if candidate is None:
                self.extraction_stats['skipped_containers'] += 1
                continue
            self.extraction_stats['successful_extractions'] += 1
            candidates.append(candidate)

        logging.info(
            f"Extracted {len(candidates)} candidates from {len(containers)} results",
            extra={"step": "extract"},
        )
        return candidates

    def extract_profile_details(self, document: Document, profile_url: str) -> Candidate:
        """Extract name, email and phone from a public profile page.

        Email and phone are searched over the whole rendered markup, since
        public profiles have no stable contact section.
        """
        soup = self.parse_document(document, profile_url)
        markup = str(soup)
        return Candidate(
            profile_url=profile_url,
            name=self._select_text(soup, self.rules.profile_name_selector).strip(),
            email=self.extract_email(markup),
            phone=self.extract_phone(markup),
        )

    def get_extraction_stats(self) -> Dict:
        return self.extraction_stats.copy()
