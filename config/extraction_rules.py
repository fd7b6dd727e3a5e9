from __future__ import annotations

from dataclasses import dataclass

from utils.number_parsing import DEFAULT_EXPERIENCE_PATTERN, DEFAULT_EXPERIENCE_WORD_PATTERN


# Selectors and patterns used to pull candidates out of Google result pages
# and public LinkedIn profiles. Edit here when the markup changes.
@dataclass(frozen=True)
class ExtractionRules:
    result_container_selector: str = ".tF2Cxc"
    profile_link_selector: str = "a[href*='linkedin.com/in/']"
    name_selector: str = ".e2BEnf.hAyfcb .AP7Wnd"
    snippet_selector: str = ".VwiC3b.yXK7lf.MUxGbd.yDYNvb.lyLwlc.lEBKkf"
    profile_name_selector: str = ".top-card-layout__title"

    # Group 1 is the canonical link: everything before the first '&' or '?'
    profile_url_pattern: str = r"(https://(?:www\.|[a-z]{2}\.)?linkedin\.com/in/[^&?]+)"
    email_pattern: str = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
    # Basic US phone number
    phone_pattern: str = r"\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"
    # Group 1 is the digit count; spelled-out counts are reported as parse failures
    experience_pattern: str = DEFAULT_EXPERIENCE_PATTERN
    experience_word_pattern: str = DEFAULT_EXPERIENCE_WORD_PATTERN


DEFAULT_RULES = ExtractionRules()
