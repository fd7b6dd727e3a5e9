"""
Google result-page search for LinkedIn profiles.
"""
import logging
from typing import List, Optional
from urllib.parse import urlencode

from config.settings import Settings, get_settings
from data_extractor import LinkedInDataExtractor
from models.candidate import Candidate
from models.search_query import SearchQuery
from ports.fetcher import FetcherPort


GOOGLE_SEARCH_URL = "https://www.google.com/search"


def build_search_query(keywords: str, location: str, industry: str, experience_range: str,
                       site: str = "linkedin.com/in") -> SearchQuery:
    return SearchQuery(
        keywords=keywords or "",
        location=location or "",
        industry=industry or "",
        experience_range=experience_range or "",
        site=site,
    )


def build_search_url(query: SearchQuery, base_url: str = GOOGLE_SEARCH_URL) -> str:
    """Encode the query text as the 'q' parameter of the search endpoint."""
    return f"{base_url}?{urlencode({'q': query.text})}"


def page_url(search_url: str, page_index: int, results_per_page: int = 10) -> str:
    """Google paginates with the 'start' offset; the first page has none."""
    if page_index <= 0:
        return search_url
    return f"{search_url}&start={page_index * results_per_page}"


class GoogleSearcher:
    """Fetches Google result pages and extracts page-level candidates."""

    def __init__(self, query: SearchQuery, fetcher: FetcherPort,
                 extractor: Optional[LinkedInDataExtractor] = None,
                 settings: Optional[Settings] = None):
        self.settings = settings or get_settings()
        self.query = query
        self.fetcher = fetcher
        self.extractor = extractor or LinkedInDataExtractor()
        self.search_url = build_search_url(query, self.settings.google_search_url)

    def page_url(self, page_index: int) -> str:
        return page_url(self.search_url, page_index, self.settings.results_per_page)

    def search_page(self, page_index: int) -> List[Candidate]:
        """Fetch one result page and return its candidates. Fetch and parse errors propagate."""
        url = self.page_url(page_index)
        logging.info(f"Scraping Google page {page_index + 1}: {url}", extra={"step": "search", "url": url})
        body = self.fetcher.fetch(url, self.settings.search_referer)
        return self.extractor.extract_records(body, url)
