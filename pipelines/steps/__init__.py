# Namespace for pipeline steps
from .scrape_search_pages import ScrapeSearchPages  # noqa: F401
from .dedupe_candidates import DedupeCandidates  # noqa: F401
from .write_candidates import WriteCandidatesCsv  # noqa: F401
