from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from google_searcher import GoogleSearcher
from models.candidate import Candidate
from pipelines.runner import RunContext
from services.errors import ExtractionError, FetchBlockedError, FetchFailedError, RunCancelled
from services.profile_enricher import ProfileEnricher


class ScrapeSearchPages:
    """Fetch each result page, extract candidates, enrich them, accumulate."""

    def __init__(
        self,
        searcher: GoogleSearcher,
        enricher: Optional[ProfileEnricher],
        max_pages: int,
        abort_on_blocked: bool = True,
        on_progress: Optional[Callable[[int, int, str], None]] = None,
    ) -> None:
        self.searcher = searcher
        self.enricher = enricher
        self.max_pages = max_pages
        self.abort_on_blocked = abort_on_blocked
        self.on_progress = on_progress

    def _enrich_page(self, candidates: List[Candidate], ctx: RunContext) -> Tuple[List[Candidate], bool]:
        """Enrich one page's candidates. Returns (candidates, stop_run)."""
        if self.enricher is None:
            return list(candidates), False
        enriched: List[Candidate] = []
        for i, candidate in enumerate(candidates):
            if self.on_progress:
                self.on_progress(i + 1, len(candidates), candidate.profile_url)
            logging.info(
                f"Scraping details for candidate {i + 1}: {candidate.profile_url}",
                extra={"step": "enrich", "url": candidate.profile_url},
            )
            try:
                enriched.append(self.enricher.enrich(candidate))
            except FetchBlockedError as e:
                ctx.meta["blocked"] = True
                enriched.append(candidate)
                if self.abort_on_blocked:
                    logging.error(
                        f"Blocked while scraping profile {e.url} (status {e.status}); stopping run early",
                        extra={"step": "enrich", "status": e.status, "url": e.url},
                    )
                    # Remaining candidates keep their page-level fields
                    enriched.extend(candidates[i + 1:])
                    return enriched, True
                logging.error(
                    f"Blocked while scraping profile {e.url} (status {e.status}); keeping page-level fields",
                    extra={"step": "enrich", "status": e.status, "url": e.url},
                )
            except RunCancelled:
                ctx.meta["cancelled"] = True
                logging.warning("Run interrupted during profile enrichment")
                enriched.extend(candidates[i:])
                return enriched, True
        return enriched, False

    def run(self, ctx: RunContext) -> RunContext:
        ctx.search_url = self.searcher.search_url
        ctx.meta.setdefault("pages_scraped", 0)
        ctx.meta.setdefault("pages_failed", 0)
        ctx.meta.setdefault("blocked", False)
        ctx.meta.setdefault("cancelled", False)

        for page_index in range(self.max_pages):
            try:
                candidates = self.searcher.search_page(page_index)
            except FetchBlockedError as e:
                ctx.meta["blocked"] = True
                ctx.meta["pages_failed"] += 1
                logging.error(
                    f"Blocked on Google page {page_index + 1} (status {e.status})",
                    extra={"step": "search", "status": e.status, "url": e.url},
                )
                if self.abort_on_blocked:
                    logging.error("Stopping run early after being blocked")
                    break
                continue
            except FetchFailedError as e:
                ctx.meta["pages_failed"] += 1
                logging.error(
                    f"Failed to fetch page {page_index + 1}: {e}",
                    extra={"step": "search", "status": e.status or "error", "url": e.url},
                )
                continue
            except ExtractionError as e:
                ctx.meta["pages_failed"] += 1
                logging.error(
                    f"Error parsing page {page_index + 1}: {e}",
                    extra={"step": "extract", "status": "parse_error", "url": e.url or "-"},
                )
                continue
            except RunCancelled:
                ctx.meta["cancelled"] = True
                logging.warning("Run interrupted; keeping candidates collected so far")
                break

            ctx.meta["pages_scraped"] += 1
            enriched, stop = self._enrich_page(candidates, ctx)
            ctx.candidates.extend(enriched)
            logging.info(
                f"Page {page_index + 1} done: {len(candidates)} candidates, {len(ctx.candidates)} total",
                extra={"step": "search", "status": "ok"},
            )
            if stop:
                break

        return ctx
