from __future__ import annotations

import random
import threading
from pathlib import Path
from typing import Callable, Optional, Union

from config.extraction_rules import ExtractionRules
from config.settings import Settings
from data_extractor import LinkedInDataExtractor
from google_searcher import GoogleSearcher
from models.search_query import SearchQuery
from pipelines.runner import Pipeline, RunContext
from pipelines.steps import DedupeCandidates, ScrapeSearchPages, WriteCandidatesCsv
from ports.delay import DelayPolicyPort
from ports.fetcher import FetcherPort
from ports.identity import IdentityProviderPort
from services.delay_policy import SleepDelayPolicy
from services.http_fetcher import PageFetcher
from services.identity_provider import RandomIdentityProvider
from services.profile_enricher import ProfileEnricher


def build_fetcher(
    settings: Settings,
    rng: Optional[random.Random] = None,
    cancel_event: Optional[threading.Event] = None,
    identity_provider: Optional[IdentityProviderPort] = None,
    delay_policy: Optional[DelayPolicyPort] = None,
    session=None,
) -> PageFetcher:
    """Build the HTTP fetcher from settings; any collaborator can be injected."""
    rng = rng or random.Random(settings.random_seed)
    return PageFetcher(
        identity_provider=identity_provider or RandomIdentityProvider(settings.user_agents, settings.proxies, rng),
        delay_policy=delay_policy or SleepDelayPolicy(
            settings.pacing_min_seconds, settings.pacing_max_seconds, rng, cancel_event
        ),
        session=session,
        max_retries=settings.max_retries,
        retry_delay_seconds=settings.retry_delay_seconds,
        timeout_seconds=settings.request_timeout_seconds,
        cancel_event=cancel_event,
    )


def scrape_candidates(
    settings: Settings,
    query: SearchQuery,
    fetcher: FetcherPort,
    output_path: Optional[Union[str, Path]] = None,
    rules: Optional[ExtractionRules] = None,
    max_pages: Optional[int] = None,
    enrich_profiles: Optional[bool] = None,
    abort_on_blocked: Optional[bool] = None,
    dedupe_policy: Optional[str] = None,
    on_progress: Optional[Callable[[int, int, str], None]] = None,
) -> RunContext:
    """Run search -> extract -> enrich -> dedupe -> CSV for one query.

    Arguments left as None fall back to ``settings``.
    """
    extractor = LinkedInDataExtractor(rules)
    searcher = GoogleSearcher(query, fetcher, extractor, settings)
    enrich = settings.enrich_profiles if enrich_profiles is None else enrich_profiles
    enricher = ProfileEnricher(fetcher, extractor, settings.search_referer) if enrich else None

    pipeline = Pipeline([
        ScrapeSearchPages(
            searcher,
            enricher,
            max_pages=settings.max_pages if max_pages is None else max_pages,
            abort_on_blocked=settings.abort_on_blocked if abort_on_blocked is None else abort_on_blocked,
            on_progress=on_progress,
        ),
        DedupeCandidates(dedupe_policy or settings.dedupe_policy),
        WriteCandidatesCsv(output_path or settings.output_path),
    ])

    ctx = RunContext(query=query)
    ctx = pipeline.run(ctx)
    ctx.meta["extraction_stats"] = extractor.get_extraction_stats()
    ctx.meta["requests_made"] = fetcher.requests_made
    if enricher is not None:
        ctx.meta["enrichment_stats"] = dict(enricher.stats)
    return ctx
