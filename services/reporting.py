from __future__ import annotations

from pathlib import Path
from typing import Optional

from pipelines.runner import RunContext


def print_summary(ctx: RunContext, output_path: Optional[Path] = None) -> None:
    """Print summary of the scraping run."""
    meta = ctx.meta
    extraction_stats = meta.get('extraction_stats', {})
    enrichment_stats = meta.get('enrichment_stats', {})
    validation_stats = meta.get('validation_stats', {})

    print("\n" + "="*60)
    print("LINKEDIN CANDIDATE SCRAPER - SUMMARY")
    print("="*60)
    print(f"Search Query: {ctx.query.text if ctx.query else 'N/A'}")
    print(f"Search URL: {ctx.search_url or 'N/A'}")
    print(f"Pages Scraped: {meta.get('pages_scraped', 0)}")
    print(f"Pages Failed: {meta.get('pages_failed', 0)}")
    print(f"HTTP Requests Made: {meta.get('requests_made', 0)}")
    if meta.get('blocked'):
        print("Blocked: yes (rate limit or CAPTCHA redirect)")
    if meta.get('cancelled'):
        print("Interrupted: yes")
    print()
    print("Extraction Statistics:")
    print(f"  Candidates Extracted: {extraction_stats.get('successful_extractions', 0)}")
    print(f"  Results Skipped: {extraction_stats.get('skipped_containers', 0)}")
    print(f"  Experience Parse Failures: {extraction_stats.get('experience_parse_failures', 0)}")
    if enrichment_stats:
        print(f"  Profiles Enriched: {enrichment_stats.get('enriched', 0)}")
        print(f"  Profile Failures: {enrichment_stats.get('failed', 0)}")
    print(f"  Duplicates Removed: {validation_stats.get('duplicate_candidates_removed', 0)}")
    print(f"  Candidates Kept: {len(ctx.candidates)}")
    if output_path:
        print(f"Output File: {output_path}")
    print("="*60)
