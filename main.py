#!/usr/bin/env python3
"""
LinkedIn Candidate Scraper

Searches Google for LinkedIn profiles matching keywords, location, industry
and an experience range, optionally visits each public profile for contact
details, and writes the candidates to a CSV file.
"""

import argparse
import logging
import os
import random
import signal
import sys
import threading
import uuid
from pathlib import Path
from typing import List, Optional

from config.settings import get_settings
from google_searcher import build_search_query, build_search_url
from pipelines.scrape_candidates import build_fetcher, scrape_candidates
from services.errors import OutputWriteError
from services.reporting import print_summary
from utils.logging_setup import init_logging


def parse_arguments(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    settings = get_settings()
    parser = argparse.ArgumentParser(
        description='LinkedIn Candidate Scraper',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python main.py --keywords "control valve desuperheater" --location Bangalore
  python main.py -k "data engineer" -l Berlin -i "Software" -e "5-10 years" --max-pages 1
  python main.py --dry-run
        """
    )

    # Query inputs
    parser.add_argument('--keywords', '-k', default=settings.search_keywords,
                        help='Free-text keywords (default: from settings)')
    parser.add_argument('--location', '-l', default=settings.search_location,
                        help='Location qualifier (default: from settings)')
    parser.add_argument('--industry', '-i', default=settings.search_industry,
                        help='Industry qualifier (default: from settings)')
    parser.add_argument('--experience-range', '-e', default=settings.search_experience_range,
                        help='Experience range as text, e.g. "7-12 years"')

    # Run options
    parser.add_argument('--max-pages', '-p', type=int, default=settings.max_pages,
                        help='Number of Google result pages to scrape')
    parser.add_argument('--output', '-o', type=str, default=settings.output_path,
                        help='CSV output path (overwritten each run)')
    parser.add_argument('--no-enrich', action='store_true',
                        help='Skip visiting individual profile pages')
    parser.add_argument('--continue-on-block', action='store_true',
                        help='Move on to the next page after being blocked instead of stopping')
    parser.add_argument('--dedupe', choices=['first', 'last', 'none'], default=settings.dedupe_policy,
                        help='How to handle candidates with the same profile link')
    parser.add_argument('--seed', type=int, default=settings.random_seed,
                        help='Seed for user-agent/proxy choice and pacing delays')

    # Debug options
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=settings.log_level.upper(),
                        help='Set logging level (default: from settings)')
    parser.add_argument('--dry-run', '-d', action='store_true',
                        help='Print the search URL without making any requests')

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """Main application entry point. Returns the process exit code."""
    args = parse_arguments(argv)
    init_logging(args.log_level)
    settings = get_settings()

    # Ensure a RUN_ID for this process to correlate logs
    if not os.getenv("RUN_ID"):
        os.environ["RUN_ID"] = uuid.uuid4().hex

    query = build_search_query(args.keywords, args.location, args.industry, args.experience_range,
                               site=settings.search_site)
    search_url = build_search_url(query, settings.google_search_url)
    logging.info(f"Searching Google with URL: {search_url}")

    if args.dry_run:
        print(f"Dry run completed. Search URL: {search_url}")
        return 0

    cancel_event = threading.Event()

    def _request_stop(signum, frame):
        logging.warning("Interrupt received; finishing current request and stopping")
        cancel_event.set()
        # A second Ctrl-C terminates immediately
        signal.signal(signal.SIGINT, previous_handler)

    previous_handler = signal.signal(signal.SIGINT, _request_stop)
    try:
        fetcher = build_fetcher(settings, rng=random.Random(args.seed), cancel_event=cancel_event)
        ctx = scrape_candidates(
            settings,
            query,
            fetcher,
            output_path=args.output,
            max_pages=args.max_pages,
            enrich_profiles=not args.no_enrich,
            abort_on_blocked=not args.continue_on_block,
            dedupe_policy=args.dedupe,
        )
    except OutputWriteError as e:
        logging.error(f"Error writing CSV: {e}", extra={"step": "write", "status": "error"})
        return 1
    except KeyboardInterrupt:
        logging.info("Process interrupted by user")
        return 130
    except Exception as e:
        logging.error(f"Unexpected error: {e}")
        logging.debug("Full traceback:", exc_info=True)
        return 1
    finally:
        signal.signal(signal.SIGINT, previous_handler)

    if not ctx.meta.get("written"):
        print("No candidates found.")
        return 0

    print_summary(ctx, Path(args.output))
    print(f"Successfully wrote {len(ctx.candidates)} candidates to {args.output}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
