from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


DEFAULT_USER_AGENTS: tuple[str, ...] = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36",
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/605.1.15 (KHTML, like Gecko) Version/15.0 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64; rv:89.0) Gecko/20100101 Firefox/89.0",
)


def _load_env() -> None:
    # Centralized dotenv loading; safe if .env missing
    load_dotenv()


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ("1", "true", "yes", "on")


def _env_list(name: str, sep: str = ",") -> tuple[str, ...]:
    raw = os.getenv(name, "")
    return tuple(item.strip() for item in raw.split(sep) if item.strip())


@dataclass(frozen=True)
class Settings:
    google_search_url: str
    search_site: str
    search_referer: str

    # Default query inputs
    search_keywords: str
    search_location: str
    search_industry: str
    search_experience_range: str

    max_pages: int
    results_per_page: int

    # Retry and pacing
    max_retries: int
    retry_delay_seconds: float
    pacing_min_seconds: int
    pacing_max_seconds: int
    request_timeout_seconds: int

    output_path: str
    log_level: str
    run_env: str

    # Identity pool
    user_agents: tuple[str, ...] = DEFAULT_USER_AGENTS
    proxies: tuple[str, ...] = field(default_factory=tuple)

    # Behaviour flags
    enrich_profiles: bool = True
    abort_on_blocked: bool = True
    dedupe_policy: str = "first"  # first | last | none
    random_seed: Optional[int] = None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    _load_env()
    pacing_min = int(os.getenv("PACING_MIN_SECONDS", "5"))
    pacing_max = int(os.getenv("PACING_MAX_SECONDS", "14"))
    if pacing_max < pacing_min:
        raise RuntimeError(
            f"PACING_MAX_SECONDS ({pacing_max}) must be >= PACING_MIN_SECONDS ({pacing_min})"
        )
    dedupe_policy = os.getenv("DEDUPE_POLICY", "first").lower()
    if dedupe_policy not in ("first", "last", "none"):
        raise RuntimeError("DEDUPE_POLICY must be one of: first, last, none")
    seed = os.getenv("RANDOM_SEED")
    return Settings(
        google_search_url=os.getenv("GOOGLE_SEARCH_URL", "https://www.google.com/search"),
        search_site=os.getenv("SEARCH_SITE", "linkedin.com/in"),
        search_referer=os.getenv("SEARCH_REFERER", "https://www.google.com/"),
        search_keywords=os.getenv("SEARCH_KEYWORDS", "control valve desuperheater"),
        search_location=os.getenv("SEARCH_LOCATION", "Bangalore"),
        search_industry=os.getenv("SEARCH_INDUSTRY", "Machinery Manufacturing"),
        search_experience_range=os.getenv("SEARCH_EXPERIENCE_RANGE", "7-12 years"),
        max_pages=int(os.getenv("MAX_PAGES", "2")),
        results_per_page=int(os.getenv("RESULTS_PER_PAGE", "10")),
        max_retries=int(os.getenv("MAX_RETRIES", "3")),
        retry_delay_seconds=float(os.getenv("RETRY_DELAY_SECONDS", "5")),
        pacing_min_seconds=pacing_min,
        pacing_max_seconds=pacing_max,
        request_timeout_seconds=int(os.getenv("REQUEST_TIMEOUT", "10")),
        output_path=os.getenv("OUTPUT_PATH", "linkedin_candidates.csv"),
        log_level=os.getenv("LOG_LEVEL", "INFO"),
        run_env=os.getenv("RUN_ENV", "local"),
        user_agents=_env_list("USER_AGENTS", sep="||") or DEFAULT_USER_AGENTS,
        proxies=_env_list("PROXIES"),
        enrich_profiles=_env_bool("ENRICH_PROFILES", "true"),
        abort_on_blocked=_env_bool("ABORT_ON_BLOCKED", "true"),
        dedupe_policy=dedupe_policy,
        random_seed=int(seed) if seed else None,
    )
