from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import List, Optional

from .models import FeedConfig

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/120"

DEFAULT_FEEDS: tuple[FeedConfig, ...] = (
    FeedConfig("https://www.reinsurancene.ws/feed/", "Reinsurance News"),
    FeedConfig("https://www.artemis.bm/feed/", "Artemis"),
    FeedConfig("https://www.insurancejournal.com/rss/news/international/", "Insurance Journal (Intl)"),
    FeedConfig("https://www.insurancebusinessmag.com/us/rss/", "Insurance Business"),
    FeedConfig("https://www.canadianunderwriter.ca/feed/", "Canadian Underwriter"),
    FeedConfig("https://www.insurancetimes.co.uk/rss/news", "Insurance Times"),
)


def _split_csv(value: Optional[str]) -> List[str]:
    if not value:
        return []
    return [item.strip() for item in value.split(",") if item.strip()]


@dataclass(slots=True)
class DeskConfig:
    """Runtime configuration for the news desk."""

    feeds: List[FeedConfig] = field(default_factory=lambda: list(DEFAULT_FEEDS))
    user_agent: str = DEFAULT_USER_AGENT
    request_timeout: float = 10.0
    fetch_timeout: float = 30.0
    max_workers: int = 8
    max_results: int = 300
    cache_max_age: int = 300
    offline: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "DeskConfig":
        import os

        return cls(
            feeds=_parse_feeds(os.getenv("NEWS_DESK_FEEDS")) or list(DEFAULT_FEEDS),
            user_agent=os.getenv("NEWS_DESK_USER_AGENT") or DEFAULT_USER_AGENT,
            request_timeout=_parse_number(os.getenv("NEWS_DESK_REQUEST_TIMEOUT"), "NEWS_DESK_REQUEST_TIMEOUT", 10.0),
            fetch_timeout=_parse_number(os.getenv("NEWS_DESK_FETCH_TIMEOUT"), "NEWS_DESK_FETCH_TIMEOUT", 30.0),
            max_workers=int(_parse_number(os.getenv("NEWS_DESK_MAX_WORKERS"), "NEWS_DESK_MAX_WORKERS", 8)),
            max_results=int(_parse_number(os.getenv("NEWS_DESK_MAX_RESULTS"), "NEWS_DESK_MAX_RESULTS", 300)),
            cache_max_age=int(_parse_number(os.getenv("NEWS_DESK_CACHE_MAX_AGE"), "NEWS_DESK_CACHE_MAX_AGE", 300)),
            offline=os.getenv("NEWS_DESK_OFFLINE", "").strip().lower() in {"1", "true", "yes", "on"},
            log_level=_parse_log_level(os.getenv("NEWS_DESK_LOG_LEVEL")),
        )


def _parse_feeds(value: Optional[str]) -> List[FeedConfig]:
    """Parse ``Label=URL`` pairs, e.g. ``Artemis=https://www.artemis.bm/feed/``."""
    feeds: List[FeedConfig] = []
    for pair in _split_csv(value):
        label, sep, url = pair.partition("=")
        if not sep or not label.strip() or not url.strip():
            raise ValueError(f"NEWS_DESK_FEEDS entry {pair!r} must look like Label=URL")
        feeds.append(FeedConfig(url=url.strip(), source=label.strip()))
    return feeds


def _parse_number(value: Optional[str], name: str, default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number if set") from None
    if parsed <= 0:
        raise ValueError(f"{name} must be positive")
    return parsed


def _parse_log_level(value: Optional[str]) -> str:
    level = (value or "INFO").strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"NEWS_DESK_LOG_LEVEL {value!r} is not a logging level")
    return level
