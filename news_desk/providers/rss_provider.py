from __future__ import annotations

import logging
from typing import Iterable, List, Mapping, Optional

from bs4 import BeautifulSoup
import feedparser
import requests

from ..config import DEFAULT_USER_AGENT
from ..models import FeedConfig, RawFeedItem
from .base import BaseProvider

logger = logging.getLogger(__name__)


class RSSProvider(BaseProvider):
    """Fetches RSS/Atom feeds over HTTP and parses them with feedparser."""

    def __init__(self, user_agent: str = DEFAULT_USER_AGENT, timeout: float = 10.0) -> None:
        self._headers = {"User-Agent": user_agent}
        self._timeout = timeout

    def fetch_entries(self, feed: FeedConfig) -> Iterable[RawFeedItem]:
        response = requests.get(feed.url, headers=self._headers, timeout=self._timeout)
        response.raise_for_status()
        parsed = feedparser.parse(response.content)
        entries = parsed.entries or []
        if parsed.get("bozo") and not entries:
            raise ValueError(f"malformed feed: {parsed.get('bozo_exception')}")
        results: List[RawFeedItem] = []
        for entry in entries:
            title = entry.get("title")
            if not title or not title.strip():
                logger.debug("Skipping untitled entry from %s", feed.source)
                continue
            results.append(
                RawFeedItem(
                    title=title,
                    link=entry.get("link") or "",
                    pub_date=entry.get("published") or entry.get("updated") or "",
                    summary=clean_html(entry.get("summary")),
                    content=_get_content(entry),
                )
            )
        logger.info("Fetched %d items from %s", len(results), feed.source)
        return results


def clean_html(html_text: Optional[str]) -> Optional[str]:
    """Strip markup and collapse whitespace; ``None`` when nothing remains."""
    if not html_text:
        return None
    text = BeautifulSoup(html_text, "html.parser").get_text(" ")
    text = " ".join(text.split())
    return text or None


def _get_content(entry: Mapping[str, object]) -> Optional[str]:
    contents = entry.get("content")
    if not contents:
        return None
    parts: List[str] = []
    for part in contents:
        if isinstance(part, Mapping):
            value = part.get("value")
            if isinstance(value, str):
                parts.append(value)
    return clean_html("\n\n".join(parts))
