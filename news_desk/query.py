from __future__ import annotations

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Iterable, List, Optional

from .models import Article

DEFAULT_LIMIT = 300

# Unparseable publication dates sort after everything else.
EPOCH_FLOOR = datetime.min.replace(tzinfo=timezone.utc)


def parse_pub_date(value: Optional[str]) -> datetime:
    """Parse an RFC 822 or ISO 8601 timestamp, returning ``EPOCH_FLOOR`` on failure."""
    if not value or not value.strip():
        return EPOCH_FLOOR
    value = value.strip()
    try:
        dt = parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError, OverflowError):
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return EPOCH_FLOOR
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


def apply_query(
    articles: Iterable[Article],
    category: Optional[str] = None,
    query: Optional[str] = None,
    limit: int = DEFAULT_LIMIT,
) -> List[Article]:
    results = list(articles)
    if category:
        results = [article for article in results if article.category.value == category]
    if query:
        needle = query.lower()
        results = [article for article in results if needle in article.title.lower()]
    results.sort(key=lambda article: parse_pub_date(article.pub_date), reverse=True)
    return results[:limit]
