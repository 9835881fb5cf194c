from __future__ import annotations

from dataclasses import replace
import hashlib
from typing import Iterable, List

from .models import Article

DEDUP_PREFIX_LENGTH = 60


def dedup_key(title: str) -> str:
    """Lowercased, trimmed title prefix used to spot republished stories.

    Titles that only differ after the first 60 characters collide on purpose.
    """
    return title.lower().strip()[:DEDUP_PREFIX_LENGTH]


def article_id(key: str) -> str:
    return hashlib.sha1(key.encode("utf-8")).hexdigest()[:16]


def dedup_articles(articles: Iterable[Article]) -> List[Article]:
    """Keep the first article per dedup key and stamp each survivor with an id."""
    seen: set[str] = set()
    kept: List[Article] = []
    for article in articles:
        key = dedup_key(article.title)
        if key in seen:
            continue
        seen.add(key)
        kept.append(replace(article, id=article_id(key)))
    return kept
