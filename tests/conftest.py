from __future__ import annotations

from typing import Dict, Iterable, List, Union

import pytest

from news_desk.config import DeskConfig
from news_desk.models import Article, Category, FeedConfig, RawFeedItem
from news_desk.providers.base import BaseProvider


class FakeProvider(BaseProvider):
    """Serves canned items per feed source; an exception value makes that feed fail."""

    def __init__(self, items: Dict[str, Union[List[RawFeedItem], Exception]]) -> None:
        self.items = items
        self.calls: List[str] = []

    def fetch_entries(self, feed: FeedConfig) -> Iterable[RawFeedItem]:
        self.calls.append(feed.source)
        result = self.items.get(feed.source, [])
        if isinstance(result, Exception):
            raise result
        return result


def make_article(
    title: str,
    pub_date: str = "Mon, 06 Jan 2025 09:00:00 GMT",
    category: Category = Category.GENERAL,
    source: str = "Artemis",
) -> Article:
    return Article(
        title=title,
        link=f"https://example.com/{abs(hash(title))}",
        pub_date=pub_date,
        content="",
        source=source,
        category=category,
    )


@pytest.fixture
def feeds() -> List[FeedConfig]:
    return [
        FeedConfig("https://feeds.example.com/a", "Feed A"),
        FeedConfig("https://feeds.example.com/b", "Feed B"),
        FeedConfig("https://feeds.example.com/c", "Feed C"),
    ]


@pytest.fixture
def config(feeds: List[FeedConfig]) -> DeskConfig:
    return DeskConfig(feeds=list(feeds), fetch_timeout=5.0)
