from __future__ import annotations

import logging
from typing import List, Optional

from .aggregator import Aggregator
from .config import DeskConfig
from .dedup import dedup_articles
from .gazetteer import Gazetteer
from .models import Article
from .providers.base import BaseProvider
from .providers.mock_provider import MockProvider
from .providers.rss_provider import RSSProvider
from .query import apply_query

logger = logging.getLogger(__name__)


class NewsDesk:
    """Fetches, tags, deduplicates and filters insurance news feeds."""

    def __init__(
        self,
        config: Optional[DeskConfig] = None,
        provider: Optional[BaseProvider] = None,
        gazetteer: Optional[Gazetteer] = None,
    ) -> None:
        self.config = config or DeskConfig.from_env()
        if not self.config.feeds:
            raise RuntimeError("No feeds configured for NewsDesk")
        self.provider = provider or self._build_provider()
        self.aggregator = Aggregator(
            self.provider,
            gazetteer or Gazetteer(),
            max_workers=self.config.max_workers,
            timeout=self.config.fetch_timeout,
        )

    def _build_provider(self) -> BaseProvider:
        if self.config.offline:
            logger.info("Offline mode: serving sample articles")
            return MockProvider()
        return RSSProvider(user_agent=self.config.user_agent, timeout=self.config.request_timeout)

    def search(self, query: str = "", category: str = "") -> List[Article]:
        articles = self.aggregator.collect(self.config.feeds)
        unique = dedup_articles(articles)
        logger.debug("Deduplicated %d articles down to %d", len(articles), len(unique))
        return apply_query(unique, category=category, query=query, limit=self.config.max_results)

    def to_dict(self, article: Article) -> dict:
        location = None
        if article.location is not None:
            location = {
                "lat": article.location.latitude,
                "lng": article.location.longitude,
                "name": article.location.display_name,
            }
        return {
            "id": article.id,
            "title": article.title,
            "link": article.link,
            "pubDate": article.pub_date,
            "content": article.content,
            "source": article.source,
            "category": article.category.value,
            "location": location,
        }
