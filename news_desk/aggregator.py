"""Concurrent fan-out over the configured feeds."""

from __future__ import annotations

from concurrent.futures import Future, ThreadPoolExecutor, wait
import logging
from typing import List, Optional, Sequence

from .classifier import classify_article
from .gazetteer import Gazetteer
from .models import Article, FeedConfig, RawFeedItem
from .providers.base import BaseProvider

logger = logging.getLogger(__name__)


def build_article(item: RawFeedItem, feed: FeedConfig, gazetteer: Gazetteer) -> Article:
    return Article(
        title=item.title,
        link=item.link,
        pub_date=item.pub_date,
        content=item.summary or item.content or "",
        source=feed.source,
        category=classify_article(item.title, item.summary),
        location=gazetteer.locate(item.title, item.summary),
    )


class Aggregator:
    """Fetches every feed concurrently and flattens the results into articles.

    Each fetch only touches its own result list, so nothing is shared between
    workers. Feeds still running when ``timeout`` expires are abandoned and
    contribute no articles.
    """

    def __init__(
        self,
        provider: BaseProvider,
        gazetteer: Optional[Gazetteer] = None,
        max_workers: int = 8,
        timeout: Optional[float] = 30.0,
    ) -> None:
        self.provider = provider
        self.gazetteer = gazetteer or Gazetteer()
        self.max_workers = max_workers
        self.timeout = timeout

    def collect(self, feeds: Sequence[FeedConfig]) -> List[Article]:
        if not feeds:
            return []
        executor = ThreadPoolExecutor(max_workers=max(1, min(self.max_workers, len(feeds))))
        try:
            futures: List[Future] = [executor.submit(self.provider.fetch, feed) for feed in feeds]
            _, pending = wait(futures, timeout=self.timeout)
            articles: List[Article] = []
            for feed, future in zip(feeds, futures):
                if future in pending:
                    future.cancel()
                    logger.error("Error fetching %s: timed out after %ss", feed.source, self.timeout)
                    continue
                items = future.result()
                articles.extend(build_article(item, feed, self.gazetteer) for item in items)
        finally:
            # Don't block the request on abandoned fetches.
            executor.shutdown(wait=False, cancel_futures=True)
        logger.info("Collected %d articles from %d feeds", len(articles), len(feeds))
        return articles
