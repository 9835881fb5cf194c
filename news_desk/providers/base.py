from __future__ import annotations

from abc import ABC, abstractmethod
import logging
from typing import Iterable, List

from ..models import FeedConfig, RawFeedItem

logger = logging.getLogger(__name__)


class BaseProvider(ABC):
    """Abstract base class for feed providers.

    ``fetch`` never raises: a feed that cannot be retrieved or parsed is
    logged and contributes no items, so one bad source cannot sink a batch.
    """

    def fetch(self, feed: FeedConfig) -> List[RawFeedItem]:
        try:
            return list(self.fetch_entries(feed))
        except Exception as exc:
            logger.error("Error fetching %s: %s", feed.source, exc)
            return []

    @abstractmethod
    def fetch_entries(self, feed: FeedConfig) -> Iterable[RawFeedItem]:
        """Yield ``RawFeedItem`` objects for one feed, raising on failure."""
