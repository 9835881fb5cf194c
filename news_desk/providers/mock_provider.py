from __future__ import annotations

from typing import Iterable

from ..models import FeedConfig, RawFeedItem
from .base import BaseProvider


class MockProvider(BaseProvider):
    """Returns hard-coded items for offline development."""

    def fetch_entries(self, feed: FeedConfig) -> Iterable[RawFeedItem]:
        sample = [
            RawFeedItem(
                title=f"{feed.source}: Chubb completes acquisition of AIG unit in Florida, says report",
                link=f"{feed.url}#chubb-aig",
                pub_date="Mon, 06 Jan 2025 09:30:00 GMT",
                summary="The deal expands the insurer's personal lines footprint in the southeast.",
            ),
            RawFeedItem(
                title=f"{feed.source}: Hurricane claims top $2bn across Florida and Texas",
                link=f"{feed.url}#hurricane-claims",
                pub_date="Sun, 05 Jan 2025 14:00:00 GMT",
                summary="Catastrophe modellers expect the insured loss estimate to rise.",
            ),
            RawFeedItem(
                title=f"{feed.source}: Reinsurers gather in Bermuda for January renewals",
                link=f"{feed.url}#renewals",
                pub_date="Sat, 04 Jan 2025 08:15:00 GMT",
                content="Pricing discipline is expected to hold across most property lines.",
            ),
        ]
        return sample
