from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Category(str, Enum):
    """Topical bucket assigned to every article."""

    MERGERS_ACQUISITIONS = "MergersAcquisitions"
    MAJOR_LOSS = "MajorLoss"
    GENERAL = "General"


@dataclass(frozen=True, slots=True)
class FeedConfig:
    """A syndication feed and the label shown for its articles."""

    url: str
    source: str


@dataclass(slots=True)
class RawFeedItem:
    """Raw item data collected from a feed."""

    title: str
    link: str
    pub_date: str
    summary: Optional[str] = None
    content: Optional[str] = None


@dataclass(frozen=True, slots=True)
class Location:
    latitude: float
    longitude: float
    display_name: str


@dataclass(slots=True)
class Article:
    """Normalized, enriched article served to clients."""

    title: str
    link: str
    pub_date: str
    content: str
    source: str
    category: Category
    location: Optional[Location] = None
    id: str = ""
