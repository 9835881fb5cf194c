"""News Desk package initializer."""

from .config import DeskConfig
from .desk import NewsDesk
from .models import Article, Category, FeedConfig, Location, RawFeedItem

__all__ = ["NewsDesk", "DeskConfig", "Article", "Category", "FeedConfig", "Location", "RawFeedItem"]
