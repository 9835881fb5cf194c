from .base import BaseProvider
from .mock_provider import MockProvider
from .rss_provider import RSSProvider

__all__ = ["BaseProvider", "MockProvider", "RSSProvider"]
