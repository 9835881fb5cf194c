import logging

import pytest
import requests

from news_desk.models import FeedConfig
from news_desk.providers import rss_provider
from news_desk.providers.rss_provider import RSSProvider, clean_html

FEED = FeedConfig("https://feeds.example.com/rss", "Example Feed")

RSS_BODY = b"""<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example</title>
    <item>
      <title>Hurricane claims top $2bn across Florida and Texas</title>
      <link>https://example.com/hurricane</link>
      <pubDate>Mon, 06 Jan 2025 09:30:00 GMT</pubDate>
      <description>&lt;p&gt;Loss estimates &lt;b&gt;keep&lt;/b&gt; rising.&lt;/p&gt;</description>
    </item>
    <item>
      <title></title>
      <link>https://example.com/untitled</link>
    </item>
  </channel>
</rss>
"""


class FakeResponse:
    def __init__(self, content: bytes, status_code: int = 200) -> None:
        self.content = content
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")


@pytest.fixture
def captured(monkeypatch):
    calls = {}

    def install(response=None, error=None):
        def fake_get(url, headers=None, timeout=None):
            calls.update(url=url, headers=headers, timeout=timeout)
            if error is not None:
                raise error
            return response

        monkeypatch.setattr(rss_provider.requests, "get", fake_get)
        return calls

    return install


def test_parses_items_and_sends_user_agent(captured) -> None:
    calls = captured(FakeResponse(RSS_BODY))
    items = RSSProvider(user_agent="NewsDesk/1.0", timeout=3).fetch(FEED)
    assert calls["headers"] == {"User-Agent": "NewsDesk/1.0"}
    assert calls["timeout"] == 3
    assert len(items) == 1
    item = items[0]
    assert item.title == "Hurricane claims top $2bn across Florida and Texas"
    assert item.link == "https://example.com/hurricane"
    assert item.pub_date == "Mon, 06 Jan 2025 09:30:00 GMT"
    assert item.summary == "Loss estimates keep rising."


def test_network_error_returns_empty_and_logs(captured, caplog) -> None:
    captured(error=requests.ConnectionError("name resolution failed"))
    with caplog.at_level(logging.ERROR):
        assert RSSProvider().fetch(FEED) == []
    assert "Error fetching Example Feed: name resolution failed" in caplog.text


def test_http_error_returns_empty(captured) -> None:
    captured(FakeResponse(b"", status_code=503))
    assert RSSProvider().fetch(FEED) == []


def test_malformed_payload_returns_empty(captured, caplog) -> None:
    captured(FakeResponse(b"{\"status\": \"blocked\"}"))
    with caplog.at_level(logging.ERROR):
        assert RSSProvider().fetch(FEED) == []
    assert "Error fetching Example Feed" in caplog.text


def test_clean_html() -> None:
    assert clean_html("<p>Hello   <em>world</em></p>") == "Hello world"
    assert clean_html("<br/>") is None
    assert clean_html(None) is None
