"""Shared fakes for the HTTP layer and page markup."""

import pytest

from homophone_scraper.config_manager import FetchSettings
from homophone_scraper.fetcher import HomophoneFetcher

BASE_URL = "https://en.wiktionary.org/wiki/"


def homophone_page(*words):
    """Wiktionary-style page with a Homophones line listing the given words."""
    links = ", ".join(
        f'<span class="Latn" lang="en"><a href="/wiki/{w}" title="{w}">{w}</a></span>'
        for w in words
    )
    return (
        "<html><body><div id=\"mw-content-text\"><ul><li>"
        f"<span class=\"homophones\">Homophones: {links}</span>"
        "</li></ul></div></body></html>"
    )


class FakeResponse:
    """Minimal stand-in for requests.Response."""
    def __init__(self, status_code=200, text="", reason="OK"):
        self.status_code = status_code
        self.text = text
        self.reason = reason
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.closed = True
        return False


class FakeSession:
    """
    Fake requests.Session keyed by URL.

    Each route is a response, an exception to raise, or a list of those
    consumed in order (the last entry repeats). Unknown URLs answer 404.
    """
    def __init__(self, routes=None):
        self.routes = {}
        for url, items in (routes or {}).items():
            self.routes[url] = list(items) if isinstance(items, list) else [items]
        self.headers = {}
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append(url)
        queue = self.routes.get(url)
        if not queue:
            return FakeResponse(404, "", "Not Found")
        item = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(item, Exception):
            raise item
        return item

    def close(self):
        self.closed = True


@pytest.fixture
def sleeps():
    return []


@pytest.fixture
def make_fetcher(sleeps):
    """Build a HomophoneFetcher over a FakeSession that records backoff sleeps."""
    def _make(routes=None, **settings):
        session = FakeSession({BASE_URL + word: item for word, item in (routes or {}).items()})
        fetcher = HomophoneFetcher(
            FetchSettings(base_url=BASE_URL, **settings),
            session=session,
            sleep=sleeps.append,
        )
        return fetcher
    return _make
