import sys
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

ROOT = Path(__file__).resolve().parents[1]

for path in (ROOT, ROOT / "tests"):
    path_str = str(path)
    if path_str not in sys.path:
        sys.path.insert(0, path_str)

from errors import TransportError  # noqa: E402


class FakeFetcher:
    """Serves canned HTML by URL and records every request."""

    def __init__(self, pages=None):
        self.pages = dict(pages or {})
        self.calls = []

    def fetch(self, url, session_id=None):
        self.calls.append((url, session_id))
        if url not in self.pages:
            raise TransportError(url, status=404)
        return BeautifulSoup(self.pages[url], "lxml")

    def fetch_authenticated(self, url, session_id):
        return self.fetch(url, session_id=session_id)

    def urls(self):
        return [u for u, _ in self.calls]


@pytest.fixture
def fake_fetcher():
    return FakeFetcher()
