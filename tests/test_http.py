"""
Tests for the cloudscraper-backed games page fetch, with the session faked.
"""
import pytest
import requests
from bs4 import BeautifulSoup

from least_played.errors import DocumentRetrievalFailure
from least_played.scrape import http


class FakeResponse:
    def __init__(self, text="", status_error=None):
        self.text = text
        self.status_error = status_error

    def raise_for_status(self):
        if self.status_error is not None:
            raise self.status_error


class FakeScraper:
    def __init__(self, response=None, get_error=None):
        self.response = response
        self.get_error = get_error
        self.calls = []

    def get(self, url, headers=None, timeout=None):
        self.calls.append((url, headers, timeout))
        if self.get_error is not None:
            raise self.get_error
        return self.response


@pytest.fixture
def fake_scraper(monkeypatch):
    """Installs a FakeScraper in place of cloudscraper.create_scraper."""
    def install(scraper):
        monkeypatch.setattr(http.cloudscraper, "create_scraper", lambda **kwargs: scraper)
        return scraper
    return install


class TestFetchHtml:
    """Test success and failure paths of fetch_html."""

    URL = "https://steamcommunity.com/id/someone/games"

    def test_returns_soup(self, fake_scraper):
        """A 200 response is parsed into BeautifulSoup."""
        scraper = fake_scraper(FakeScraper(FakeResponse('<template id="gameslist_config"></template>')))

        soup = http.fetch_html(self.URL, cookie="steamLoginSecure=abc", timeout=5)

        assert isinstance(soup, BeautifulSoup)
        assert soup.find(id="gameslist_config") is not None
        url, headers, timeout = scraper.calls[0]
        assert url == self.URL
        assert headers["Cookie"] == "steamLoginSecure=abc"
        assert "User-Agent" in headers
        assert timeout == 5

    def test_no_cookie_header_by_default(self, fake_scraper):
        scraper = fake_scraper(FakeScraper(FakeResponse("<html></html>")))
        http.fetch_html(self.URL)
        assert "Cookie" not in scraper.calls[0][1]

    def test_connection_error_wrapped(self, fake_scraper):
        """A failing get becomes DocumentRetrievalFailure with the cause chained."""
        error = requests.exceptions.ConnectionError("connection reset")
        fake_scraper(FakeScraper(get_error=error))

        with pytest.raises(DocumentRetrievalFailure) as excinfo:
            http.fetch_html(self.URL)

        assert excinfo.value.__cause__ is error
        assert excinfo.value.url == self.URL
        assert "connection reset" in excinfo.value.reason

    def test_http_status_wrapped(self, fake_scraper):
        """A non-2xx status becomes DocumentRetrievalFailure with the cause chained."""
        error = requests.exceptions.HTTPError("429 Client Error: Too Many Requests")
        fake_scraper(FakeScraper(FakeResponse("", status_error=error)))

        with pytest.raises(DocumentRetrievalFailure) as excinfo:
            http.fetch_html(self.URL)

        assert excinfo.value.__cause__ is error
        assert "HTTPError" in excinfo.value.reason
