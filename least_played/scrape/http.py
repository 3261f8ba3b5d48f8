# least_played/scrape/http.py
from __future__ import annotations

import cloudscraper
from bs4 import BeautifulSoup

from least_played.config import DEFAULT_TIMEOUT_SEC, UA
from least_played.errors import DocumentRetrievalFailure


def fetch_html(
    url: str,
    *,
    cookie: str = "",
    timeout: float = DEFAULT_TIMEOUT_SEC,
) -> BeautifulSoup:
    """
    Fetch a profile games page and return a BeautifulSoup object.

    - cloudscraper session with a desktop Chrome UA
    - optional Cookie header (steamLoginSecure etc. for non-public libraries)
    - single attempt; any failure raises DocumentRetrievalFailure
    """
    headers = {"User-Agent": UA}
    if cookie:
        headers["Cookie"] = cookie

    try:
        scraper = cloudscraper.create_scraper(
            browser={"browser": "chrome", "platform": "linux", "mobile": False}
        )
        resp = scraper.get(url, headers=headers, timeout=timeout)
        resp.raise_for_status()
    except Exception as e:
        raise DocumentRetrievalFailure(url, f"{type(e).__name__}: {e}") from e

    return BeautifulSoup(resp.text, "html.parser")
