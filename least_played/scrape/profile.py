# least_played/scrape/profile.py
from __future__ import annotations

import re
from typing import List, Optional, Union

from bs4 import BeautifulSoup

from least_played.config import GAMESLIST_CONFIG_ID
from least_played.models import RawPair
from least_played.utils_debug import dbg


# Key quotes show up as &quot; in raw attribute text, but as plain " once
# BeautifulSoup has re-serialized the attribute.
_Q = r"(?:&quot;|\")"

# "appid":1234, ...any fields... "playtime_forever":5678
# The gap is lazy and may not run into another "appid" key, so a record
# without playtime_forever can't pick up the next record's value. Braces
# inside names are fine. Nothing after playtime_forever is required (no
# trailing "name" anchor).
_APPID_KEY = _Q + r"appid" + _Q

GAMES_LIST_RE = re.compile(
    _APPID_KEY + r"\s*:\s*(\d+)"
    r"(?:(?!" + _APPID_KEY + r").)*?"
    + _Q + r"playtime_forever" + _Q + r"\s*:\s*(\d+)",
    re.ASCII | re.DOTALL,
)


def locate_games_fragment(document: Union[BeautifulSoup, str]) -> Optional[str]:
    """
    Return the outer HTML of the games list node, or None if the page has none.

    None is expected for private profiles, empty libraries, or a changed
    page layout.
    """
    if isinstance(document, str):
        document = BeautifulSoup(document, "html.parser")

    node = document.find(id=GAMESLIST_CONFIG_ID)
    if node is None:
        return None

    fragment = str(node)
    dbg("locate", id=GAMESLIST_CONFIG_ID, length=len(fragment))
    return fragment


def extract_pairs(fragment: str) -> List[RawPair]:
    """
    Find every (appid, playtime_forever) pair in document order.
    """
    pairs: List[RawPair] = []
    for m in GAMES_LIST_RE.finditer(fragment or ""):
        pairs.append(RawPair(app_id_text=m.group(1), playtime_text=m.group(2)))
        dbg("extract", span=m.span(), appid=m.group(1), playtime=m.group(2))
    return pairs
