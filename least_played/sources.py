# least_played/sources.py
from __future__ import annotations

import re
from urllib.parse import urljoin, urlparse

from .config import STEAM_COMMUNITY_URL
from .utils import normalize_url

_STEAMID64_RE = re.compile(r"^7656\d{13}$")
_VANITY_RE = re.compile(r"^[A-Za-z0-9_-]{2,32}$")


def profile_path(profile: str) -> str:
    """
    Returns "profiles/<steamid64>" or "id/<vanity>".

    Accepts:
    - a SteamID64 (17 digits starting with 7656)
    - a vanity name
    - a full steamcommunity.com profile URL (either form, any trailing path)
    """
    p = normalize_url(profile)
    if not p:
        raise ValueError("empty profile")

    if _STEAMID64_RE.match(p):
        return f"profiles/{p}"

    if "://" in p or p.startswith("steamcommunity.com"):
        u = urlparse(p if "://" in p else "https://" + p)
        host = u.netloc.lower().removeprefix("www.")
        if host != "steamcommunity.com":
            raise ValueError(f"not a steamcommunity.com URL: {profile}")
        segs = [s for s in u.path.split("/") if s]
        if len(segs) >= 2 and segs[0] in ("profiles", "id"):
            return f"{segs[0]}/{segs[1]}"
        raise ValueError(f"not a profile URL: {profile}")

    if _VANITY_RE.match(p):
        return f"id/{p}"

    raise ValueError(f"unrecognized profile: {profile}")


def games_page_url(profile: str) -> str:
    return urljoin(STEAM_COMMUNITY_URL, profile_path(profile) + "/games")


def account_id_from_profile(profile: str) -> str:
    """Last segment of the profile path; used as the default bot name."""
    return profile_path(profile).split("/", 1)[1]
