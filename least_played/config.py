# least_played/config.py
from __future__ import annotations


# -----------------------------
# Profile page
# -----------------------------

STEAM_COMMUNITY_URL = "https://steamcommunity.com/"

# The <template> node whose data attribute carries the escaped rgGames JSON
GAMESLIST_CONFIG_ID = "gameslist_config"


# -----------------------------
# Selection rules
# -----------------------------

# Steam refuses more than this many games reported as played at once
MAX_GAMES_PLAYED_CONCURRENTLY = 32

# appid / playtime_forever are unsigned 32-bit on the Steam side
UINT32_MAX = 2**32 - 1


# -----------------------------
# HTTP / scraping
# -----------------------------

UA = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/122.0.0.0 Safari/537.36"
)

COOKIE_ENV = "STEAM_COOKIE"
DEFAULT_TIMEOUT_SEC = 30.0


# -----------------------------
# Bot config (GamesPlayedWhileIdle)
# -----------------------------

BOT_CONFIG_SUFFIX = ".json"
IDLE_GAMES_KEY = "GamesPlayedWhileIdle"


# -----------------------------
# Selection history CSV schema
# -----------------------------

DEFAULT_HISTORY_FILE = "selections.csv"

CSV_COLUMNS = [
    "account_id",
    "rank",
    "app_id",
    "playtime_minutes",
    "selected_utc_iso",
]
