# least_played/cli.py
from __future__ import annotations

import argparse
import logging
import os
import sys
from functools import partial
from pathlib import Path

from bs4 import BeautifulSoup

from least_played.config import (
    COOKIE_ENV,
    DEFAULT_HISTORY_FILE,
    DEFAULT_TIMEOUT_SEC,
    MAX_GAMES_PLAYED_CONCURRENTLY,
)
from least_played.errors import DocumentRetrievalFailure
from least_played.models import RunOutcome
from least_played.scrape.http import fetch_html
from least_played.scrape.orchestrator import run_for_profile
from least_played.sources import account_id_from_profile
from least_played.storage.bot_config import BotConfigWriter
from least_played.storage.csv_cache import write_selection_csv
from least_played.utils import safe_read_text_path

log = logging.getLogger("least_played")


def read_html_file(path: Path, url: str) -> BeautifulSoup:
    """Offline document provider: ignores the URL, parses a saved page."""
    try:
        text = safe_read_text_path(path)
    except OSError as e:
        raise DocumentRetrievalFailure(str(path), f"{type(e).__name__}: {e}") from e
    return BeautifulSoup(text, "html.parser")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pick the least played games of a Steam profile to idle.")
    p.add_argument("profile", help="SteamID64, vanity name, or steamcommunity.com profile URL")
    p.add_argument("--html", default="", help="Read the /games page from this file instead of fetching it")
    p.add_argument("--cookie", default=os.environ.get(COOKIE_ENV, ""), help="Cookie header for non-public libraries")
    p.add_argument("--limit", type=int, default=MAX_GAMES_PLAYED_CONCURRENTLY, help="Max games to select (default: 32)")
    p.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT_SEC, help="Fetch timeout in seconds (default: 30)")
    p.add_argument("--account", default="", help="Bot name for config/history (default: from profile)")
    p.add_argument("--bot-config-dir", default="", help="Write GamesPlayedWhileIdle into <dir>/<account>.json")
    p.add_argument("--history", default="", help=f"Append selections to this CSV (e.g. {DEFAULT_HISTORY_FILE})")
    p.add_argument("--verbose", action="store_true", help="Log the selected games with their playtime")
    p.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO)",
    )
    return p.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    if args.limit < 0:
        log.error("--limit must be >= 0")
        return 1

    if args.html:
        fetch = partial(read_html_file, Path(args.html).expanduser().resolve())
    else:
        fetch = partial(fetch_html, cookie=(args.cookie or "").strip(), timeout=args.timeout)

    try:
        account_id = args.account or account_id_from_profile(args.profile)
    except ValueError as e:
        log.error("%s", e)
        return 1

    writer = BotConfigWriter(Path(args.bot_config_dir).expanduser()) if args.bot_config_dir else None

    try:
        report = run_for_profile(
            args.profile,
            fetch=fetch,
            writer=writer,
            account_id=account_id,
            limit=args.limit,
            verbose=args.verbose,
            logger=log,
        )
    except (OSError, ValueError) as e:
        log.error("Could not write idle games for %s: %s", account_id, e)
        return 1

    if report.outcome == RunOutcome.RETRIEVAL_FAILED:
        return 1

    if args.history:
        try:
            write_selection_csv(Path(args.history).expanduser(), account_id, report)
        except OSError as e:
            log.error("Could not write selection history: %s", e)
            return 1

    print(",".join(str(a) for a in report.selection.app_ids()))
    return 0


if __name__ == "__main__":
    sys.exit(main())
