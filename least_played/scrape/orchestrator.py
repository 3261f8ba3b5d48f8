# least_played/scrape/orchestrator.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Sequence, Union

from bs4 import BeautifulSoup

from ..config import MAX_GAMES_PLAYED_CONCURRENTLY
from ..errors import DocumentRetrievalFailure
from ..models import EventKind, PipelineEvent, PipelineReport, RunOutcome
from ..sources import account_id_from_profile, games_page_url
from .http import fetch_html
from .profile import extract_pairs, locate_games_fragment
from .records import failure_message, parse_records, select_least_played

log = logging.getLogger(__name__)

Document = Union[BeautifulSoup, str]
Fetcher = Callable[[str], Document]


class IdleGamesWriter(Protocol):
    def set_idle_games(self, account_id: str, app_ids: Sequence[int]) -> None:
        ...


class _Events:
    """Collects PipelineEvents while sending each one to the logger."""

    def __init__(self, logger: logging.Logger):
        self.logger = logger
        self.items: List[PipelineEvent] = []

    def emit(self, kind: EventKind, level: int, message: str) -> None:
        self.logger.log(level, "%s", message)
        self.record(kind, level, message)

    def record(self, kind: EventKind, level: int, message: str) -> None:
        self.items.append(PipelineEvent(kind=kind, level=level, message=message))


def pick_least_played(
    document: Document,
    *,
    limit: int = MAX_GAMES_PLAYED_CONCURRENTLY,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> PipelineReport:
    """
    locate -> extract -> parse -> select, for one already-fetched page.

    Never raises for page content problems; every stage outcome ends up
    in the returned report (and in the logger).
    """
    logger = logger or log
    events = _Events(logger)

    fragment = locate_games_fragment(document)
    if fragment is None:
        events.emit(
            EventKind.FRAGMENT_NOT_FOUND,
            logging.WARNING,
            "Did not find element with id='gameslist_config' in the HTML.",
        )
        return PipelineReport(outcome=RunOutcome.FRAGMENT_NOT_FOUND, events=tuple(events.items))

    pairs = extract_pairs(fragment)
    if not pairs:
        events.emit(
            EventKind.NO_PAIRS_MATCHED,
            logging.WARNING,
            f"No appid/playtime pairs found in HTML snippet ({len(fragment)} chars), skipping.",
        )
        return PipelineReport(outcome=RunOutcome.NO_PAIRS_MATCHED, events=tuple(events.items))

    # parse_records logs each failure itself
    records, failures = parse_records(pairs, logger=logger)
    for f in failures:
        events.record(EventKind.RECORD_CONVERSION_FAILURE, logging.ERROR, failure_message(f))

    selection = select_least_played(records, limit=limit)

    events.emit(
        EventKind.SUMMARY,
        logging.INFO,
        f"Found {len(pairs)} appid/playtime matches, parsed {len(records)}, selected {len(selection)}.",
    )

    if verbose and selection:
        picks = ", ".join(f"(AppID={g.app_id},Minutes={g.playtime_minutes})" for g in selection.games)
        events.emit(EventKind.TOP_PICKS, logging.INFO, f"Top picks: {picks}")

    if not selection:
        events.emit(EventKind.NO_GAMES_TO_IDLE, logging.INFO, "No games found to idle!")

    return PipelineReport(
        outcome=RunOutcome.SELECTED if selection else RunOutcome.EMPTY,
        selection=selection,
        events=tuple(events.items),
        failures=tuple(failures),
        matched=len(pairs),
        parsed=len(records),
    )


def run_for_profile(
    profile: str,
    *,
    fetch: Fetcher = fetch_html,
    writer: Optional[IdleGamesWriter] = None,
    account_id: str = "",
    limit: int = MAX_GAMES_PLAYED_CONCURRENTLY,
    verbose: bool = False,
    logger: Optional[logging.Logger] = None,
) -> PipelineReport:
    """
    One full run for one account: fetch the games page, pick, hand the
    app ids to `writer`.

    A failed fetch is logged with its traceback and reported as
    RETRIEVAL_FAILED; nothing is written. Only a non-empty selection
    reaches the writer. Writer errors propagate.
    """
    logger = logger or log
    url = games_page_url(profile)
    account_id = account_id or account_id_from_profile(profile)

    try:
        document = fetch(url)
    except DocumentRetrievalFailure as e:
        logger.exception("Could not retrieve games page for %s", account_id)
        event = PipelineEvent(
            kind=EventKind.DOCUMENT_RETRIEVAL_FAILURE,
            level=logging.ERROR,
            message=str(e),
        )
        return PipelineReport(outcome=RunOutcome.RETRIEVAL_FAILED, events=(event,))

    report = pick_least_played(document, limit=limit, verbose=verbose, logger=logger)

    if writer is not None and report.selection:
        writer.set_idle_games(account_id, report.selection.app_ids())
        logger.info("Assigned %d least-played games to idle for %s.", report.selected, account_id)

    return report