# least_played/scrape/records.py
from __future__ import annotations

import logging
from typing import Iterable, List, Optional, Sequence, Tuple

from least_played.config import MAX_GAMES_PLAYED_CONCURRENTLY
from least_played.models import GameRecord, IdleSelection, RawPair, RecordConversionFailure
from least_played.utils import parse_uint32

log = logging.getLogger(__name__)


def failure_message(failure: RecordConversionFailure) -> str:
    return (
        "Error parsing appid or playtime "
        f"(appid={failure.pair.app_id_text!r}, playtime={failure.pair.playtime_text!r}): {failure.error}"
    )


def parse_records(
    pairs: Iterable[RawPair],
    *,
    logger: Optional[logging.Logger] = None,
) -> Tuple[List[GameRecord], List[RecordConversionFailure]]:
    """
    Convert raw pairs to GameRecords.

    A pair that fails to convert is logged and skipped; the rest of the
    batch carries on. Returns (records, failures), both in input order.
    """
    logger = logger or log

    records: List[GameRecord] = []
    failures: List[RecordConversionFailure] = []

    for pair in pairs:
        try:
            app_id = parse_uint32(pair.app_id_text)
            playtime = parse_uint32(pair.playtime_text)
        except ValueError as e:
            failure = RecordConversionFailure(pair=pair, error=str(e))
            failures.append(failure)
            logger.error("%s", failure_message(failure))
            continue

        records.append(GameRecord(app_id=app_id, playtime_minutes=playtime))

    return records, failures


def select_least_played(
    records: Sequence[GameRecord],
    limit: int = MAX_GAMES_PLAYED_CONCURRENTLY,
) -> IdleSelection:
    """
    Least played first, ties in extraction order (sorted() is stable).
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")

    ordered = sorted(records, key=lambda r: r.playtime_minutes)
    return IdleSelection(games=tuple(ordered[:limit]))
