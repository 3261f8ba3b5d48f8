# least_played/models.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class RawPair:
    """
    One (appid, playtime_forever) match, still as text.

    Both fields are digit-only when produced by the extractor.
    """
    app_id_text: str
    playtime_text: str


@dataclass(frozen=True)
class GameRecord:
    app_id: int
    playtime_minutes: int  # Steam's playtime_forever, total minutes


@dataclass(frozen=True)
class RecordConversionFailure:
    pair: RawPair
    error: str


@dataclass(frozen=True)
class IdleSelection:
    """
    Least-played games, ascending by playtime, capped at the idle limit.

    Only the app ids cross into bot configuration; playtime stays here.
    """
    games: tuple[GameRecord, ...] = ()

    def app_ids(self) -> tuple[int, ...]:
        return tuple(g.app_id for g in self.games)

    def __len__(self) -> int:
        return len(self.games)

    def __bool__(self) -> bool:
        return bool(self.games)


class EventKind(str, Enum):
    FRAGMENT_NOT_FOUND = "fragment_not_found"
    NO_PAIRS_MATCHED = "no_pairs_matched"
    RECORD_CONVERSION_FAILURE = "record_conversion_failure"
    DOCUMENT_RETRIEVAL_FAILURE = "document_retrieval_failure"
    SUMMARY = "summary"
    TOP_PICKS = "top_picks"
    NO_GAMES_TO_IDLE = "no_games_to_idle"


class RunOutcome(str, Enum):
    SELECTED = "selected"
    EMPTY = "empty"  # page parsed fine, nothing usable to idle
    FRAGMENT_NOT_FOUND = "fragment_not_found"
    NO_PAIRS_MATCHED = "no_pairs_matched"
    RETRIEVAL_FAILED = "retrieval_failed"


@dataclass(frozen=True)
class PipelineEvent:
    kind: EventKind
    level: int
    message: str

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


@dataclass(frozen=True)
class PipelineReport:
    """
    Everything one run produced: the selection plus its diagnostics.

    Counts stay at 0 for stages the run never reached.
    """
    outcome: RunOutcome
    selection: IdleSelection = IdleSelection()
    events: tuple[PipelineEvent, ...] = ()
    failures: tuple[RecordConversionFailure, ...] = ()
    matched: int = 0
    parsed: int = 0

    @property
    def selected(self) -> int:
        return len(self.selection)

    def events_of(self, kind: EventKind) -> list[PipelineEvent]:
        return [e for e in self.events if e.kind == kind]
