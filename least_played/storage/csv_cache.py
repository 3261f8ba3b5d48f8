# least_played/storage/csv_cache.py
from __future__ import annotations

from pathlib import Path

import pandas as pd

from least_played.config import CSV_COLUMNS
from least_played.models import PipelineReport
from least_played.utils import now_iso_z


def load_selection_history(history_file: Path) -> pd.DataFrame:
    """
    Read the selection history CSV.

    Returns an empty frame with the usual columns if the file doesn't exist yet.
    """
    if not history_file.exists():
        return pd.DataFrame(columns=CSV_COLUMNS)
    return pd.read_csv(history_file, dtype={"account_id": str})


def write_selection_csv(history_file: Path, account_id: str, report: PipelineReport) -> int:
    """
    Append one row per selected game, in rank order (1 = least played).

    Returns the number of rows written; an empty selection writes nothing.
    """
    if not report.selection:
        return 0

    ts = now_iso_z()
    rows = []
    for rank, game in enumerate(report.selection.games, start=1):
        rows.append(
            {
                "account_id": account_id,
                "rank": rank,
                "app_id": game.app_id,
                "playtime_minutes": game.playtime_minutes,
                "selected_utc_iso": ts,
            }
        )

    df = pd.DataFrame(rows, columns=CSV_COLUMNS)
    exists = history_file.exists()
    df.to_csv(history_file, mode="a", header=not exists, index=False)
    return len(rows)
