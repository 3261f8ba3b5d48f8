# least_played/storage/bot_config.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Sequence

from ..config import BOT_CONFIG_SUFFIX, IDLE_GAMES_KEY

log = logging.getLogger(__name__)


def _load_bot_json(path: Path) -> dict:
    """
    Missing file -> {}. Unreadable JSON raises instead of being overwritten.
    """
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"bot config is not valid JSON: {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"bot config is not a JSON object: {path}")
    return data


def _write_bot_json_atomic(path: Path, data: dict) -> None:
    tmp = path.with_suffix(path.suffix + ".tmp")
    tmp.write_text(json.dumps(data, indent=2), encoding="utf-8")
    try:
        tmp.replace(path)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


class BotConfigWriter:
    """
    Writes GamesPlayedWhileIdle into <config_dir>/<account_id>.json.

    Every other key in the bot config is left as it was.
    """

    def __init__(self, config_dir: Path):
        self.config_dir = Path(config_dir)

    def path_for(self, account_id: str) -> Path:
        if not account_id or "/" in account_id or "\\" in account_id:
            raise ValueError(f"invalid account id: {account_id!r}")
        return self.config_dir / f"{account_id}{BOT_CONFIG_SUFFIX}"

    def get_idle_games(self, account_id: str) -> list[int]:
        data = _load_bot_json(self.path_for(account_id))
        return [int(x) for x in data.get(IDLE_GAMES_KEY) or []]

    def set_idle_games(self, account_id: str, app_ids: Sequence[int]) -> None:
        path = self.path_for(account_id)
        data = _load_bot_json(path)
        data[IDLE_GAMES_KEY] = [int(x) for x in app_ids]

        self.config_dir.mkdir(parents=True, exist_ok=True)
        _write_bot_json_atomic(path, data)
        log.info("Wrote %d idle games to %s", len(app_ids), path)
