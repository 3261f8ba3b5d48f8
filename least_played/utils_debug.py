# least_played/utils_debug.py
from __future__ import annotations

import logging
from typing import Any

_log = logging.getLogger("least_played.debug")


def dbg(tag: str, **kv: Any) -> None:
    """Raw key=value trace line at DEBUG; shows up with --log-level DEBUG."""
    if not _log.isEnabledFor(logging.DEBUG):
        return
    _log.debug("[%s] %s", tag, " ".join(f"{k}={v!r}" for k, v in kv.items()))
