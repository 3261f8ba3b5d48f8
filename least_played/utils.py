# least_played/utils.py
from __future__ import annotations

from datetime import datetime, timezone

from .config import UINT32_MAX


def _now_utc() -> datetime:
    return datetime.now(timezone.utc)


def now_iso_z() -> str:
    return _now_utc().strftime("%Y-%m-%dT%H:%M:%SZ")


def safe_read_text_path(path) -> str:
    """Read a Path-like object as utf-8, replacing errors."""
    return path.read_text(encoding="utf-8", errors="replace")


def normalize_url(url: str) -> str:
    return (url or "").strip()


def parse_uint32(text: str) -> int:
    """
    Culture-invariant unsigned parse: ASCII 0-9 only, 0..UINT32_MAX.

    int() on its own would also take signs, whitespace, underscores and
    non-ASCII digits.
    """
    s = text or ""
    if not (s.isascii() and s.isdigit()):
        raise ValueError(f"not an unsigned integer: {text!r}")

    value = int(s)
    if value > UINT32_MAX:
        raise ValueError(f"value out of range for uint32: {text!r}")
    return value
