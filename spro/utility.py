"""Shared helpers: time normalisation, day files and the running-timer file."""

from __future__ import annotations

import time
from pathlib import Path

TIMER_FILE = "timeData.txt"

_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class SproError(Exception):
    """Raised when a request cannot be carried out."""


def default_spro_dir() -> Path:
    """Return the directory where progress data is kept (~/.spro)."""
    return Path.home() / ".spro"


def _resolve_dir(spro_dir: str | Path | None) -> Path:
    return default_spro_dir() if spro_dir is None else Path(spro_dir)


def normalize_time(seconds: int) -> tuple[int, int, int]:
    """Split a number of seconds into (hours, minutes, seconds), each below 60."""
    minutes = hours = 0
    if seconds >= 60:
        minutes, seconds = divmod(seconds, 60)
    if minutes >= 60:
        hours, minutes = divmod(minutes, 60)
    return hours, minutes, seconds


def number_of_rows(path: str | Path) -> int:
    """Count the newline characters in a file; a missing file has none."""
    try:
        return Path(path).read_text().count("\n")
    except FileNotFoundError:
        return 0


def hour_and_minute(timestamp: float) -> str:
    """Return the local time of a timestamp as HH:MM."""
    return time.strftime("%H:%M", time.localtime(timestamp))


def day_filename(timestamp: float, spro_dir: str | Path | None = None) -> Path:
    """Return the path of the day file for a timestamp, e.g. 11Jan2022."""
    local = time.localtime(timestamp)
    name = f"{local.tm_mday}{_MONTHS[local.tm_mon - 1]}{local.tm_year}"
    return _resolve_dir(spro_dir) / name


def existing_day_file(timestamp: float, spro_dir: str | Path | None = None) -> Path:
    """Return the day file for a timestamp, raising SproError if it does not exist."""
    path = day_filename(timestamp, spro_dir)
    if not path.exists():
        raise SproError("no file for the given date")
    return path


def read_timer(spro_dir: str | Path | None = None) -> tuple[int, str]:
    """Return (start timestamp, title) of the running timer; start is 0 when idle."""
    path = _resolve_dir(spro_dir) / TIMER_FILE
    try:
        words = path.read_text().split()
    except FileNotFoundError:
        return 0, ""
    if not words:
        return 0, ""
    try:
        start = int(words[0])
    except ValueError:
        return 0, ""
    return start, "".join(f"{word} " for word in words[1:])


def timer_is_idle(spro_dir: str | Path | None = None) -> bool:
    """Return True when no timer is running."""
    start, _ = read_timer(spro_dir)
    return start == 0