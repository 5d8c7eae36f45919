"""Starting and stopping the timer, recording sessions and deleting entries."""

from __future__ import annotations

import sys
import time
from collections.abc import Callable
from pathlib import Path
from typing import TextIO

from .printing import warning_text
from .utility import (
    TIMER_FILE,
    SproError,
    day_filename,
    default_spro_dir,
    hour_and_minute,
    normalize_time,
    number_of_rows,
    read_timer,
    timer_is_idle,
)


def _resolve_dir(spro_dir: str | Path | None) -> Path:
    return default_spro_dir() if spro_dir is None else Path(spro_dir)


def _now(now: float | None) -> int:
    return int(time.time()) if now is None else int(now)


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _confirm_from_stdin() -> bool:
    return sys.stdin.readline()[:1] == "\n"


def start_timer(
    title: str,
    spro_dir: str | Path | None = None,
    now: float | None = None,
    out: TextIO | None = None,
) -> None:
    """Record the start time and title of a new session."""
    directory = _resolve_dir(spro_dir)
    if not timer_is_idle(directory):
        raise SproError("the timer needs to stop before it can start again")
    directory.mkdir(parents=True, exist_ok=True)
    (directory / TIMER_FILE).write_text(f"{_now(now)}\n{title}")
    _stream(out).write(warning_text())


def add_entry(
    start: float,
    stop: float,
    title: str,
    spro_dir: str | Path | None = None,
) -> Path:
    """Append a session line to the day file of its stop time; return that file."""
    hours, minutes, seconds = normalize_time(int(stop - start))
    path = day_filename(stop, spro_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a") as handle:
        handle.write(
            f"{hour_and_minute(start)} - {hour_and_minute(stop)}"
            f"\t{hours}h {minutes}m {seconds}s\t{title}\n"
        )
    return path


def stop_timer(spro_dir: str | Path | None = None, now: float | None = None) -> Path:
    """Stop the running session, record it and reset the timer; return the day file."""
    directory = _resolve_dir(spro_dir)
    start, title = read_timer(directory)
    if start == 0:
        raise SproError("the timer needs to start before it can stop.")
    path = add_entry(start, _now(now), title, directory)
    (directory / TIMER_FILE).write_text("0")
    return path


def remove_line(path: str | Path, line: int) -> tuple[str, str]:
    """Return (the 1-based line, the file text without it) for a file."""
    lines = Path(path).read_text().splitlines(keepends=True)
    if not 1 <= line <= len(lines):
        raise SproError(f"no line {line} in {path}")
    removed = lines.pop(line - 1)
    return removed, "".join(lines)


def delete_line(
    line: int,
    path: str | Path,
    confirm: Callable[[], bool] | None = None,
    out: TextIO | None = None,
) -> bool:
    """Ask for confirmation and delete a line from a day file; return True if deleted."""
    stream = _stream(out)
    rows = number_of_rows(path)
    if line > rows:
        noun = "line" if rows == 1 else "lines"
        raise SproError(f"the file only has {rows} {noun}")
    if line <= 0:
        raise SproError("no rows below 0 in this file")
    removed, remaining = remove_line(path, line)
    stream.write(
        "are you sure you want to delete this line:\n"
        f"\033[1;31m{removed}\033[0m"
        "enter for yes, any other key for no\n"
    )
    ask = _confirm_from_stdin if confirm is None else confirm
    if not ask():
        return False
    Path(path).write_text(remaining)
    return True