"""Text output: usage, tables of a day's sessions and totals."""

from __future__ import annotations

import re
import sys
import time
from pathlib import Path
from typing import TextIO

from .utility import (
    SproError,
    day_filename,
    normalize_time,
    read_timer,
    timer_is_idle,
)

SECONDS_IN_A_DAY = 86400

_USAGE = """\
Usage: spro [OPTION]...
Bash tool to track your progress while studying

Options:
    -s, --start <TITLE>           starts the timer and sets the session title as TITLE
    -e, --end                     stops the timer
    -t, --table <DAY>             prints the progress table for the day <DAY> is optional
                                  if no <DAY> is given, the current day is implied
    -w, --week                    does a -t on every file within the past 7 days
                                  and displays a total amount of hours worked during that time
    -d, --delete <LINE> <DAY>     deletes the line in the given file
                                  if no <DAY> is given, the current day is implied
    -b, --balance <DAY>           prints the total progress of a given day (format: 11Jan2022)
                                  if no <DAY> is given, the current day is implied
                                  the current progress (-c) is not taken into account
    -c, --current                 prints the current progress (how long has it been since -s without using -e)
"""

_ENTRY = re.compile(r".{14}(\d+)h (\d+)m (\d+)s")


def _stream(out: TextIO | None) -> TextIO:
    return sys.stdout if out is None else out


def _now(now: float | None) -> int:
    return int(time.time()) if now is None else int(now)


def usage_text() -> str:
    """Return the usage message."""
    return _USAGE


def warning_text() -> str:
    """Return the reminder printed after a timer starts."""
    return "\nDON'T FORGET TO STOP THE TIMER!\n\n"


def format_duration(seconds: int) -> str:
    """Format seconds as 'Xh Ym Zs'."""
    hours, minutes, secs = normalize_time(seconds)
    return f"{hours}h {minutes}m {secs}s"


def total_seconds(path: str | Path, extra_seconds: int = 0) -> int:
    """Sum the durations recorded in a day file, plus extra_seconds."""
    total = 0
    for line in Path(path).read_text().splitlines():
        if not line.strip():
            continue
        match = _ENTRY.match(line)
        if match is None:
            raise SproError(f"malformed entry: {line!r}")
        hours, minutes, seconds = (int(part) for part in match.groups())
        total += hours * 3600 + minutes * 60 + seconds
    return total + extra_seconds


def add_it_up(path: str | Path, extra_seconds: int = 0, out: TextIO | None = None) -> int:
    """Print and return the total time recorded in a day file."""
    total = total_seconds(path, extra_seconds)
    _stream(out).write(format_duration(total) + "\n")
    return total


def current_progress(
    spro_dir: str | Path | None = None,
    now: float | None = None,
    out: TextIO | None = None,
) -> int:
    """Print the running session and return its elapsed seconds (0 when idle)."""
    stream = _stream(out)
    start, title = read_timer(spro_dir)
    if start == 0:
        stream.write("the timer needs to start in order to display the current progress\n")
        stream.write(usage_text())
        return 0
    elapsed = _now(now) - start
    hours, minutes, seconds = normalize_time(elapsed)
    stream.write(f"{hours}h " if hours else "   ")
    stream.write(f"{minutes}m {seconds}s\t{title}\n")
    return elapsed


def strip_zero_hours(text: str) -> str:
    """Blank out the hour field right after each line's first tab when it reads 0h."""
    pieces = []
    last_separator = "\n"
    pending = 0
    digit_shown = False
    for char in text:
        if pending:
            if pending == 2 and char != "0":
                pieces.append(char)
                digit_shown = True
            elif digit_shown:
                digit_shown = False
                pieces.append("h")
            else:
                pieces.append(" ")
            pending -= 1
        else:
            pieces.append(char)
        if last_separator == "\n" and char == "\t":
            pending = 2
        if char in "\n\t":
            last_separator = char
    return "".join(pieces)


def print_table(
    path: str | Path,
    spro_dir: str | Path | None = None,
    now: float | None = None,
    out: TextIO | None = None,
) -> int:
    """Print a day file with its total; return the total seconds, or -1 if missing."""
    stream = _stream(out)
    path = Path(path)
    moment = _now(now)
    if not path.exists():
        stream.write("no data recorded for today\n")
        return -1
    stream.write(strip_zero_hours(path.read_text()))
    extra = 0
    if not timer_is_idle(spro_dir) and path == day_filename(moment, spro_dir):
        stream.write("ongoing:\t")
        extra = current_progress(spro_dir, moment, stream)
    stream.write("\ntotal: \t\t")
    return add_it_up(path, extra, stream)


def last_week(
    spro_dir: str | Path | None = None,
    now: float | None = None,
    out: TextIO | None = None,
) -> int:
    """Print the tables of the past seven days and their overall total; return it."""
    stream = _stream(out)
    moment = _now(now)
    total = 0
    for days_back in range(6, -1, -1):
        day = moment - days_back * SECONDS_IN_A_DAY
        path = day_filename(day, spro_dir)
        if path.exists():
            stream.write(f"\n{path}:\n\n")
            total += print_table(path, spro_dir, moment, stream)
            stream.write("_________________________\n")
    hours, minutes, seconds = normalize_time(total)
    stream.write(f"\nabsolute total:\t{hours}h {minutes}m {seconds}s \n")
    return total