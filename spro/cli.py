"""Command line: parse options and run the requested actions."""

from __future__ import annotations

import getopt
import re
import sys
import time
from collections import Counter
from collections.abc import Sequence
from pathlib import Path

from .printing import add_it_up, current_progress, last_week, print_table, usage_text
from .timer import delete_line, start_timer, stop_timer
from .utility import SproError, day_filename, default_spro_dir, existing_day_file

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class _Exit(Exception):
    def __init__(self, code: int) -> None:
        super().__init__(code)
        self.code = code


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _fail(message: str | None = None, show_usage: bool = False) -> _Exit:
    """Print an optional message and the usage text; return the exit to raise."""
    if message is not None:
        print(message)
    if show_usage:
        print(usage_text(), end="")
    return _Exit(1)


def _run(args: list[str]) -> None:
    try:
        opts, rest = getopt.gnu_getopt(args, "s:etbcwd")
    except getopt.GetoptError as exc:
        print(f"spro: {exc.msg}", file=sys.stderr)
        raise _fail(show_usage=True) from None

    counts = Counter(opt[1:] for opt, _ in opts)
    spro_dir = default_spro_dir()
    today = int(time.time())

    if counts["s"] == 1:
        if len(args) == 1:
            raise _fail(show_usage=True)
        value = next(arg for opt, arg in opts if opt == "-s")
        title = "".join(f"{word} " for word in [value, *rest])
        try:
            start_timer(title, spro_dir, today)
        except SproError as exc:
            raise _fail(str(exc), show_usage=True) from None

    if counts["e"] == 1:
        try:
            stop_timer(spro_dir)
        except SproError as exc:
            raise _fail(str(exc), show_usage=True) from None

    if counts["t"] == 1:
        if len(args) == 1:
            print_table(day_filename(today, spro_dir), spro_dir, today)
        elif len(args) > 2:
            raise _fail("Only one date at a time!\n", show_usage=True)
        else:
            day = spro_dir / args[1]
            if day.exists():
                print_table(day, spro_dir, today)
            else:
                print(f"No data for the given date ({day})")

    if counts["b"] == 1:
        if len(args) == 1:
            try:
                add_it_up(existing_day_file(today, spro_dir))
            except SproError as exc:
                raise _fail(str(exc)) from None
        elif len(args) > 2:
            raise _fail("Only one date at a time!\n", show_usage=True)
        else:
            day = spro_dir / args[1]
            if day.exists():
                add_it_up(day)
            else:
                print(f"No data for the given date ({day})")

    if counts["c"] == 1:
        current_progress(spro_dir, today)

    if counts["w"] == 1:
        last_week(spro_dir, today)

    if counts["d"] == 1:
        if len(args) <= 1:
            print("no line given to be deleted")
            print(usage_text(), end="")
        elif len(args) in (2, 3):
            if len(args) == 2:
                target = day_filename(today, spro_dir)
            else:
                target = Path(args[2])
                if not target.exists():
                    print(f'no file under the name "{args[2]}"')
            try:
                delete_line(_atoi(args[1]), target)
            except SproError as exc:
                raise _fail(str(exc)) from None
        else:
            print(usage_text(), end="")


def main(argv: Sequence[str] | None = None) -> int:
    """Run spro with the given arguments; return the exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(usage_text(), end="")
        return 0
    try:
        _run(args)
    except _Exit as exc:
        return exc.code
    return 0


if __name__ == "__main__":
    sys.exit(main())