import io

import pytest

from spro.printing import format_duration, total_seconds, warning_text
from spro.timer import add_entry, delete_line, remove_line, start_timer, stop_timer
from spro.utility import (
    SproError,
    day_filename,
    hour_and_minute,
    number_of_rows,
    read_timer,
    timer_is_idle,
)

START = 1_650_000_000


def test_start_timer_records_start_and_title(tmp_path):
    out = io.StringIO()
    start_timer("my title ", tmp_path, START, out)
    assert read_timer(tmp_path) == (START, "my title ")
    assert out.getvalue() == warning_text()


def test_start_timer_twice_raises(tmp_path):
    start_timer("a ", tmp_path, START, io.StringIO())
    with pytest.raises(SproError, match="needs to stop"):
        start_timer("b ", tmp_path, START + 5, io.StringIO())


def test_stop_timer_without_start_raises(tmp_path):
    with pytest.raises(SproError, match="needs to start"):
        stop_timer(tmp_path, START)


def test_start_then_stop_records_session(tmp_path):
    start_timer("reading ", tmp_path, START, io.StringIO())
    path = stop_timer(tmp_path, START + 3725)
    assert timer_is_idle(tmp_path)
    assert path == day_filename(START + 3725, tmp_path)
    assert number_of_rows(path) == 1
    assert total_seconds(path) == 3725
    assert path.read_text().endswith("\treading \n")


def test_add_entry_line_format(tmp_path):
    stop = START + 3725
    path = add_entry(START, stop, "title ", tmp_path)
    expected = (
        f"{hour_and_minute(START)} - {hour_and_minute(stop)}"
        f"\t{format_duration(3725)}\ttitle \n"
    )
    assert path.read_text() == expected


def test_add_entry_appends(tmp_path):
    add_entry(START, START + 10, "a ", tmp_path)
    path = add_entry(START + 20, START + 50, "b ", tmp_path)
    assert number_of_rows(path) == 2
    assert total_seconds(path) == 40


def test_remove_line_middle(tmp_path):
    path = tmp_path / "day"
    path.write_text("a\nb\nc\n")
    assert remove_line(path, 2) == ("b\n", "a\nc\n")
    assert remove_line(path, 1) == ("a\n", "b\nc\n")
    assert path.read_text() == "a\nb\nc\n"


def test_remove_line_out_of_range(tmp_path):
    path = tmp_path / "day"
    path.write_text("a\n")
    with pytest.raises(SproError):
        remove_line(path, 2)


def test_delete_line_confirmed(tmp_path):
    path = tmp_path / "day"
    path.write_text("first\nsecond\n")
    out = io.StringIO()
    assert delete_line(2, path, lambda: True, out) is True
    assert path.read_text() == "first\n"
    assert "\033[1;31msecond\n\033[0m" in out.getvalue()


def test_delete_line_declined(tmp_path):
    path = tmp_path / "day"
    path.write_text("first\nsecond\n")
    assert delete_line(1, path, lambda: False, io.StringIO()) is False
    assert path.read_text() == "first\nsecond\n"


def test_delete_line_beyond_end_raises(tmp_path):
    path = tmp_path / "day"
    path.write_text("only\n")
    with pytest.raises(SproError, match="only has 1 line$"):
        delete_line(3, path, lambda: True, io.StringIO())


def test_delete_line_zero_raises(tmp_path):
    path = tmp_path / "day"
    path.write_text("only\n")
    with pytest.raises(SproError):
        delete_line(0, path, lambda: True, io.StringIO())
    assert path.read_text() == "only\n"