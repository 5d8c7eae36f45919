# spro

spro is a small command-line timer for study sessions. You start it with a
title and stop it when you are done. Each finished session is appended to a log
file for the day on which it stopped. You can then print a day's table, its
total, or a summary of the past seven days.

The timer state (`timeData.txt`) and the daily logs are kept in `~/.spro/`,
which is created when the timer is first started. Each day has its own file,
named after the date in the form `11Jan2022`.

## Installation

```sh
pip install .
```

This installs the `spro` command.

## Usage

```sh
spro -s Linear algebra chapter 3   # start the timer with a session title
spro -c                            # show how long the running session has lasted
spro -e                            # stop the timer and log the session
spro -t                            # print today's table and its total
spro -t 11Jan2022                  # print the table for a given day
spro -b                            # print only today's total
spro -b 11Jan2022                  # print only the total for a given day
spro -w                            # print every table from the past 7 days and the overall total
spro -d 2                          # delete line 2 from today's log (asks for confirmation)
spro -d 2 /path/to/day/file        # delete line 2 from a given log file
```

Running `spro` with no arguments prints the list of options.

Every log line holds the start and end time, the length of the session and its
title, separated by tabs:

```
17:10 - 18:25	1h 15m 0s	Linear algebra chapter 3 
```

When a table is printed, a zero hour count is left out to keep it short. If a
session is running and the table is today's, it is also shown as `ongoing` and
counted in the total. The `-b` total counts only finished sessions.

`-d` shows the line that would be deleted and deletes it only if you answer by
pressing Enter; any other input leaves the file as it was.

The timer can only be started while it is stopped, and only stopped while it
is running. In those cases, for an unknown option, for `-b` when today has no
log, or for a line number outside the file given to `-d`, `spro` prints a
message and exits with status 1.

## Using it from Python

The same actions are available as functions, each taking an optional data
directory (`spro_dir`), a timestamp (`now`) and an output stream (`out`):

- `spro.timer`: `start_timer`, `stop_timer`, `add_entry`, `delete_line`,
  `remove_line`
- `spro.printing`: `print_table`, `add_it_up`, `total_seconds`,
  `current_progress`, `last_week`, `format_duration`, `strip_zero_hours`
- `spro.utility`: `day_filename`, `existing_day_file`, `read_timer`,
  `timer_is_idle`, `normalize_time`, `default_spro_dir`

Errors are raised as `spro.utility.SproError`.

## Limitations

Only the short options shown above are accepted; the long forms listed in the
usage text (such as `--start`) are not recognised. A session that runs past
midnight is logged in full under the day on which it stopped.

## Running the tests

```sh
pip install ".[test]"
pytest
```