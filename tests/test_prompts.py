from datetime import date

import pytest

from models import Priority
from prompts import (
    Field, ask_content, ask_date, ask_field, ask_priority, ask_task_number, ask_time,
)


def test_priority_reasks_silently(feed_input, capsys):
    feed_input(["x", "", "h"])
    assert ask_priority() is Priority.H
    out = capsys.readouterr().out
    assert out.count("Input the task priority (C, H, N, L):") == 3
    assert "invalid" not in out


@pytest.mark.parametrize("raw, expected", [
    ("2024-02-29", [2024, 2, 29]),
    ("2023-12-31", [2023, 12, 31]),
    (" 2025-1-5 ", [2025, 1, 5]),
])
def test_date_valid(feed_input, raw, expected):
    feed_input([raw])
    assert ask_date() == expected


def test_date_invalid_reprompts(feed_input, capsys):
    feed_input(["2023-02-30", "2023-13-01", "2023-01", "2023-01-01-01", "tomorrow", "2023-02-28"])
    assert ask_date() == [2023, 2, 28]
    assert capsys.readouterr().out.count("The input date is invalid") == 5


def test_time_valid(feed_input):
    feed_input(["00:00"])
    assert ask_time(date(2024, 1, 1)) == [0, 0]
    feed_input(["23:59"])
    assert ask_time(date(2024, 1, 1)) == [23, 59]


def test_time_invalid_reprompts(feed_input, capsys):
    feed_input(["24:00", "12:60", "-1:10", "12", "1:2:3", "ab:cd", "7:05"])
    assert ask_time(date(2024, 1, 1)) == [7, 5]
    assert capsys.readouterr().out.count("The input time is invalid") == 6


def test_content_joins_trimmed_lines(feed_input):
    feed_input(["  first line ", "second", "   "])
    assert ask_content() == "first line\nsecond"


def test_content_blank_first_line(feed_input):
    feed_input([""])
    assert ask_content() == ""


def test_task_number_range(feed_input, capsys):
    feed_input(["0", "4", "two", "3"])
    assert ask_task_number(3) == 3
    out = capsys.readouterr().out
    assert "Input the task number (1-3):" in out
    assert out.count("Invalid task number") == 3


def test_field_case_insensitive(feed_input, capsys):
    feed_input(["content", "TASK"])
    assert ask_field() is Field.TASK
    assert capsys.readouterr().out.count("Invalid field") == 1


def test_date_rejects_underscores_and_inner_spaces(feed_input, capsys):
    feed_input(["2023-0_1-01", "2023- 01-01", "2023-01-02"])
    assert ask_date() == [2023, 1, 2]
    assert capsys.readouterr().out.count("The input date is invalid") == 2


def test_time_rejects_underscores_and_inner_spaces(feed_input, capsys):
    feed_input(["12 : 30", "1_2:30", "12:30"])
    assert ask_time(date(2024, 1, 1)) == [12, 30]
    assert capsys.readouterr().out.count("The input time is invalid") == 2
