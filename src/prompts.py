"""Interactive prompts that keep asking until the answer is valid.

Each helper prints its question, reads a line with input(), and on bad
input prints a specific message (priority re-asks silently) before asking
again. There is no retry limit.
"""
from __future__ import annotations
import re
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from models import Priority, today_utc

_INT_RE = re.compile(r"[+-]?[0-9]+")


class Field(Enum):
    PRIORITY = 'priority'
    DATE = 'date'
    TIME = 'time'
    TASK = 'task'

    @classmethod
    def parse(cls, text: str) -> Optional[Field]:
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


def _split_ints(text: str, sep: str, count: int) -> List[int]:
    parts = text.strip().split(sep)
    if len(parts) != count:
        raise ValueError(f"expected {count} parts separated by '{sep}'")
    # int() alone would also take '0_1' and ' 30'
    if not all(_INT_RE.fullmatch(p) for p in parts):
        raise ValueError(f"non-numeric part in '{text}'")
    return [int(p) for p in parts]


def ask_priority() -> Priority:
    while True:
        print("Input the task priority (C, H, N, L):")
        try:
            return Priority.from_code(input())
        except ValueError:
            continue


def ask_date() -> List[int]:
    while True:
        print("Input the date (yyyy-mm-dd):")
        try:
            parts = _split_ints(input(), '-', 3)
            date(*parts)
            return parts
        except ValueError:
            print("The input date is invalid")


def ask_time(today: Optional[date] = None) -> List[int]:
    """Ask for hh:mm. Today's date only scaffolds the range check."""
    while True:
        print("Input the time (hh:mm):")
        try:
            parts = _split_ints(input(), ':', 2)
            day = today or today_utc()
            datetime(day.year, day.month, day.day, *parts)
            return parts
        except ValueError:
            print("The input time is invalid")


def ask_content() -> str:
    """Read lines until a blank one; returns '' if the first line is blank."""
    print("Input a new task (enter a blank line to end):")
    lines: List[str] = []
    line = input().strip()
    while line:
        lines.append(line)
        line = input().strip()
    return '\n'.join(lines)


def ask_task_number(count: int) -> int:
    while True:
        print(f"Input the task number (1-{count}):")
        raw = input().strip()
        if raw.isdecimal() and 1 <= int(raw) <= count:
            return int(raw)
        print("Invalid task number")


def ask_field() -> Field:
    while True:
        print("Input a field to edit (priority, date, time, task):")
        field = Field.parse(input())
        if field is not None:
            return field
        print("Invalid field")
