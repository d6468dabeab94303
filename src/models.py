"""Data models for the task list.

Exposes the Task dataclass plus the Priority and DueTag enums. Dates and
times are kept as plain integer lists ([y, m, d] and [h, m]) so that the
JSON records stay identical to what is written on disk.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, Dict, List, Optional


class Priority(Enum):
    C = "Critical"
    H = "High"
    N = "Normal"
    L = "Low"

    @classmethod
    def from_code(cls, code: str) -> Priority:
        """Parse a one-letter code, case-insensitive."""
        try:
            return cls[code.strip().upper()]
        except KeyError:
            raise ValueError(f"Invalid priority code '{code}'")


class DueTag(Enum):
    O = "Overdue"
    T = "DueToday"
    I = "InTime"


def today_utc() -> date:
    return datetime.now(timezone.utc).date()


def _int_list(value: Any, size: int, name: str) -> List[int]:
    if not isinstance(value, list) or len(value) != size:
        raise ValueError(f"'{name}' must be a list of {size} integers")
    # bool is an int subclass; reject it explicitly
    if not all(isinstance(v, int) and not isinstance(v, bool) for v in value):
        raise ValueError(f"'{name}' must be a list of {size} integers")
    return list(value)


@dataclass
class Task:
    """A single task.

    Fields:
        content: Non-blank text; lines are trimmed and joined by newlines.
        date: [year, month, day], a valid calendar date.
        time: [hour, minute], a valid 24-hour clock time.
        priority: One of Priority.C / H / N / L.
    """
    content: str
    date: List[int]
    time: List[int]
    priority: Priority

    def due_tag(self, today: Optional[date] = None) -> DueTag:
        """Urgency relative to ``today`` (current UTC date by default)."""
        today = today or today_utc()
        days = (date(*self.date) - today).days
        if days == 0:
            return DueTag.T
        if days > 0:
            return DueTag.I
        return DueTag.O

    # -------------------- serialization --------------------
    def to_dict(self) -> Dict[str, Any]:
        return {
            'content': self.content,
            'date': list(self.date),
            'time': list(self.time),
            'priority': self.priority.name,
        }

    @classmethod
    def from_dict(cls, raw: Any) -> Task:
        """Build a Task from a stored record; ValueError if it is malformed."""
        if not isinstance(raw, dict):
            raise ValueError("record is not an object")
        try:
            content = raw['content']
            raw_date = raw['date']
            raw_time = raw['time']
            raw_priority = raw['priority']
        except KeyError as e:
            raise ValueError(f"missing key {e}") from e
        if not isinstance(content, str) or not content.strip():
            raise ValueError("'content' must be a non-blank string")
        if not isinstance(raw_priority, str):
            raise ValueError("'priority' must be a string")
        task_date = _int_list(raw_date, 3, 'date')
        task_time = _int_list(raw_time, 2, 'time')
        date(*task_date)
        time(*task_time)
        return cls(
            content=content,
            date=task_date,
            time=task_time,
            priority=Priority.from_code(raw_priority),
        )

    def __repr__(self) -> str:  # pragma: no cover - convenience only
        return f"Task(date={self.date}, time={self.time}, priority={self.priority.name})"
