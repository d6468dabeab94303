"""Task list logic: the ordered task container, in-place edits, and rendering.

Tasks have no stored id; the 1-based position in the list is the number
shown to the user and used for delete/edit selection.
"""
from datetime import date
from typing import Iterable, Iterator, List, Optional
from models import Task, Priority, today_utc
from theme import block, color_enabled, PRIORITY_COLOR, DUE_COLOR

CONTENT_WIDTH = 44
SMALL_INDEX_WIDTH = 3
BIG_INDEX_WIDTH = 4
MAX_SMALL_COUNT = 10

class TaskList:
    def __init__(self, tasks: Optional[Iterable[Task]] = None):
        self.tasks: List[Task] = list(tasks) if tasks else []

    # -------------------- queries --------------------
    def __len__(self) -> int:
        return len(self.tasks)

    def __iter__(self) -> Iterator[Task]:
        return iter(self.tasks)

    def is_empty(self) -> bool:
        return not self.tasks

    def get(self, number: int) -> Task:
        """Task at 1-based ``number``; IndexError when out of range."""
        if number < 1 or number > len(self.tasks):
            raise IndexError(f'No task #{number}')
        return self.tasks[number - 1]

    # -------------------- task operations --------------------
    def add(self, task: Task) -> None:
        self.tasks.append(task)

    def remove(self, number: int) -> Task:
        self.get(number)
        return self.tasks.pop(number - 1)

    def set_priority(self, number: int, priority: Priority) -> None:
        self.get(number).priority = priority

    def set_date(self, number: int, new_date: List[int]) -> None:
        self.get(number).date = list(new_date)

    def set_time(self, number: int, new_time: List[int]) -> None:
        self.get(number).time = list(new_time)

    def set_content(self, number: int, content: str) -> bool:
        """Replace content; blank content is refused and False returned."""
        if not content.strip():
            return False
        self.get(number).content = content.strip()
        return True

    # -------------------- display --------------------
    def display(self, today: Optional[date] = None, use_color: Optional[bool] = None) -> None:
        for line in self.render(today, use_color):
            print(line)

    def render(self, today: Optional[date] = None, use_color: Optional[bool] = None) -> List[str]:
        today = today or today_utc()
        if use_color is None:
            use_color = color_enabled()
        width = self._index_width()
        border = self._border(width)
        lines = [border, self._header(width), border]
        for number, task in enumerate(self.tasks, start=1):
            lines.extend(self._task_rows(number, task, width, today, use_color))
            lines.append(border)
        return lines

    def _index_width(self) -> int:
        return BIG_INDEX_WIDTH if len(self.tasks) > MAX_SMALL_COUNT else SMALL_INDEX_WIDTH

    @staticmethod
    def _border(width: int) -> str:
        return '+-' + '-' * width + '+------------+-------+---+---+' + '-' * CONTENT_WIDTH + '+'

    @staticmethod
    def _header(width: int) -> str:
        title = 'Task'
        left = (CONTENT_WIDTH - len(title)) // 2 - 1
        right = CONTENT_WIDTH - len(title) - left
        return ('| N' + ' ' * (width - 1) + '|    Date    | Time  | P | D |'
                + ' ' * left + title + ' ' * right + '|')

    # ---- wrapping ----
    @staticmethod
    def wrap_content(content: str) -> List[str]:
        """Split on newlines, then hard-wrap each segment at CONTENT_WIDTH."""
        lines: List[str] = []
        for segment in content.split('\n'):
            chunks = [segment[i:i + CONTENT_WIDTH] for i in range(0, len(segment), CONTENT_WIDTH)]
            lines.extend(chunks or [''])
        return lines

    # ---- rendering ----
    def _task_rows(self, number: int, task: Task, width: int, today: date, use_color: bool) -> List[str]:
        y, m, d = task.date
        hh, mm = task.time
        tag = task.due_tag(today)
        p_cell = block(PRIORITY_COLOR[task.priority.name], task.priority.name, use_color)
        d_cell = block(DUE_COLOR[tag.name], tag.name, use_color)
        display_lines = self.wrap_content(task.content)
        rows = [
            f'| {number:<{width}}| {y:04d}-{m:02d}-{d:02d} | {hh:02d}:{mm:02d} | {p_cell} | {d_cell} |'
            f'{display_lines[0]:<{CONTENT_WIDTH}}|'
        ]
        blank_cells = '| ' + ' ' * width + '|            |       |   |   |'
        for line in display_lines[1:]:
            rows.append(f'{blank_cells}{line:<{CONTENT_WIDTH}}|')
        return rows
