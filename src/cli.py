"""Command-line interface loop for the task list.

Actions are read one line at a time; every question inside an action keeps
asking until it gets a valid answer. The list is written to disk only when
the user ends the session.
"""
from __future__ import annotations
import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from models import Task
from prompts import (
    Field, ask_content, ask_date, ask_field, ask_priority, ask_task_number, ask_time,
)
from storage import Storage, TASKS_FILE
from tasklist import TaskList

logger = logging.getLogger(__name__)


class Action(Enum):
    ADD = 'add'
    PRINT = 'print'
    EDIT = 'edit'
    DELETE = 'delete'
    END = 'end'

    @classmethod
    def parse(cls, text: str) -> Optional[Action]:
        try:
            return cls(text.strip().lower())
        except ValueError:
            return None


class CLI:
    def __init__(self, tasks: TaskList, path: Path = TASKS_FILE, use_color: Optional[bool] = None):
        self.tasks: TaskList = tasks
        self.path: Path = path
        self.use_color: Optional[bool] = use_color

    def run(self) -> None:
        """Main REPL loop; saves once when the user types 'end'."""
        try:
            while True:
                print("Input an action (add, print, edit, delete, end):")
                action = Action.parse(input())
                if action is Action.END:
                    print("Tasklist exiting!")
                    break
                self._handle_command(action)
        except (KeyboardInterrupt, EOFError):
            logger.warning("Session ended without 'end'; %d task(s) not saved", len(self.tasks))
            raise
        Storage.save_tasks(self.tasks, self.path)

    # -------------------- command dispatch --------------------
    def _handle_command(self, action: Optional[Action]) -> None:
        if action is Action.ADD:
            self._add()
        elif action is Action.PRINT:
            self._print()
        elif action is Action.EDIT:
            self._edit()
        elif action is Action.DELETE:
            self._delete()
        else:
            print("The input action is invalid")

    # -------------------- user-interactive flows --------------------
    def _has_tasks(self) -> bool:
        if self.tasks.is_empty():
            print("No tasks have been input")
            return False
        return True

    def _add(self) -> None:
        priority = ask_priority()
        task_date = ask_date()
        task_time = ask_time()
        content = ask_content()
        if not content.strip():
            print("The task is blank")
            return
        self.tasks.add(Task(content=content.strip(), date=task_date, time=task_time, priority=priority))

    def _print(self) -> None:
        if self._has_tasks():
            self.tasks.display(use_color=self.use_color)

    def _delete(self) -> None:
        if not self._has_tasks():
            return
        self.tasks.display(use_color=self.use_color)
        number = ask_task_number(len(self.tasks))
        self.tasks.remove(number)
        print("The task is deleted")

    def _edit(self) -> None:
        if not self._has_tasks():
            return
        self.tasks.display(use_color=self.use_color)
        number = ask_task_number(len(self.tasks))
        field = ask_field()
        if field is Field.PRIORITY:
            self.tasks.set_priority(number, ask_priority())
        elif field is Field.DATE:
            self.tasks.set_date(number, ask_date())
        elif field is Field.TIME:
            self.tasks.set_time(number, ask_time())
        elif not self.tasks.set_content(number, ask_content()):
            print("The task is blank")
            return
        print("The task is changed")
