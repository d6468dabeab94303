"""Persistence helpers (load/save) for the task list.

The file is a flat JSON array of task records, read once at startup and
written once when the user ends the session.
"""
import json
import logging
from pathlib import Path
from typing import Any, Iterable, List

from models import Task

TASKS_FILE = Path('tasklist.json')

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the tasks file exists but cannot be used."""


class Storage:
    @staticmethod
    def load_tasks(path: Path = TASKS_FILE) -> List[Task]:
        """Load tasks from disk.

        Missing file -> empty list. Malformed records are skipped one by one;
        a file that is not a JSON array raises StorageError so it is never
        silently overwritten on save.
        """
        if not path.exists():
            logger.debug("No tasks file at %s; starting empty", path)
            return []
        with open(path, 'r', encoding='utf-8') as f:
            try:
                data: Any = json.load(f)
            except ValueError as e:  # JSONDecodeError or UnicodeDecodeError
                raise StorageError(f"{path} is not valid JSON: {e}") from e
        if not isinstance(data, list):
            raise StorageError(f"{path} must contain a JSON array of tasks")
        tasks: List[Task] = []
        for pos, raw in enumerate(data, start=1):
            if raw is None:
                continue
            try:
                tasks.append(Task.from_dict(raw))
            except ValueError as e:
                logger.warning("Skipping task record #%d in %s: %s", pos, path, e)
        logger.debug("Loaded %d task(s) from %s", len(tasks), path)
        return tasks

    @staticmethod
    def save_tasks(tasks: Iterable[Task], path: Path = TASKS_FILE) -> None:
        """Persist tasks to disk (pretty-printed), replacing the file."""
        records = [task.to_dict() for task in tasks]
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(records, f, indent=4)
        logger.debug("Saved %d task(s) to %s", len(records), path)
