"""Main entry point for the terminal task list.

Loads tasklist.json from the working directory, runs the interactive
loop, and lets the loop save on 'end'.
"""
import click

from cli import CLI
from logging_setup import setup_logging
from storage import Storage, StorageError, TASKS_FILE
from tasklist import TaskList


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
def main() -> None:
    """Interactive task list: add, print, edit, delete, end."""
    setup_logging()
    try:
        tasks = Storage.load_tasks(TASKS_FILE)
    except StorageError as e:
        raise click.ClickException(str(e)) from e
    CLI(TaskList(tasks), TASKS_FILE).run()

if __name__ == "__main__":
    main()
