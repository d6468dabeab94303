"""Logging configuration.

Diagnostics go to stderr so they never mix with the table and prompts
printed on stdout.
"""
from __future__ import annotations

import logging
import sys

_HANDLER_NAME = "tasklist-console"


def setup_logging(level: int = logging.WARNING) -> None:
    """
    Install a single stderr handler on the root logger.

    Safe to call more than once: the handler installed by an earlier call
    is replaced, never duplicated.
    """
    root = logging.getLogger()
    root.setLevel(level)

    for h in list(root.handlers):
        if h.get_name() == _HANDLER_NAME:
            root.removeHandler(h)

    ch = logging.StreamHandler(sys.stderr)
    ch.set_name(_HANDLER_NAME)
    ch.setLevel(level)
    ch.setFormatter(logging.Formatter(
        fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    ))
    root.addHandler(ch)
