import logging

from logging_setup import setup_logging


def test_setup_logging_twice_keeps_one_handler():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    try:
        setup_logging()
        setup_logging(logging.DEBUG)
        ours = [h for h in root.handlers if h.get_name() == "tasklist-console"]
        assert len(ours) == 1
        assert ours[0].level == logging.DEBUG
    finally:
        root.handlers[:] = handlers
        root.setLevel(level)
