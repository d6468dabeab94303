from __future__ import annotations

from typing import Callable, Iterable

import pytest


@pytest.fixture()
def feed_input(monkeypatch: pytest.MonkeyPatch) -> Callable[[Iterable[str]], None]:
    """Replace input() with a scripted sequence of lines."""

    def _feed(lines: Iterable[str]) -> None:
        it = iter(lines)

        def fake_input(prompt: str = "") -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        monkeypatch.setattr("builtins.input", fake_input)

    return _feed
