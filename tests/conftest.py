from __future__ import annotations

from typing import Callable, Iterable

import pytest

from tictactoe import config


@pytest.fixture(autouse=True)
def plain_terminal(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, "USE_COLOR", False)
    monkeypatch.setattr(config, "CLEAR_SCREEN", False)


@pytest.fixture
def scripted() -> Callable[[Iterable[str]], Callable[[str], str]]:
    """Build an input_fn that answers prompts from a fixed list."""

    def make(answers: Iterable[str]) -> Callable[[str], str]:
        it = iter(answers)

        def input_fn(prompt: str) -> str:
            try:
                return next(it)
            except StopIteration:
                raise EOFError from None

        return input_fn

    return make
