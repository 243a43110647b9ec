"""Fixed-value entropy sources for exercising the derived layer."""

from __future__ import annotations

from collections.abc import Iterable

import pytest


class ConstantSource:
    """Returns the same word forever. Never hand it to a rejection sampler."""

    def __init__(self, word: int) -> None:
        self.word = word

    def next_uint32(self) -> int:
        return self.word


class SequenceSource:
    """Replays a fixed list of words and fails once it runs out."""

    def __init__(self, words: Iterable[int]) -> None:
        self.words = list(words)
        self.drawn = 0

    def next_uint32(self) -> int:
        word = self.words.pop(0)
        self.drawn += 1
        return word


@pytest.fixture
def constant():
    return ConstantSource


@pytest.fixture
def sequence():
    return SequenceSource
