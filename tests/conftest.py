"""Shared fixtures: deterministic random sources and a quiet engine."""

from __future__ import annotations

import itertools
from typing import Iterable

import pytest

from keysmith.core.engine import KeysmithEngine
from keysmith.generators.random_source import RandomSource


class ScriptedRandomSource(RandomSource):
    """Replays a fixed byte script; fails loudly when it runs out."""

    def __init__(self, script: Iterable[int]) -> None:
        self._script = iter(script)
        self.consumed = 0

    def random_bytes(self, n: int) -> bytes:
        chunk = bytes(itertools.islice(self._script, n))
        if len(chunk) != n:
            raise AssertionError("byte script exhausted")
        self.consumed += n
        return chunk


class CyclingIndexSource(RandomSource):
    """Returns 0, 1, ..., bound-1, 0, 1, ... regardless of bytes."""

    def __init__(self) -> None:
        self._counter = itertools.count()

    def random_bytes(self, n: int) -> bytes:
        return bytes(n)

    def next_index(self, bound: int) -> int:
        return next(self._counter) % bound


def index_bytes(*indices: int, width: int = 2) -> list[int]:
    """Big-endian byte script that makes ``next_index`` return *indices*."""
    out: list[int] = []
    for index in indices:
        out.extend(index.to_bytes(width, "big"))
    return out


@pytest.fixture
def scripted():
    """Factory for :class:`ScriptedRandomSource`."""
    return ScriptedRandomSource


@pytest.fixture
def cycling_source() -> CyclingIndexSource:
    return CyclingIndexSource()


@pytest.fixture
def engine() -> KeysmithEngine:
    return KeysmithEngine()
