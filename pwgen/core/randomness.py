"""Randomness sources used by the generators.

Generators only ever ask for a uniform index below a bound, so anything with a
``next_index(bound)`` method can stand in for the OS CSPRNG in tests.
"""

from __future__ import annotations

import random
import secrets
from typing import Optional, Protocol


class RandomSource(Protocol):
    def next_index(self, bound: int) -> int:
        ...


def _check_bound(bound: int) -> None:
    if bound <= 0:
        raise ValueError(f"bound must be > 0, got {bound}")


class SystemRandomSource:
    """Uniform indices from the OS CSPRNG."""

    def next_index(self, bound: int) -> int:
        _check_bound(bound)
        return secrets.randbelow(bound)


class SeededRandomSource:
    """Deterministic indices for tests and reproducible runs. Not for real secrets."""

    def __init__(self, seed: Optional[int] = None) -> None:
        self._rng = random.Random(seed)

    def next_index(self, bound: int) -> int:
        _check_bound(bound)
        return self._rng.randrange(bound)


_DEFAULT_SOURCE = SystemRandomSource()


def default_source() -> RandomSource:
    return _DEFAULT_SOURCE


def resolve_source(rng: Optional[RandomSource]) -> RandomSource:
    return _DEFAULT_SOURCE if rng is None else rng
