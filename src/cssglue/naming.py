# naming.py
from __future__ import annotations

import random
from typing import Callable, Optional

SUFFIX_LENGTH = 6

SuffixSource = Callable[[], str]


def random_hash(count: int = SUFFIX_LENGTH) -> str:
    """`count` independently drawn lowercase hex digits."""
    return "".join(format(random.randrange(16), "x") for _ in range(count))


def make_unique_target(base_name: str, suffix: Optional[str] = None) -> str:
    """
    Queue key for a dynamically generated job: `<base_name>_<suffix>`.

    Without an explicit suffix a random 6 hex digit one is drawn. Nothing
    checks the result against names issued earlier.
    """
    if suffix is None:
        suffix = random_hash(SUFFIX_LENGTH)
    return f"{base_name}_{suffix}"


class RandomSuffix:
    """Stateless random suffixes (~2**24 space, collisions possible)."""

    def __call__(self) -> str:
        return random_hash(SUFFIX_LENGTH)


class SequenceSuffix:
    """
    Monotonic counter rendered as fixed-width hex.

    One instance per build target invocation guarantees distinct names
    within it.
    """

    def __init__(self, start: int = 0):
        self._next = start

    def __call__(self) -> str:
        value = self._next
        if value >= 16 ** SUFFIX_LENGTH:
            raise OverflowError(f"suffix counter exhausted after {value} names")
        self._next += 1
        return format(value, f"0{SUFFIX_LENGTH}x")


class TargetNamer:
    def __init__(self, suffixes: Optional[SuffixSource] = None):
        self.suffixes: SuffixSource = suffixes or SequenceSuffix()

    def __call__(self, base_name: str) -> str:
        return make_unique_target(base_name, self.suffixes())
