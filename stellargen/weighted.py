"""Weighted random choice between entries."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Sequence, TypeVar

import numpy as np

from stellargen.lehmer import Lehmer32

T = TypeVar("T")


@dataclass
class WeightedEntry(Generic[T]):
    """A value with the relative weight it is picked with."""

    value: T
    weight: float


def pick_weighted(entries: Sequence[WeightedEntry[T]], rng: Lehmer32) -> T:
    """Pick one entry's value with probability proportional to its weight."""
    if not entries:
        raise ValueError("cannot pick from an empty list of entries")

    total = np.float32(0.0)
    for entry in entries:
        total = total + np.float32(entry.weight)

    roll = np.float32(rng.next_float32()) * total

    accumulator = np.float32(0.0)
    for entry in entries:
        accumulator = accumulator + np.float32(entry.weight)
        if roll <= accumulator:
            return entry.value

    return entries[-1].value