# File: primerpair/app/core/primer/ranges.py
# Version: v0.1.0
"""
Inclusive numeric intervals.

`Range` does not reorder its bounds: a reversed range is representable and is
reported by `is_valid()` so the input validator can produce a readable message.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T", int, float)


@dataclass(frozen=True)
class Range(Generic[T]):
    min: T
    max: T

    def contains(self, value: T) -> bool:
        return self.min <= value <= self.max

    def is_subset_of(self, other: "Range[T]") -> bool:
        return self.max <= other.max and self.min >= other.min

    def is_valid(self) -> bool:
        return self.min <= self.max

    @property
    def length(self) -> T:
        """Number of integer positions covered (inclusive on both ends)."""
        return self.max - self.min + 1

    def shifted(self, delta: T) -> "Range[T]":
        return Range(self.min + delta, self.max + delta)

    def __str__(self) -> str:
        return f"[{self.min}, {self.max}]"
