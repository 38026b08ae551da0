# File: primerpair/app/core/primer/search.py
# Version: v0.1.0
"""
Nearest-Tm neighborhood over reverse primer candidates.

Pairing every forward with every reverse candidate is O(n*m). Instead, reverse
candidates are sorted by Tm once, and each forward primer is only paired with
the reverse candidates ranked within `window` positions of the closest Tm.
Pairs further away in Tm are never considered, even if otherwise valid.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import List, Sequence, Tuple

from .constants import PAIR_SEARCH_WINDOW
from .models import Primer


class NearestTmWindowSearch:
    def __init__(self, primers: Sequence[Primer], window: int = PAIR_SEARCH_WINDOW) -> None:
        # Stable sort: equal Tms keep enumeration order
        self.primers: List[Primer] = sorted(primers, key=lambda p: p.tm)
        self.tms: List[float] = [p.tm for p in self.primers]
        self.window = window

    def __len__(self) -> int:
        return len(self.primers)

    def closest_index(self, tm: float) -> int:
        """Index of the candidate with the nearest Tm; ties resolve to the lower index."""
        if not self.tms:
            return 0
        i = bisect_left(self.tms, tm)
        if i == 0:
            return 0
        if i == len(self.tms):
            return i - 1
        if tm - self.tms[i - 1] <= self.tms[i] - tm:
            return i - 1
        return i

    def window_for(self, tm: float) -> Tuple[int, int]:
        """Half-open index slice [left, right) centered on the closest Tm."""
        closest = self.closest_index(tm)
        left = max(0, closest - self.window)
        right = min(len(self.tms), closest + self.window + 1)
        return left, right
