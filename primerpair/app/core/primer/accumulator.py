# File: primerpair/app/core/primer/accumulator.py
# Version: v0.1.0
"""
Bounded best-K collection of primer pairs (lower score is better).

Once full, the worst pair is kept at index 0 so that each new pair needs only
one comparison; a replacement triggers an O(K) rescan for the new worst.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from .constants import MAX_PAIR_RESULTS
from .models import PrimerPair


class TopKPairAccumulator:
    def __init__(self, capacity: int = MAX_PAIR_RESULTS) -> None:
        if capacity < 1:
            raise ValueError("capacity must be >= 1")
        self.capacity = capacity
        self._pairs: List[PrimerPair] = []

    def __len__(self) -> int:
        return len(self._pairs)

    @property
    def is_full(self) -> bool:
        return len(self._pairs) >= self.capacity

    @property
    def worst_score(self) -> Optional[float]:
        """Score of the current worst pair once full; None while filling."""
        if not self.is_full:
            return None
        return self._pairs[0].score

    def add(self, pair: PrimerPair) -> bool:
        """Offer a pair; returns True if it was kept."""
        if not self.is_full:
            self._pairs.append(pair)
            if self.is_full:
                self._move_worst_to_front()
            return True
        if pair.score < self._pairs[0].score:
            self._pairs[0] = pair
            self._move_worst_to_front()
            return True
        return False

    def pairs(self) -> Tuple[PrimerPair, ...]:
        """Snapshot in arbitrary order; callers sort for presentation."""
        return tuple(self._pairs)

    def _move_worst_to_front(self) -> None:
        worst = 0
        for i in range(1, len(self._pairs)):
            if self._pairs[i].score > self._pairs[worst].score:
                worst = i
        if worst:
            self._pairs.insert(0, self._pairs.pop(worst))
