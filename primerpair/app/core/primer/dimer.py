# File: primerpair/app/core/primer/dimer.py
# Version: v0.1.0
"""
Primer-dimer heuristic.

Slides seq1 antiparallel along seq2 (ungapped) and, for every alignment,
sums hydrogen bonds of complementary positions (G/C = 3, A/T = 2). The score is
the best alignment total. Unknown characters never pair.

    seq1  5' ATATG 3'          offsets 0..len(seq1)-1: seq1[k:] vs seq2 read 3'->5'
    seq2  3' GTATA 5'          offsets 1..len(seq2)-1: seq1 vs seq2 read 3'->5' from [-1-k]
"""

from __future__ import annotations

from functools import lru_cache

from .constants import AT_BOND_WEIGHT, GC_BOND_WEIGHT

_COMPLEMENT = {"A": "T", "C": "G", "G": "C", "T": "A"}
_BONDS = {"A": AT_BOND_WEIGHT, "T": AT_BOND_WEIGHT, "G": GC_BOND_WEIGHT, "C": GC_BOND_WEIGHT}


def _aligned_bonds(a: str, b: str, i: int, j: int) -> int:
    """Walk a forward from i and b backward from j; sum bonds of complementary positions."""
    total = 0
    while i < len(a) and j >= 0:
        if _COMPLEMENT.get(b[j]) == a[i]:
            total += _BONDS[a[i]]
        i += 1
        j -= 1
    return total


@lru_cache(maxsize=65536)
def dimer_score(seq1: str, seq2: str) -> int:
    a = seq1.upper()
    b = seq2.upper()
    if not a or not b:
        return 0

    best = 0
    last = len(b) - 1
    for k in range(len(a)):
        best = max(best, _aligned_bonds(a, b, k, last))
    # Zero offset was covered above
    for k in range(1, len(b)):
        best = max(best, _aligned_bonds(a, b, 0, last - k))
    return best


class DimerScorer:
    """Self- and cross-dimer scores for primer sequences (5'->3')."""

    def score(self, seq1: str, seq2: str) -> int:
        return dimer_score(seq1, seq2)

    def homo_dimer(self, seq: str) -> int:
        return dimer_score(seq, seq)

    def hetero_dimer(self, forward: str, reverse: str) -> int:
        return dimer_score(forward, reverse)
