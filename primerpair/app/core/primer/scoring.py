# File: primerpair/app/core/primer/scoring.py
# Version: v0.2.0
"""
Composite scoring for primer pairs.

Lower score is better. Components:
- self-dimer score of the forward primer
- self-dimer score of the reverse primer
- cross-dimer score between forward and reverse
- weighted |Tm_f - Tm_r|

Dimer scores use the full primer sequence (prefix included), since appended
sites take part in primer-primer binding too.
"""

from __future__ import annotations

from typing import Callable, Optional

from .constants import TM_DELTA_WEIGHT
from .dimer import DimerScorer
from .models import PrimerPair

PairScoreFunc = Callable[[PrimerPair], float]


class PairScorer:
    def __init__(self, tm_delta_weight: float = TM_DELTA_WEIGHT, dimer: Optional[DimerScorer] = None) -> None:
        self.tm_delta_weight = tm_delta_weight
        self.dimer = dimer or DimerScorer()

    def score(self, pair: PrimerPair) -> float:
        f = pair.forward.sequence
        r = pair.reverse.sequence
        return float(
            self.dimer.homo_dimer(f)
            + self.dimer.homo_dimer(r)
            + self.dimer.hetero_dimer(f, r)
            + self.tm_delta_weight * pair.delta_tm
        )

    __call__ = score
