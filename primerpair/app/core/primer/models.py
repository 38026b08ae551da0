# File: primerpair/app/core/primer/models.py
# Version: v0.1.0
"""
Primer, primer pair and search result types.

Coordinates
-----------
- Forward `sequence_position`: 0-based start of the primer in the target window.
- Reverse `sequence_position`: 0-based *exclusive* end of the primer footprint
  on the + strand (window length minus the offset in the reverse complement).
  With these two conventions the amplicon spans
  `window[forward.sequence_position : reverse.sequence_position]`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .parameters import PrimerDesignInput


@dataclass(frozen=True)
class Primer:
    sequence: str            # prefix + core
    tm: float
    sequence_position: int
    prefix: str = ""

    @property
    def core_sequence(self) -> str:
        return self.sequence[len(self.prefix):]


@dataclass
class PrimerPair:
    forward: Primer
    reverse: Primer
    params: Optional[PrimerDesignInput] = None
    score: float = 0.0
    name: str = ""

    @property
    def amplicon_length(self) -> int:
        return self.reverse.sequence_position - self.forward.sequence_position

    @property
    def primers_overlap(self) -> bool:
        """True if the two footprints share a base of the template."""
        forward_end = self.forward.sequence_position + len(self.forward.core_sequence)
        reverse_start = self.reverse.sequence_position - len(self.reverse.core_sequence)
        return forward_end > reverse_start

    @property
    def delta_tm(self) -> float:
        return abs(self.forward.tm - self.reverse.tm)


class FinderErrorKind(str, Enum):
    INVALID_INPUT = "invalid_input"
    NO_FORWARD_PRIMERS = "no_forward_primers"
    NO_REVERSE_PRIMERS = "no_reverse_primers"
    NO_PAIRS_FOUND = "no_pairs_found"
    CANCELLED = "cancelled"


@dataclass(frozen=True)
class PrimerPairFinderResult:
    """Either an error message or pairs ranked best-first (lowest score first)."""
    pairs: Tuple[PrimerPair, ...] = ()
    error_message: str = ""
    kind: Optional[FinderErrorKind] = None

    @property
    def is_error(self) -> bool:
        return bool(self.error_message)

    @property
    def cancelled(self) -> bool:
        return self.kind is FinderErrorKind.CANCELLED

    @classmethod
    def error(cls, kind: FinderErrorKind, message: str) -> "PrimerPairFinderResult":
        return cls(error_message=message, kind=kind)

    @classmethod
    def ranked(cls, pairs: Tuple[PrimerPair, ...]) -> "PrimerPairFinderResult":
        return cls(pairs=tuple(pairs))

    @classmethod
    def cancelled_with(cls, pairs: Tuple[PrimerPair, ...] = ()) -> "PrimerPairFinderResult":
        """Cancellation is not an error; any pairs already accumulated are kept."""
        return cls(pairs=tuple(pairs), kind=FinderErrorKind.CANCELLED)
