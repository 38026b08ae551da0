# File: primerpair/app/core/primer/parameters.py
# Version: v0.1.0
"""
Primer pair search input.

`PrimerDesignInput` is built by the caller (API, CLI, tests) and handed to the
finder, which never mutates it. Coordinates of `amplicon_bounds` are 1-based
and inclusive unless `zero_based` is set; the finder works on a zero-based copy
and keeps a one-based copy for result metadata.

Validation does not raise: `error_message()` returns the first problem found,
or an empty string when the input is usable.

Usage:
    from primerpair.app.core.primer.parameters import PrimerDesignInput
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional

from .constants import (
    DEFAULT_AMPLICON_SIZE_SLACK,
    DEFAULT_PRIMER_DNA_MOLARITY,
    DEFAULT_PRIMER_SIZE_MAX,
    DEFAULT_PRIMER_SIZE_MIN,
    DEFAULT_SODIUM_MOLARITY,
    DEFAULT_TM_MAX,
    DEFAULT_TM_MIN,
    DNA_BASES,
)
from .ranges import Range


@dataclass
class PrimerDesignInput:
    amplicon: str
    amplicon_bounds: Optional[Range[int]] = None
    amplicon_size_range: Optional[Range[int]] = None
    primer_size_range: Range[int] = Range(DEFAULT_PRIMER_SIZE_MIN, DEFAULT_PRIMER_SIZE_MAX)
    tm_range: Range[float] = Range(DEFAULT_TM_MIN, DEFAULT_TM_MAX)

    # Fixed bases prepended to primers (e.g. restriction sites)
    forward_prefix: str = ""
    reverse_prefix: str = ""
    # 3' end patterns, e.g. "**G/C"; empty matches anything
    forward_suffix: str = ""
    reverse_suffix: str = ""

    sodium_concentration: float = DEFAULT_SODIUM_MOLARITY
    primer_dna_concentration: float = DEFAULT_PRIMER_DNA_MOLARITY
    max_delta_tm: Optional[float] = None
    unique_forward_primers: bool = True

    zero_based: bool = False

    def __post_init__(self) -> None:
        n = len(self.amplicon)
        if self.amplicon_bounds is None:
            self.amplicon_bounds = Range(0, n - 1) if self.zero_based else Range(1, n)
        if self.amplicon_size_range is None:
            self.amplicon_size_range = Range(max(1, n - DEFAULT_AMPLICON_SIZE_SLACK), n)

    # --- Coordinates -----------------------------------------------------------------------------

    def to_zero_based(self) -> "PrimerDesignInput":
        if self.zero_based:
            return replace(self)
        return replace(self, amplicon_bounds=self.amplicon_bounds.shifted(-1), zero_based=True)

    def to_one_based(self) -> "PrimerDesignInput":
        if not self.zero_based:
            return replace(self)
        return replace(self, amplicon_bounds=self.amplicon_bounds.shifted(1), zero_based=False)

    def one_based_bounds(self) -> Range[int]:
        return self.amplicon_bounds.shifted(1) if self.zero_based else self.amplicon_bounds

    def bounded_amplicon(self) -> str:
        """Upper-cased target window selected by `amplicon_bounds`."""
        b = self.one_based_bounds()
        return self.amplicon[b.min - 1 : b.max].upper()

    # --- Validation ------------------------------------------------------------------------------

    def error_message(self) -> str:
        if not self.amplicon:
            return "No DNA sequence has been configured."

        bounds = self.one_based_bounds()
        if not bounds.is_valid():
            return "Invalid amplicon bounds. The start position must be less than or equal to the stop position."
        if bounds.min < 1:
            return "The amplicon start position must be greater than or equal to 1."
        if bounds.max > len(self.amplicon):
            return "The amplicon stop position must be less than or equal to the sequence length."
        window = bounds.length

        sizes = self.amplicon_size_range
        if not sizes.is_valid():
            return "Invalid amplicon length range. The start value must be less than or equal to the stop value."
        if sizes.min < 1:
            return "The amplicon length minimum must be greater than or equal to 1."
        if sizes.max > window:
            return "The maximum amplicon length may not be larger than the target sequence length."

        primers = self.primer_size_range
        if not primers.is_valid():
            return "Invalid primer length range. The start value must be less than or equal to the stop value."
        if primers.min < 1:
            return "The minimum primer length must be greater than or equal to 1."
        if primers.max > window:
            return "The maximum primer length may not be larger than the target sequence length."
        if primers.min * 2 > sizes.max:
            return (
                "The amplicon size that you have selected is too small. The maximum amplicon size "
                "must be at least 2 times longer than the minimum primer length."
            )

        if not self.tm_range.is_valid():
            return "Invalid melting point range. The start value must be less than or equal to the stop value."
        if not _is_dna(self.forward_prefix):
            return "The forward prefix may only contain A, C, G, or T."
        if not _is_dna(self.reverse_prefix):
            return "The reverse prefix may only contain A, C, G, or T."
        if self.sodium_concentration <= 0.0:
            return "Sodium concentration must be a positive molar value."
        if self.primer_dna_concentration <= 0.0:
            return "Primer DNA concentration must be a positive molar value."
        if self.max_delta_tm is not None and self.max_delta_tm < 0.0:
            return "The maximum melting temperature difference for a given primer pair must be positive."
        return ""

    def is_valid(self) -> bool:
        return not self.error_message()


def _is_dna(seq: str) -> bool:
    return all(c in DNA_BASES for c in seq.upper())
