# File: primerpair/app/core/primer/generator.py
# Version: v0.2.0
"""
Candidate primer generator.

- Forward candidates: windows of the target read left to right; position is the
  window start. Optionally restricted to windows occurring once in the target.
- Reverse candidates: windows of the reverse complement; position is
  `len(target) - offset` (exclusive + strand end of the footprint).

Every window is checked for:
- full length and A/C/G/T only
- 3' end against the suffix pattern (on the window, without prefix)
- Tm of prefix + window inside the Tm range

Generators are lazy; the finder stops consuming them when cancelled.

Suffix patterns
---------------
Three position tokens, each `*` (any base), a base (`G`) or a class (`G/C`):
    "***"      anything
    "**G/C"    G or C at the 3' terminal base
    "G/CG/CG/C" three G/C bases
An empty pattern matches anything; malformed patterns match nothing.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Callable, Iterator, Optional

from .constants import DNA_BASES, SUFFIX_LENGTH
from .models import Primer
from .ranges import Range
from .thermodynamics import SupportsTm, revcomp


class SuffixPattern:
    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.valid = True
        self._regex: Optional[re.Pattern] = None

        text = pattern.strip().upper()
        if not text:
            return
        tokens = _tokenize(text)
        if tokens is None or len(tokens) != SUFFIX_LENGTH:
            self.valid = False
            return
        self._regex = re.compile("".join(tokens))

    @property
    def matches_anything(self) -> bool:
        return self.valid and self._regex is None

    def matches(self, seq: str) -> bool:
        """True if the last 3 bases of `seq` satisfy the pattern."""
        if not self.valid:
            return False
        if self._regex is None:
            return True
        if len(seq) < SUFFIX_LENGTH:
            return False
        return self._regex.fullmatch(seq[-SUFFIX_LENGTH:].upper()) is not None


def _tokenize(text: str) -> Optional[list]:
    tokens = []
    i = 0
    while i < len(text):
        c = text[i]
        if c == "*":
            tokens.append(".")
            i += 1
            continue
        if c not in DNA_BASES:
            return None
        group = [c]
        i += 1
        while i < len(text) and text[i] == "/":
            if i + 1 >= len(text) or text[i + 1] not in DNA_BASES:
                return None
            group.append(text[i + 1])
            i += 2
        tokens.append(c if len(group) == 1 else "[" + "".join(group) + "]")
    return tokens


@lru_cache(maxsize=256)
def suffix_pattern(pattern: str) -> SuffixPattern:
    return SuffixPattern(pattern)


class PrimerCandidateEnumerator:
    """Produces Tm-valid forward and reverse primers of a given length."""

    def __init__(
        self,
        amplicon: str,
        amplicon_size_min: int,
        tm_model: SupportsTm,
        sodium_concentration: float,
        unique_forward: bool = True,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> None:
        self.amplicon = amplicon.upper()
        self.tm_model = tm_model
        self.sodium_concentration = sodium_concentration
        self.unique_forward = unique_forward
        # Polled once per window; a True result ends the current generator
        self.should_stop = should_stop or (lambda: False)
        # Windows may not start past the point where the shortest amplicon still fits
        self.max_position = len(self.amplicon) - amplicon_size_min
        self._reverse_amplicon: Optional[str] = None

    @property
    def reverse_amplicon(self) -> str:
        if self._reverse_amplicon is None:
            self._reverse_amplicon = revcomp(self.amplicon)
        return self._reverse_amplicon

    def forward(self, length: int, prefix: str, suffix: str, tm_range: Range[float]) -> Iterator[Primer]:
        pattern = suffix_pattern(suffix)
        for i in range(0, self.max_position):
            if self.should_stop():
                return
            raw = self.amplicon[i : i + length]
            if self.unique_forward and not self.is_unique(raw):
                continue
            primer = self._validate(raw, length, prefix, pattern, tm_range, i)
            if primer is not None:
                yield primer

    def reverse(self, length: int, prefix: str, suffix: str, tm_range: Range[float]) -> Iterator[Primer]:
        pattern = suffix_pattern(suffix)
        rc = self.reverse_amplicon
        n = len(self.amplicon)
        for i in range(0, self.max_position + 1):
            if self.should_stop():
                return
            raw = rc[i : i + length]
            primer = self._validate(raw, length, prefix, pattern, tm_range, n - i)
            if primer is not None:
                yield primer

    def is_unique(self, raw: str) -> bool:
        """True if `raw` occurs exactly once in the target (overlapping hits count)."""
        first = self.amplicon.find(raw)
        return first >= 0 and self.amplicon.find(raw, first + 1) < 0

    def _validate(
        self,
        raw: str,
        length: int,
        prefix: str,
        pattern: SuffixPattern,
        tm_range: Range[float],
        position: int,
    ) -> Optional[Primer]:
        if len(raw) < length or not all(c in DNA_BASES for c in raw):
            return None
        if not pattern.matches(raw):
            return None
        prefix = prefix.upper()
        sequence = prefix + raw
        tm = self.tm_model.compute(sequence, self.sodium_concentration)
        if not tm_range.contains(tm):
            return None
        return Primer(sequence=sequence, tm=tm, sequence_position=position, prefix=prefix)
