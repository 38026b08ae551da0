# File: primerpair/app/core/primer/thermodynamics.py
# Version: v0.2.0
"""
Melting temperature model and small sequence helpers.

Implements:
- Reverse complement
- Tm via Biopython nearest-neighbor (default), primer3, or the Wallace rule

The search treats Tm as a black box: anything exposing
`compute(sequence, sodium_concentration) -> float` can be handed to the finder
in place of `TmModel` (tests use the Wallace rule for determinism).

Units:
- sodium_concentration: mol/L (0.2 == 200 mM)
- primer_dna_concentration: mol/L (1e-6 == 1 uM)
"""

from __future__ import annotations

from typing import Protocol

import primer3
from Bio.SeqUtils import MeltingTemp as mt

from .constants import DEFAULT_PRIMER_DNA_MOLARITY

_COMPLEMENT = str.maketrans("ACGTacgt", "TGCAtgca")

TM_METHODS = ("NN", "PRIMER3", "Wallace")


def revcomp(seq: str) -> str:
    return seq.translate(_COMPLEMENT)[::-1]


def wallace_tm(seq: str) -> float:
    """Simple Tm proxy (°C): 2*(A+T) + 4*(G+C)."""
    s = seq.upper()
    return 2.0 * (s.count("A") + s.count("T")) + 4.0 * (s.count("G") + s.count("C"))


class SupportsTm(Protocol):
    def compute(self, sequence: str, sodium_concentration: float) -> float: ...


class TmModel:
    """Melting temperature calculator selected by method name."""

    def __init__(self, method: str = "NN", primer_dna_concentration: float = DEFAULT_PRIMER_DNA_MOLARITY) -> None:
        if method not in TM_METHODS:
            raise ValueError(f"Unknown Tm method '{method}'. Expected one of: {', '.join(TM_METHODS)}")
        self.method = method
        self.primer_dna_concentration = primer_dna_concentration

    def compute(self, sequence: str, sodium_concentration: float) -> float:
        """
        Melting temperature (°C) of `sequence` at the given sodium molarity.

        The NN and PRIMER3 paths pass the primer concentration for both strands,
        so the effective concentration is halved for non-self-complementary
        duplexes.
        """
        if not sequence:
            return 0.0
        seq = sequence.upper()
        if self.method == "Wallace":
            return wallace_tm(seq)

        na_mm = sodium_concentration * 1000.0
        dna_nm = self.primer_dna_concentration * 1e9
        if self.method == "PRIMER3":
            return float(primer3.calc_tm(seq, mv_conc=na_mm, dv_conc=0.0, dntp_conc=0.0, dna_conc=dna_nm))
        # SantaLucia parameters (Biopython default table)
        return float(mt.Tm_NN(seq, Na=na_mm, dnac1=dna_nm, dnac2=dna_nm))
