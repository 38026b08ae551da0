# File: primerpair/app/core/primer/schemas.py
# Version: v0.1.0
"""
DTOs for requests and responses used by the primer pair endpoint and CLI.

Field names are camelCase on the wire. Coordinates are 1-based inclusive.
Optional fields fall back to the `PrimerDesignInput` defaults (whole sequence,
amplicon size `len-20..len`, primer length 25, Tm 55..85 °C).
"""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field, conint, confloat

from .models import PrimerPair, PrimerPairFinderResult
from .parameters import PrimerDesignInput
from .ranges import Range


class PrimerPairSearchRequest(BaseModel):
    """Request to search primer pairs inside a window of the given sequence."""
    sequence: str = Field(..., min_length=1, description="Raw DNA sequence (A/C/G/T).")
    ampliconStart: Optional[conint(ge=1)] = Field(None, description="Window start, 1-based inclusive.")
    ampliconEnd: Optional[conint(ge=1)] = Field(None, description="Window end, 1-based inclusive.")
    ampliconSizeMin: Optional[int] = None
    ampliconSizeMax: Optional[int] = None
    primerSizeMin: int = 25
    primerSizeMax: int = 25
    tmMin: float = 55.0
    tmMax: float = 85.0
    forwardPrefix: str = ""
    reversePrefix: str = ""
    forwardSuffix: str = ""
    reverseSuffix: str = ""
    sodiumConcentration: confloat(gt=0) = Field(0.2, description="Monovalent salt (M)")
    primerDnaConcentration: confloat(gt=0) = Field(1e-6, description="Primer strand concentration (M)")
    maxDeltaTm: Optional[confloat(ge=0)] = Field(None, description="Max |Tm_f - Tm_r| (°C)")
    uniqueForwardPrimers: bool = True
    tmMethod: Optional[Literal["NN", "PRIMER3", "Wallace"]] = Field(None, description="Defaults to settings.TM_METHOD")
    maxResults: Optional[conint(ge=1)] = None

    def to_design_input(self) -> PrimerDesignInput:
        seq = self.sequence.replace("\n", "").replace("\r", "").replace(" ", "")
        start = self.ampliconStart or 1
        end = self.ampliconEnd or len(seq)
        window = end - start + 1
        size_max = self.ampliconSizeMax if self.ampliconSizeMax is not None else window
        size_min = self.ampliconSizeMin if self.ampliconSizeMin is not None else max(1, window - 20)
        return PrimerDesignInput(
            amplicon=seq,
            amplicon_bounds=Range(start, end),
            amplicon_size_range=Range(size_min, size_max),
            primer_size_range=Range(self.primerSizeMin, self.primerSizeMax),
            tm_range=Range(self.tmMin, self.tmMax),
            forward_prefix=self.forwardPrefix,
            reverse_prefix=self.reversePrefix,
            forward_suffix=self.forwardSuffix,
            reverse_suffix=self.reverseSuffix,
            sodium_concentration=self.sodiumConcentration,
            primer_dna_concentration=self.primerDnaConcentration,
            max_delta_tm=self.maxDeltaTm,
            unique_forward_primers=self.uniqueForwardPrimers,
        )


class PrimerInfo(BaseModel):
    sequence: str
    tm: float
    position: int


class PrimerPairInfo(BaseModel):
    name: str
    forward: PrimerInfo
    reverse: PrimerInfo
    ampliconLength: int
    deltaTm: float
    score: float

    @classmethod
    def from_pair(cls, pair: PrimerPair) -> "PrimerPairInfo":
        return cls(
            name=pair.name,
            forward=PrimerInfo(sequence=pair.forward.sequence, tm=round(pair.forward.tm, 2), position=pair.forward.sequence_position),
            reverse=PrimerInfo(sequence=pair.reverse.sequence, tm=round(pair.reverse.tm, 2), position=pair.reverse.sequence_position),
            ampliconLength=pair.amplicon_length,
            deltaTm=round(pair.delta_tm, 2),
            score=round(pair.score, 3),
        )


class PrimerPairSearchResponse(BaseModel):
    """Ranked pairs, best first."""
    pairs: List[PrimerPairInfo] = Field(default_factory=list)
    cancelled: bool = False

    @classmethod
    def from_result(cls, result: PrimerPairFinderResult) -> "PrimerPairSearchResponse":
        return cls(pairs=[PrimerPairInfo.from_pair(p) for p in result.pairs], cancelled=result.cancelled)
