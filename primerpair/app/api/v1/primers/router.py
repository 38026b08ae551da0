# File: primerpair/app/api/v1/primers/router.py
# Version: v0.1.0
"""
Primer endpoints:
- POST /primers/pairs   ← ranked primer pairs for a sequence window

The search is CPU-bound and blocking; FastAPI runs this sync handler in its
worker threadpool.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from primerpair.app.core.config import settings
from primerpair.app.core.primer.finder import PrimerPairFinder
from primerpair.app.core.primer.schemas import PrimerPairSearchRequest, PrimerPairSearchResponse
from primerpair.app.core.primer.thermodynamics import TmModel

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/primers", tags=["primers"])


@router.post("/pairs", response_model=PrimerPairSearchResponse)
def find_primer_pairs(payload: PrimerPairSearchRequest):
    """
    Search primer pairs inside the window [ampliconStart, ampliconEnd] (1-based inclusive).
    Invalid parameters and empty searches are reported as 400 with the finder's message.
    """
    design_input = payload.to_design_input()
    finder = PrimerPairFinder(
        design_input,
        tm_model=TmModel(
            payload.tmMethod or settings.TM_METHOD,
            primer_dna_concentration=design_input.primer_dna_concentration,
        ),
        max_results=payload.maxResults,
    )
    result = finder.find_primer_pairs()
    if result.is_error:
        logger.info("Primer pair request rejected: %s", result.error_message)
        raise HTTPException(status_code=400, detail=result.error_message)
    return PrimerPairSearchResponse.from_result(result)
