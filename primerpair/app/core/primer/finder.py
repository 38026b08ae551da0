# File: primerpair/app/core/primer/finder.py
# Version: v0.3.0
"""
Primer pair search & ranking.

What this file does
-------------------
- Validates a `PrimerDesignInput` (messages, not exceptions).
- For every primer length in `primer_size_range` enumerates forward and
  reverse candidates (Tm range, 3' suffix pattern, forward uniqueness).
- Pairs each forward primer with the reverse candidates nearest in Tm
  (`NearestTmWindowSearch`), keeps pairs whose amplicon length lies in
  `amplicon_size_range` and whose footprints do not overlap (and |ΔTm| <=
  `max_delta_tm` when set), scores them and keeps the best `max_results`
  (`TopKPairAccumulator`).
- Returns a `PrimerPairFinderResult`: pairs ranked by ascending score, or an
  error message.

Cancellation
------------
`cancel()` may be called from any thread. The flag is polled per primer length,
per enumerated window, per forward primer and per paired reverse candidate;
work in progress (one Tm or one score) always completes. A finder cancelled
before `find_primer_pairs()` returns immediately. Cancelled results are not
errors and carry whatever pairs were already accumulated.

Coordinates
-----------
Primer positions are 0-based and relative to the target window
(`amplicon_bounds`). Pairs keep a 1-based copy of the input in `params`.
"""

from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Iterable, List, Optional

from primerpair.app.core.config import settings

from .accumulator import TopKPairAccumulator
from .generator import PrimerCandidateEnumerator
from .models import FinderErrorKind, Primer, PrimerPair, PrimerPairFinderResult
from .parameters import PrimerDesignInput
from .scoring import PairScoreFunc, PairScorer
from .search import NearestTmWindowSearch
from .thermodynamics import SupportsTm, TmModel

logger = logging.getLogger(__name__)


class FinderState(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    ENUMERATING = "enumerating"
    PAIRING = "pairing"
    DONE = "done"
    ERROR = "error"
    CANCELLED = "cancelled"


class PrimerPairFinder:
    def __init__(
        self,
        design_input: PrimerDesignInput,
        tm_model: Optional[SupportsTm] = None,
        scorer: Optional[PairScoreFunc] = None,
        window: Optional[int] = None,
        max_results: Optional[int] = None,
    ) -> None:
        self.input = design_input.to_zero_based()
        self.display_input = design_input.to_one_based()
        self.amplicon = self.input.bounded_amplicon()

        self.tm_model = tm_model or TmModel(
            settings.TM_METHOD, primer_dna_concentration=design_input.primer_dna_concentration
        )
        self.scorer: PairScoreFunc = scorer or PairScorer(settings.TM_DELTA_WEIGHT)
        self.window = settings.PAIR_SEARCH_WINDOW if window is None else window
        self.max_results = settings.MAX_PAIR_RESULTS if max_results is None else max_results

        self.state = FinderState.IDLE
        self.forward_primers: List[Primer] = []
        self.reverse_primers: List[Primer] = []
        self.pairs_checked = 0
        self._cancel_event = threading.Event()

    # --- Control ---------------------------------------------------------------------------------

    def cancel(self) -> None:
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._cancel_event.is_set()

    # --- Public API ------------------------------------------------------------------------------

    def find_primer_pairs(self) -> PrimerPairFinderResult:
        """Blocking search; run it on a worker thread if the caller must stay responsive."""
        self._reset()
        self.state = FinderState.VALIDATING
        message = self.input.error_message()
        if message:
            return self._fail(FinderErrorKind.INVALID_INPUT, message)
        if self.is_cancelled:
            return self._cancelled()

        self.state = FinderState.ENUMERATING
        self._enumerate_primers()
        if self.is_cancelled:
            return self._cancelled()
        if not self.forward_primers:
            return self._fail(FinderErrorKind.NO_FORWARD_PRIMERS, "No forward primers were found.")
        if not self.reverse_primers:
            return self._fail(FinderErrorKind.NO_REVERSE_PRIMERS, "No reverse primers were found.")

        self.state = FinderState.PAIRING
        accumulator = self._pair_primers()
        ranked = self._rank(accumulator.pairs())
        if self.is_cancelled:
            return self._cancelled(ranked)
        if not ranked:
            return self._fail(FinderErrorKind.NO_PAIRS_FOUND, "No primer pairs could be found.")

        self.state = FinderState.DONE
        logger.info(
            "Primer pair search done: %d pairs kept (best score %.2f) from %d checked",
            len(ranked), ranked[0].score, self.pairs_checked,
        )
        return PrimerPairFinderResult.ranked(ranked)

    # --- Stages ----------------------------------------------------------------------------------

    def _enumerate_primers(self) -> None:
        inp = self.input
        enumerator = PrimerCandidateEnumerator(
            self.amplicon,
            inp.amplicon_size_range.min,
            self.tm_model,
            inp.sodium_concentration,
            unique_forward=inp.unique_forward_primers,
            should_stop=self._cancel_event.is_set,
        )
        logger.info(
            "Enumerating primers: window=%d bp, primer lengths %s, Tm %s",
            len(self.amplicon), inp.primer_size_range, inp.tm_range,
        )

        sizes = inp.primer_size_range
        for length in range(sizes.min, sizes.max + 1):
            if self.is_cancelled:
                return
            self.forward_primers.extend(
                enumerator.forward(length, inp.forward_prefix, inp.forward_suffix, inp.tm_range)
            )
            self.reverse_primers.extend(
                enumerator.reverse(length, inp.reverse_prefix, inp.reverse_suffix, inp.tm_range)
            )
            logger.debug(
                "length=%d: %d forward / %d reverse candidates so far",
                length, len(self.forward_primers), len(self.reverse_primers),
            )

    def _pair_primers(self) -> TopKPairAccumulator:
        inp = self.input
        sizes = inp.amplicon_size_range
        max_delta_tm = inp.max_delta_tm
        search = NearestTmWindowSearch(self.reverse_primers, self.window)
        accumulator = TopKPairAccumulator(self.max_results)

        for forward in self.forward_primers:
            if self.is_cancelled:
                break
            left, right = search.window_for(forward.tm)
            for reverse in search.primers[left:right]:
                if self.is_cancelled:
                    break
                if not sizes.contains(reverse.sequence_position - forward.sequence_position):
                    continue
                pair = PrimerPair(forward, reverse, params=self.display_input)
                if pair.primers_overlap:
                    continue
                if max_delta_tm is not None and pair.delta_tm > max_delta_tm:
                    continue
                pair.score = self.scorer(pair)
                self.pairs_checked += 1
                accumulator.add(pair)
        return accumulator

    # --- Helpers ---------------------------------------------------------------------------------

    def _reset(self) -> None:
        # The cancel flag is not cleared here
        self.state = FinderState.IDLE
        self.forward_primers = []
        self.reverse_primers = []
        self.pairs_checked = 0

    @staticmethod
    def _rank(pairs: Iterable[PrimerPair]) -> List[PrimerPair]:
        ranked = sorted(pairs, key=lambda p: p.score)
        for i, pair in enumerate(ranked, start=1):
            pair.name = f"Pair {i}"
        return ranked

    def _fail(self, kind: FinderErrorKind, message: str) -> PrimerPairFinderResult:
        self.state = FinderState.ERROR
        logger.warning("Primer pair search failed (%s): %s", kind.value, message)
        return PrimerPairFinderResult.error(kind, message)

    def _cancelled(self, pairs: Iterable[PrimerPair] = ()) -> PrimerPairFinderResult:
        self.state = FinderState.CANCELLED
        logger.info("Primer pair search cancelled")
        return PrimerPairFinderResult.cancelled_with(tuple(pairs))
