# File: primerpair/app/cli/primers_cli.py
# Version: v0.1.0
"""
CLI for the primer pair search.

- The sequence is given inline with --sequence, or read from stdin with "--sequence -".
- Window coordinates are 1-based inclusive (--start/--end, default whole sequence).
- Prints ranked pairs as JSON on stdout; errors go to stderr with exit code 2.

Usage:
    python -m primerpair.app.cli.primers_cli \
        --sequence ATGAAGAAGGCTTCG... \
        --primer-min 18 --primer-max 22 \
        --amplicon-min 100 --amplicon-max 300 \
        --tm-min 55 --tm-max 65 \
        [--forward-suffix "**G/C"] [--tm-method NN] [--max-results 20] [--log-level DEBUG]
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import List, Optional

from primerpair.app.core.config import settings
from primerpair.app.core.primer.finder import PrimerPairFinder
from primerpair.app.core.primer.schemas import PrimerPairSearchRequest, PrimerPairSearchResponse
from primerpair.app.core.primer.thermodynamics import TM_METHODS, TmModel


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Find ranked PCR primer pairs in a DNA sequence.")
    p.add_argument("--sequence", required=True, help="DNA sequence, or '-' to read it from stdin")
    p.add_argument("--start", type=int, default=None, help="Window start (1-based, inclusive)")
    p.add_argument("--end", type=int, default=None, help="Window end (1-based, inclusive)")
    p.add_argument("--amplicon-min", type=int, default=None)
    p.add_argument("--amplicon-max", type=int, default=None)
    p.add_argument("--primer-min", type=int, default=25)
    p.add_argument("--primer-max", type=int, default=25)
    p.add_argument("--tm-min", type=float, default=55.0)
    p.add_argument("--tm-max", type=float, default=85.0)
    p.add_argument("--forward-prefix", default="")
    p.add_argument("--reverse-prefix", default="")
    p.add_argument("--forward-suffix", default="", help="3' pattern, e.g. '**G/C'")
    p.add_argument("--reverse-suffix", default="", help="3' pattern, e.g. '**G/C'")
    p.add_argument("--sodium", type=float, default=0.2, help="Sodium concentration (M)")
    p.add_argument("--primer-dna", type=float, default=1e-6, help="Primer DNA concentration (M)")
    p.add_argument("--max-delta-tm", type=float, default=None)
    p.add_argument("--allow-repeated-forward", action="store_true",
                   help="Keep forward primers that occur more than once in the window")
    p.add_argument("--tm-method", choices=TM_METHODS, default=settings.TM_METHOD)
    p.add_argument("--window", type=int, default=settings.PAIR_SEARCH_WINDOW,
                   help="Reverse candidates considered on each side of the closest Tm")
    p.add_argument("--max-results", type=int, default=settings.MAX_PAIR_RESULTS)
    p.add_argument("--log-level", default=settings.LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p


def main(argv: Optional[List[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))
    log = logging.getLogger("primers_cli")

    try:
        sequence = sys.stdin.read() if args.sequence == "-" else args.sequence
        request = PrimerPairSearchRequest(
            sequence=sequence.strip().upper(),
            ampliconStart=args.start,
            ampliconEnd=args.end,
            ampliconSizeMin=args.amplicon_min,
            ampliconSizeMax=args.amplicon_max,
            primerSizeMin=args.primer_min,
            primerSizeMax=args.primer_max,
            tmMin=args.tm_min,
            tmMax=args.tm_max,
            forwardPrefix=args.forward_prefix,
            reversePrefix=args.reverse_prefix,
            forwardSuffix=args.forward_suffix,
            reverseSuffix=args.reverse_suffix,
            sodiumConcentration=args.sodium,
            primerDnaConcentration=args.primer_dna,
            maxDeltaTm=args.max_delta_tm,
            uniqueForwardPrimers=not args.allow_repeated_forward,
        )
        design_input = request.to_design_input()
        finder = PrimerPairFinder(
            design_input,
            tm_model=TmModel(args.tm_method, primer_dna_concentration=design_input.primer_dna_concentration),
            window=args.window,
            max_results=args.max_results,
        )
        result = finder.find_primer_pairs()
        if result.is_error:
            raise ValueError(result.error_message)

        response = PrimerPairSearchResponse.from_result(result)
        print(json.dumps(response.model_dump(), indent=2))
        log.info("%d primer pairs written", len(response.pairs))

    except Exception as ex:
        print(f"[ERROR] {ex}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
