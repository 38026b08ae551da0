# File: primerpair/app/core/primer/constants.py
# Version: v0.1.0
"""
Constants and defaults for the primer pair search.
"""

from __future__ import annotations

# Input defaults (PrimerDesignInput)
DEFAULT_PRIMER_SIZE_MIN = 25
DEFAULT_PRIMER_SIZE_MAX = 25
DEFAULT_TM_MIN = 55.0
DEFAULT_TM_MAX = 85.0
DEFAULT_AMPLICON_SIZE_SLACK = 20       # default amplicon min = len(window) - slack
DEFAULT_SODIUM_MOLARITY = 0.2          # M
DEFAULT_PRIMER_DNA_MOLARITY = 1e-6     # M

# Search knobs
PAIR_SEARCH_WINDOW = 100               # reverse candidates on each side of the closest Tm
MAX_PAIR_RESULTS = 50
SUFFIX_LENGTH = 3                      # 3' bases checked against the suffix pattern

# Pair scoring
TM_DELTA_WEIGHT = 1.0

# Hydrogen bonds per matched base (dimer heuristic)
GC_BOND_WEIGHT = 3
AT_BOND_WEIGHT = 2

DNA_BASES = frozenset("ACGT")
