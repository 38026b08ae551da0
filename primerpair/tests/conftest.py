# File: primerpair/tests/conftest.py
# Version: v0.1.0
"""
Test bootstrap: ensure project root is on sys.path so 'primerpair.*' imports work
without an editable install.

Also provides deterministic Tm stubs so search tests do not depend on a
thermodynamic table.
"""
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from primerpair.app.core.primer.thermodynamics import wallace_tm  # noqa: E402


class CountingTm:
    """Wallace-rule Tm that counts calls and can fire a hook after N calls."""

    def __init__(self, after=None, hook=None):
        self.calls = 0
        self.after = after
        self.hook = hook

    def compute(self, sequence, sodium_concentration):
        self.calls += 1
        if self.hook is not None and self.calls == self.after:
            self.hook()
        return wallace_tm(sequence)


@pytest.fixture
def counting_tm():
    return CountingTm()


# 60 bp, taken from the head of a real coding sequence
SEQ60 = "ATGAAGAAGGCTTCGTCTCTGTCGGAGCTGGGGTTCGACGCGGAGGGCGCGTCGTCGGGG"


@pytest.fixture
def seq60():
    return SEQ60


@pytest.fixture
def counting_tm_factory():
    return CountingTm
