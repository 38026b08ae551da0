# File: primerpair/tests/test_generator.py
# Version: v0.1.0
"""
Candidate enumeration: suffix patterns, window positions, uniqueness, prefix and Tm filters.
"""

import pytest

from primerpair.app.core.primer.generator import PrimerCandidateEnumerator, SuffixPattern
from primerpair.app.core.primer.ranges import Range
from primerpair.app.core.primer.thermodynamics import revcomp, wallace_tm

ANY_TM = Range(float("-inf"), float("inf"))


@pytest.mark.parametrize(
    "pattern,seq,expected",
    [
        ("", "ACGTA", True),
        ("***", "ACGTA", True),
        ("**G/C", "AAAAG", True),
        ("**G/C", "AAAAC", True),
        ("**G/C", "AAAAT", False),
        ("G/CG/CG/C", "ATGCG", True),
        ("G/CG/CG/C", "ATGCA", False),
        ("*A*", "TTTAT", True),
        ("*a*", "TTTAT", True),
        ("A/T/G**", "GCC", True),
    ],
)
def test_suffix_pattern_matching(pattern, seq, expected):
    assert SuffixPattern(pattern).matches(seq) is expected


@pytest.mark.parametrize("pattern", ["**", "****", "G/", "/GC*", "XYZ", "**N"])
def test_malformed_suffix_patterns_match_nothing(pattern):
    p = SuffixPattern(pattern)
    assert not p.valid
    assert not p.matches("ACGTACGT")


def test_pattern_needs_three_bases():
    assert not SuffixPattern("***").matches("AC")
    assert SuffixPattern("").matches("AC")


def _enum(amplicon, amplicon_min, tm_model=None, unique=True):
    return PrimerCandidateEnumerator(amplicon, amplicon_min, tm_model or _Wallace(), 0.2, unique_forward=unique)


class _Wallace:
    def compute(self, sequence, sodium_concentration):
        return wallace_tm(sequence)


def test_forward_windows_cover_every_start_offset():
    amplicon = "ACGTACGTACGT"
    amplicon_min = 4
    primers = list(_enum(amplicon, amplicon_min, unique=False).forward(4, "", "***", ANY_TM))
    starts = list(range(0, len(amplicon) - amplicon_min))
    assert [p.sequence_position for p in primers] == starts
    assert [p.sequence for p in primers] == [amplicon[i : i + 4] for i in starts]


def test_forward_uniqueness_drops_repeated_windows():
    amplicon = "ACGTACGTACGT"
    # every 4-mer of this periodic sequence occurs at least twice
    assert list(_enum(amplicon, 4).forward(4, "", "", ANY_TM)) == []

    amplicon = "AAAAGCTTGCATCC"
    primers = list(_enum(amplicon, 4).forward(3, "", "", ANY_TM))
    positions = [p.sequence_position for p in primers]
    assert 0 not in positions and 1 not in positions  # "AAA" occurs at 0 and 1 (overlapping)
    assert all(amplicon.count(p.sequence) == 1 for p in primers)


def test_reverse_windows_positions_and_no_uniqueness():
    amplicon = "ACGTACGTACGT"
    amplicon_min = 4
    primers = list(_enum(amplicon, amplicon_min).reverse(4, "", "", ANY_TM))
    rc = revcomp(amplicon)
    n = len(amplicon)
    offsets = range(0, n - amplicon_min + 1)
    assert [p.sequence for p in primers] == [rc[i : i + 4] for i in offsets]
    assert [p.sequence_position for p in primers] == [n - i for i in offsets]
    # footprint on the + strand ends right before the recorded position
    for p in primers:
        assert revcomp(amplicon[p.sequence_position - 4 : p.sequence_position]) == p.sequence


def test_short_windows_are_skipped():
    amplicon = "GATTACAGCT"
    # max start = 10 - 2 = 8, but a 5-mer only fits up to start 5
    primers = list(_enum(amplicon, 2).forward(5, "", "", ANY_TM))
    assert [p.sequence_position for p in primers] == [0, 1, 2, 3, 4, 5]


def test_non_acgt_windows_are_skipped():
    amplicon = "ACGNTTGCAGT"
    primers = list(_enum(amplicon, 1).forward(3, "", "", ANY_TM))
    assert all("N" not in p.sequence for p in primers)
    assert {p.sequence_position for p in primers}.isdisjoint({1, 2, 3})


def test_prefix_counts_for_tm_but_not_for_suffix():
    amplicon = "TTTTAGCATTTCG"
    prefix = "GAATTC"
    # suffix is checked on the core window only: "**G" would fail on the prefix's last C otherwise
    primers = list(_enum(amplicon, 1, unique=False).forward(4, prefix, "**G", ANY_TM))
    assert primers
    for p in primers:
        assert p.sequence.startswith(prefix)
        assert p.core_sequence.endswith("G")
        assert p.tm == wallace_tm(p.sequence)


def test_tm_range_filters_candidates():
    amplicon = "AAAAGGGGTTTTCCCCAT"
    tm = Range(10.0, 10.0)  # 4-mers: AT-only = 8, one GC = 10, ...
    primers = list(_enum(amplicon, 1, unique=False).forward(4, "", "", tm))
    assert primers
    assert all(wallace_tm(p.sequence) == 10.0 for p in primers)


def test_generators_are_lazy_and_stop_on_request():
    calls = []

    class _Tm:
        def compute(self, sequence, sodium_concentration):
            calls.append(sequence)
            return 60.0

    stop = {"flag": False}
    enum = PrimerCandidateEnumerator("ACGTTGCAAGGCTTAACCGG", 1, _Tm(), 0.2, unique_forward=False,
                                     should_stop=lambda: stop["flag"])
    gen = enum.forward(4, "", "", ANY_TM)
    assert calls == []
    first = next(gen)
    assert first.sequence_position == 0 and len(calls) == 1
    stop["flag"] = True
    assert list(gen) == []
    assert len(calls) == 1
