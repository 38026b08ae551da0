# File: primerpair/tests/test_parameters.py
# Version: v0.1.0
"""
PrimerDesignInput defaults, coordinate conversion and validation messages.
"""

import pytest

from primerpair.app.core.primer.parameters import PrimerDesignInput
from primerpair.app.core.primer.ranges import Range


def test_defaults_follow_sequence_length():
    seq = "ACGT" * 30
    inp = PrimerDesignInput(seq)
    assert inp.amplicon_bounds == Range(1, len(seq))
    assert inp.amplicon_size_range == Range(len(seq) - 20, len(seq))
    assert inp.primer_size_range == Range(25, 25)
    assert inp.tm_range == Range(55.0, 85.0)
    assert inp.is_valid()


def test_zero_and_one_based_copies():
    inp = PrimerDesignInput("AAACCCGGGTTT", amplicon_bounds=Range(4, 9), amplicon_size_range=Range(4, 6),
                            primer_size_range=Range(2, 3))
    zero = inp.to_zero_based()
    assert zero.zero_based and zero.amplicon_bounds == Range(3, 8)
    assert zero.to_one_based().amplicon_bounds == Range(4, 9)
    # the caller's object is untouched
    assert inp.amplicon_bounds == Range(4, 9) and not inp.zero_based
    assert inp.bounded_amplicon() == zero.bounded_amplicon() == "CCCGGG"


def test_bounded_amplicon_is_upper_case():
    inp = PrimerDesignInput("acgtacgt", amplicon_bounds=Range(2, 5))
    assert inp.bounded_amplicon() == "CGTA"


def _valid(**overrides):
    base = dict(
        amplicon="ACGT" * 25,
        amplicon_size_range=Range(40, 100),
        primer_size_range=Range(18, 20),
        tm_range=Range(50.0, 70.0),
    )
    base.update(overrides)
    return PrimerDesignInput(**base)


@pytest.mark.parametrize(
    "overrides,fragment",
    [
        (dict(amplicon=""), "No DNA sequence"),
        (dict(amplicon_bounds=Range(50, 10)), "Invalid amplicon bounds"),
        (dict(amplicon_bounds=Range(0, 10)), "greater than or equal to 1"),
        (dict(amplicon_bounds=Range(1, 101)), "less than or equal to the sequence length"),
        (dict(amplicon_size_range=Range(60, 40)), "Invalid amplicon length range"),
        (dict(amplicon_size_range=Range(0, 40)), "amplicon length minimum"),
        (dict(amplicon_size_range=Range(40, 101)), "maximum amplicon length"),
        (dict(primer_size_range=Range(20, 18)), "Invalid primer length range"),
        (dict(primer_size_range=Range(0, 18)), "minimum primer length"),
        (dict(amplicon_size_range=Range(10, 30)), "too small"),
        (dict(tm_range=Range(70.0, 50.0)), "Invalid melting point range"),
        (dict(forward_prefix="GAATTCX"), "forward prefix"),
        (dict(reverse_prefix="GGNTCC"), "reverse prefix"),
        (dict(sodium_concentration=0.0), "Sodium concentration"),
        (dict(primer_dna_concentration=-1.0), "Primer DNA concentration"),
        (dict(max_delta_tm=-0.5), "melting temperature difference"),
    ],
)
def test_validation_messages(overrides, fragment):
    inp = _valid(**overrides)
    assert fragment in inp.error_message()
    assert not inp.is_valid()


def test_primer_longer_than_window_is_rejected():
    inp = _valid(amplicon_bounds=Range(1, 30), amplicon_size_range=Range(20, 30), primer_size_range=Range(10, 31))
    assert "maximum primer length" in inp.error_message()


def test_valid_input_has_empty_message():
    assert _valid().error_message() == ""
    assert _valid(forward_prefix="gaattc", max_delta_tm=0.0).is_valid()
