import math

from engine import fmt


def test_fmt_whole_numbers():
    assert fmt(3.0) == "3"
    assert fmt(-4.0) == "-4"
    assert fmt(10) == "10"
    assert fmt(0) == "0"


def test_fmt_trims_trailing_zeros():
    assert fmt(0.1) == "0.1"
    assert fmt(2.5) == "2.5"
    assert fmt(0.05) == "0.05"


def test_fmt_rounds_to_four_places():
    assert fmt(2 / 3) == "0.6667"
    assert fmt(-2 / 3) == "-0.6667"
    assert fmt(0.1 + 0.2) == "0.3"
    assert fmt(math.pi) == "3.1416"


def test_fmt_no_negative_zero():
    assert fmt(-0.0) == "0"
    assert fmt(-0.00001) == "0"


def test_fmt_shape():
    for i in range(-2000, 2001):
        n = i / 997
        s = fmt(n)
        assert not s.endswith(".")
        if "." in s:
            assert len(s.split(".")[1]) <= 4
        assert abs(float(s) - n) <= 0.00005 + 1e-12


def test_fmt_rounds_ties_half_up():
    # exact binary ties: banker's rounding would give 0.0312 and 2.0
    assert fmt(0.03125) == "0.0313"
    assert fmt(-0.03125) == "-0.0312"
    assert fmt(2.00005) == "2.0001"
    assert fmt(-0.00005) == "0"
