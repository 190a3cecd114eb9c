"""
Tests for value payload decomposition.
"""

import pytest

from acss_grammar import Color, Fraction, Grammar, Named, Number, match_value
from acss_grammar.values import value_to_dict


class TestFraction:

    def test_simple(self):
        assert match_value("1/2") == Fraction(1, 2)

    def test_multi_digit(self):
        assert match_value("12/100") == Fraction(12, 100)

    def test_zero_numerator(self):
        assert match_value("0/3") == Fraction(0, 3)

    @pytest.mark.parametrize("payload", ["1/0", "1/05", "1/", "/2"])
    def test_rejected_denominators(self, payload):
        assert match_value(payload) is None


class TestColor:

    def test_short_hex(self):
        assert match_value("#fff") == Color("fff")

    def test_long_hex(self):
        assert match_value("#00ff0a") == Color("00ff0a")

    def test_alpha(self):
        assert match_value("#ffffff.5") == Color("ffffff", 0.5)
        assert match_value("#000.25") == Color("000", 0.25)

    def test_alpha_at_most_two_digits(self):
        assert match_value("#fff.255") is None

    def test_followed_by_unit_is_not_a_color(self):
        assert match_value("#fff.5em") is None
        assert match_value("#fffz") is None

    def test_uppercase_not_accepted(self):
        assert match_value("#FFF") is None

    def test_wrong_length(self):
        assert match_value("#ffff") is None


class TestNumber:

    def test_with_unit(self):
        assert match_value("10px") == Number(10, "px")

    def test_negative_decimal(self):
        assert match_value("-1.5em") == Number(-1.5, "em")

    def test_bare_fraction_part(self):
        assert match_value(".5") == Number(0.5)

    def test_percent(self):
        assert match_value("50%") == Number(50, "%")

    def test_unitless(self):
        v = match_value("0")
        assert v == Number(0)
        assert v.unit is None


class TestNamed:

    def test_word(self):
        assert match_value("red") == Named("red")

    def test_hyphenated(self):
        assert match_value("inline-block") == Named("inline-block")
        assert match_value("a-b-c") == Named("a-b-c")

    def test_variable_like(self):
        assert match_value("$primary") == Named("$primary")

    def test_hex_looking_word(self):
        assert match_value("fff") == Named("fff")

    def test_double_hyphen_rejected(self):
        assert match_value("red--md") is None

    def test_stray_characters(self):
        assert match_value("a,b") is None
        assert match_value("") is None
        assert match_value("red blue") is None


def test_variants_are_exclusive():
    samples = ["1/2", "#fff", "#fff.5", "10px", "-2", ".5", "red", "x-y"]
    kinds = [match_value(s).kind for s in samples]
    assert kinds == ["fraction", "color", "color", "number", "number", "number", "named", "named"]


def test_long_invalid_payload_fails_quickly():
    assert match_value("a" * 5000 + "--") is None
    assert match_value("a-" * 2500 + "-") is None


def test_non_string_payload():
    with pytest.raises(TypeError):
        match_value(10)  # type: ignore[arg-type]


def test_value_to_dict():
    assert value_to_dict(match_value("#fff.5")) == {"kind": "color", "hex": "fff", "alpha": 0.5}
    assert value_to_dict(match_value("1/0")) is None


def test_grammar_delegates():
    assert Grammar.match_value("1/2") == Fraction(1, 2)
    assert Grammar({"W": {}}).match_value("red") == Named("red")
