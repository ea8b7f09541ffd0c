"""
Tests for the modulo-11 check-digit engine.
"""

import pytest

from cnpj_alfa.domain import (
    CheckDigits,
    InvalidCharacterError,
    InvalidLengthError,
    char_value,
    complete,
    compute_dv,
    compute_single_dv,
    right_weights,
)


# Legacy weights for an all-numeric CNPJ
CLASSIC_WEIGHTS_1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
CLASSIC_WEIGHTS_2 = [6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]


def classic_digit(digits: str, weights: list[int]) -> int:
    remainder = sum(int(d) * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


class TestCharValue:
    @pytest.mark.parametrize("ch,expected", [
        ("0", 0),
        ("5", 5),
        ("9", 9),
        ("A", 17),
        ("B", 18),
        ("Z", 42),
    ])
    def test_valid_characters(self, ch, expected):
        assert char_value(ch) == expected

    @pytest.mark.parametrize("ch", ["a", "z", ":", "@", "/", "-", " ", "", "AB", "É"])
    def test_invalid_characters(self, ch):
        assert char_value(ch) is None

    def test_gap_between_digits_and_letters(self):
        assert char_value("A") - char_value("9") == 8


class TestRightWeights:
    def test_twelve(self):
        assert right_weights(12) == CLASSIC_WEIGHTS_1

    def test_thirteen(self):
        assert right_weights(13) == CLASSIC_WEIGHTS_2

    def test_rightmost_is_always_two(self):
        for length in range(1, 30):
            assert right_weights(length)[-1] == 2

    def test_cycles_after_nine(self):
        assert right_weights(9) == [2, 9, 8, 7, 6, 5, 4, 3, 2]
        assert right_weights(10) == [3, 2, 9, 8, 7, 6, 5, 4, 3, 2]

    def test_empty(self):
        assert right_weights(0) == []

    def test_negative_length(self):
        with pytest.raises(ValueError):
            right_weights(-1)


class TestComputeSingleDv:
    def test_zero_remainder_collapses_to_zero(self):
        assert compute_single_dv("000000000000") == 0

    def test_remainder_one_collapses_to_zero(self):
        # 6 * 2 = 12, 12 % 11 == 1
        assert compute_single_dv("000000000006") == 0

    def test_regular_remainder(self):
        # 1 * 2 = 2, 11 - 2 == 9
        assert compute_single_dv("000000000001") == 9

    def test_invalid_character_reports_position(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            compute_single_dv("12ABC34501D*")
        assert exc_info.value.position == 11
        assert exc_info.value.character == "*"

    def test_lowercase_is_rejected_without_normalization(self):
        with pytest.raises(InvalidCharacterError) as exc_info:
            compute_single_dv("12aBC34501DE")
        assert exc_info.value.position == 2


class TestComputeDv:
    def test_alphanumeric_body(self):
        assert compute_dv("12ABC34501DE") == CheckDigits(3, 5)

    def test_normalizes_input(self):
        assert compute_dv("12.abc.345/01de") == CheckDigits(3, 5)

    def test_unpacks_like_a_tuple(self):
        d1, d2 = compute_dv("12ABC34501DE")
        assert isinstance(d1, int)
        assert isinstance(d2, int)
        assert (d1, d2) == (3, 5)

    @pytest.mark.parametrize("body,expected", [
        ("000000000001", "91"),
        ("599522590001", "85"),
    ])
    def test_numeric_bodies(self, body, expected):
        assert str(compute_dv(body)) == expected

    @pytest.mark.parametrize("body", [
        "112223330001",
        "330001670001",
        "123456780001",
        "987654320001",
    ])
    def test_matches_legacy_numeric_algorithm(self, body):
        d1 = classic_digit(body, CLASSIC_WEIGHTS_1)
        d2 = classic_digit(body + str(d1), CLASSIC_WEIGHTS_2)
        assert compute_dv(body) == CheckDigits(d1, d2)

    @pytest.mark.parametrize("body", ["SHORT", "", "12ABC34501DE3", "12ABC34501D"])
    def test_invalid_length(self, body):
        with pytest.raises(InvalidLengthError):
            compute_dv(body)

    def test_invalid_length_details(self):
        with pytest.raises(InvalidLengthError) as exc_info:
            compute_dv("SHORT")
        assert exc_info.value.expected == 12
        assert exc_info.value.actual == 5

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            compute_dv("SHORT")


class TestCheckDigits:
    def test_str(self):
        assert str(CheckDigits(0, 5)) == "05"

    def test_rejects_out_of_range(self):
        with pytest.raises(ValueError):
            CheckDigits(10, 0)


def test_complete():
    assert complete("12.abc.345/01de") == "12ABC34501DE35"
