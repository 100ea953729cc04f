"""
Tests for numeral normalization: sign collapsing, delimiters, digit validation and length bounds.
"""

import pytest

from bignumber.exceptions import ContractViolation
from bignumber.syntax import DIGIT_VALUES, max_input_length, syntax_check


class TestDigitTable:

    def test_values(self) -> None:
        assert DIGIT_VALUES['0'] == 0
        assert DIGIT_VALUES['9'] == 9
        assert DIGIT_VALUES['a'] == DIGIT_VALUES['A'] == 10
        assert DIGIT_VALUES['F'] == 15

    def test_read_only(self) -> None:
        with pytest.raises(TypeError):
            DIGIT_VALUES['g'] = 16


class TestSignCollapsing:

    @pytest.mark.parametrize("text", ["5", "--5", "+5", "++--5", "-+-5"])
    def test_even_minus_collapses_to_none(self, text: str) -> None:
        assert syntax_check(text, 10) == "5"

    @pytest.mark.parametrize("text", ["-5", "+-5", "---5", "-++5"])
    def test_odd_minus_leaves_one(self, text: str) -> None:
        assert syntax_check(text, 10) == "-5"

    def test_sign_after_digits_invalid(self) -> None:
        assert syntax_check("5-", 10) is None
        assert syntax_check("1+1", 2) is None

    def test_signs_only_invalid(self) -> None:
        assert syntax_check("-", 10) is None
        assert syntax_check("+-+", 16) is None


class TestDelimiters:

    def test_trailing_delimiter_gets_zero(self) -> None:
        assert syntax_check("12,", 10) == "12.0"
        assert syntax_check("12.", 10) == "12.0"

    def test_comma_normalized_to_dot(self) -> None:
        assert syntax_check("3,14", 10) == "3.14"

    def test_leading_delimiter_kept(self) -> None:
        assert syntax_check("-.5", 10) == "-.5"

    def test_second_delimiter_invalid(self) -> None:
        assert syntax_check("1.2.3", 10) is None
        assert syntax_check("1,2.3", 10) is None

    @pytest.mark.parametrize("base", [2, 16])
    @pytest.mark.parametrize("text", ["1.0", "1,0", "10."])
    def test_delimiter_invalid_outside_base_10(self, text: str, base: int) -> None:
        assert syntax_check(text, base) is None

    def test_delimiter_alone_invalid(self) -> None:
        assert syntax_check(".", 10) is None


class TestDigits:

    def test_empty_invalid(self) -> None:
        assert syntax_check("", 10) is None

    def test_digit_must_be_below_base(self) -> None:
        assert syntax_check("89", 2) is None
        assert syntax_check("102", 2) is None
        assert syntax_check("1a", 10) is None
        assert syntax_check("12G3", 16) is None

    def test_valid_digits_pass_through(self) -> None:
        assert syntax_check("0110", 2) == "0110"
        assert syntax_check("dEaD", 16) == "dEaD"
        assert syntax_check("0042", 10) == "0042"

    @pytest.mark.parametrize("text", ["1 0", "1_0", "0x10", "１"])
    def test_unknown_characters_invalid(self, text: str) -> None:
        assert syntax_check(text, 16) is None

    def test_bad_base_is_contract_violation(self) -> None:
        with pytest.raises(ContractViolation, match="Base must be one of"):
            syntax_check("1", 8)


class TestMaxInputLength:

    def test_bounds_for_128_bits(self) -> None:
        assert max_input_length(2, 128) == 128
        assert max_input_length(16, 128) == 32
        assert max_input_length(10, 128) is None

    def test_hex_bound_rounds_up_to_bytes(self) -> None:
        assert max_input_length(16, 12) == 4

    @pytest.mark.parametrize("base", [0, 1, 8, 36, True, 2.0, 16.0, [2], "10", None])
    def test_bad_base(self, base) -> None:
        with pytest.raises(ContractViolation):
            max_input_length(base, 128)
