"""Tests for code validation and short/full classification.

Covers:
- Validity of well-formed short, full and padded codes
- The specific rule reported for each malformed shape
- Short and full predicates partition the valid codes
- check_short / check_full class enforcement
"""

from __future__ import annotations

import pytest

from pluscode.codec import check, check_full, check_short, is_full, is_short, is_valid
from pluscode.core.exceptions import CodeClassError, InvalidCodeError, ShortCodeError

# ---------------------------------------------------------------------------
# Reference vectors: (code, is_valid, is_short, is_full)
# ---------------------------------------------------------------------------

VALIDITY_VECTORS = [
    ("8FWC2345+G6", True, False, True),
    ("8FWC2345+G6G", True, False, True),
    ("8fwc2345+", True, False, True),
    ("8FWCX400+", True, False, True),
    ("8F000000+", True, False, True),
    ("8FWC2345+G6G6G", True, False, True),
    ("C2222222+", True, False, True),
    ("WC2345+G6g", True, True, False),
    ("2345+G6", True, True, False),
    ("45+G6", True, True, False),
    ("+G6", True, True, False),
    ("2345+", True, True, False),
    ("G+", False, False, False),
    ("+", False, False, False),
    ("", False, False, False),
    ("8FWC2345+G", False, False, False),
    ("8FWC2_45+G6", False, False, False),
    ("8FWC2η45+G6", False, False, False),
    ("8FWC2345+G6+", False, False, False),
    ("8FWC2345G6+", False, False, False),
    ("8FWC2300+G6", False, False, False),
    ("WC2300+G6g", False, False, False),
    ("WC2345+G", False, False, False),
    ("WC2300+", False, False, False),
    ("8FWC2345+G6G6G6G6", False, False, False),
    ("X2222222+", False, False, False),
    ("CX222222+", False, False, False),
]


class TestValidityVectors:
    """Reference validity table."""

    @pytest.mark.parametrize(("code", "valid", "short", "full"), VALIDITY_VECTORS)
    def test_is_valid(self, code: str, valid: bool, short: bool, full: bool) -> None:
        assert is_valid(code) is valid

    @pytest.mark.parametrize(("code", "valid", "short", "full"), VALIDITY_VECTORS)
    def test_is_short(self, code: str, valid: bool, short: bool, full: bool) -> None:
        assert is_short(code) is short

    @pytest.mark.parametrize(("code", "valid", "short", "full"), VALIDITY_VECTORS)
    def test_is_full(self, code: str, valid: bool, short: bool, full: bool) -> None:
        assert is_full(code) is full

    @pytest.mark.parametrize(("code", "valid", "short", "full"), VALIDITY_VECTORS)
    def test_short_and_full_partition_valid_codes(
        self, code: str, valid: bool, short: bool, full: bool
    ) -> None:
        if valid:
            assert is_short(code) != is_full(code)
        else:
            assert not is_short(code)
            assert not is_full(code)


# ---------------------------------------------------------------------------
# Rule reporting
# ---------------------------------------------------------------------------


class TestCheckRules:
    """check() names the rule each malformed code breaks."""

    @pytest.mark.parametrize(
        ("code", "rule"),
        [
            ("", "EMPTY_CODE"),
            ("+", "EMPTY_CODE"),
            ("8FWC2345", "SEPARATOR_MISSING"),
            ("8FWC2345+G6+", "SEPARATOR_DUPLICATED"),
            ("8FWC2345G6+", "SEPARATOR_POSITION"),
            ("G+", "SEPARATOR_POSITION"),
            ("8FWC2_45+G6", "INVALID_CHARACTER"),
            ("8FWC2345+G6 ", "INVALID_CHARACTER"),
            ("0FWC2345+", "PADDING_AT_START"),
            ("WC2300+", "PADDING_IN_SHORT_CODE"),
            ("8FWC2300+G6", "PADDING_BEFORE_SUFFIX"),
            ("8FWC2345+G0", "PADDING_BEFORE_SUFFIX"),
            ("8F0C0000+", "PADDING_NOT_CONTIGUOUS"),
            ("8FW00000+", "PADDING_ODD_LENGTH"),
            ("8FWC2345+G", "SINGLE_GRID_DIGIT"),
            ("8FWC2345+G6G6G6G6", "TOO_MANY_DIGITS"),
            ("X2222222+", "LATITUDE_OUT_OF_RANGE"),
            ("CX222222+", "LONGITUDE_OUT_OF_RANGE"),
        ],
    )
    def test_rule(self, code: str, rule: str) -> None:
        with pytest.raises(InvalidCodeError) as excinfo:
            check(code)
        assert excinfo.value.rule == rule
        assert excinfo.value.operation == "check"
        assert excinfo.value.category == "malformed"

    def test_valid_code_passes(self) -> None:
        assert check("8FWC2345+G6") is None

    def test_message_names_the_code(self) -> None:
        with pytest.raises(InvalidCodeError, match="8FWC2_45"):
            check("8FWC2_45+G6")

    def test_lower_case_accepted(self) -> None:
        check("8fwc2345+g6")


# ---------------------------------------------------------------------------
# Class enforcement
# ---------------------------------------------------------------------------


class TestCheckClass:
    """check_short / check_full."""

    def test_check_full_accepts_full(self) -> None:
        check_full("8FWC2345+G6")

    def test_check_full_rejects_short(self) -> None:
        with pytest.raises(ShortCodeError) as excinfo:
            check_full("2345+G6")
        assert excinfo.value.rule == "SHORT_CODE"
        assert excinfo.value.category == "semantic"

    def test_check_short_accepts_short(self) -> None:
        check_short("+G6")

    def test_check_short_rejects_full(self) -> None:
        with pytest.raises(CodeClassError) as excinfo:
            check_short("8FWC2345+G6")
        assert excinfo.value.rule == "NOT_SHORT"

    def test_check_full_rejects_malformed(self) -> None:
        with pytest.raises(InvalidCodeError):
            check_full("8FWC2345")
