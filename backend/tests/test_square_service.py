"""
NetDemo — Square Service Unit Tests
=====================================

What:  Tests for `num` parsing, the lower bound and squaring.
How:   Calls SquareService directly; no HTTP involved.

What we test:
    ✅ Signed and unsigned decimal integers parse
    ✅ Whitespace, underscores, decimals, non-ASCII digits are rejected
    ✅ Bound is inclusive at 100; negatives hit the bound, not the parser
    ✅ Large values square exactly
"""

import pytest

from netdemo.exceptions import ValidationError
from netdemo.services.square_service import MIN_NUM, SquareService


class TestParseNum:

    def setup_method(self):
        self.service = SquareService()

    @pytest.mark.parametrize("raw,expected", [
        ("0", 0),
        ("100", 100),
        ("+150", 150),
        ("-42", -42),
        ("007", 7),
    ])
    def test_valid_integers(self, raw, expected):
        assert self.service.parse_num(raw) == expected

    @pytest.mark.parametrize("raw", [
        None,
        "",
        "abc",
        "12.5",
        "1e3",
        " 150",
        "150 ",
        "1_000",
        "+",
        "-",
        "0x10",
        "١٢٣",  # Arabic-Indic digits: int() accepts them, we don't
    ])
    def test_rejects_non_integers(self, raw):
        with pytest.raises(ValidationError, match="num is not integer") as exc_info:
            self.service.parse_num(raw)
        assert exc_info.value.field == "num"


class TestSquare:

    def setup_method(self):
        self.service = SquareService()

    def test_lower_bound_is_inclusive(self):
        assert MIN_NUM == 100
        assert self.service.square("100") == (100, 10000)

    def test_just_below_bound_rejected(self):
        with pytest.raises(ValidationError, match="num is smaller than 100"):
            self.service.square("99")

    def test_negative_is_smaller_not_invalid(self):
        with pytest.raises(ValidationError, match="num is smaller than 100") as exc_info:
            self.service.square("-500")
        assert exc_info.value.context["num"] == -500

    def test_invalid_checked_before_bound(self):
        with pytest.raises(ValidationError, match="num is not integer"):
            self.service.square("5.5")

    def test_large_value_squares_exactly(self):
        n = 10 ** 30 + 7
        assert self.service.square(str(n)) == (n, n * n)

    def test_error_status_code(self):
        with pytest.raises(ValidationError) as exc_info:
            self.service.square(None)
        assert exc_info.value.status_code == 400
