"""
Tests for NonNegativeRange:
- Construction and bound validation
- Parsing from text, including whitespace and syntax errors
- Rendering back to text
- Membership tests
"""

import pytest

from docprimitives import (
    InvalidSyntaxError,
    NonNegativeRange,
    OutOfRangeError,
)


class TestConstruction:
    """Tests for building ranges from bounds."""

    def test_defaults(self):
        """Default range is [0, ∞[."""
        range_ = NonNegativeRange()
        assert range_.min == 0
        assert range_.max is None

    @pytest.mark.parametrize(
        "min_,max_",
        [(0, None), (0, 0), (3, None), (3, 3), (3, 10), (1000, 1_000_000)],
    )
    def test_valid_bounds(self, min_: int, max_: int | None):
        range_ = NonNegativeRange(min_, max_)
        assert range_.min == min_
        assert range_.max == max_

    def test_none_min_means_zero(self):
        assert NonNegativeRange(None, 5) == NonNegativeRange(0, 5)

    def test_negative_min(self):
        """Negative minimum is rejected."""
        with pytest.raises(OutOfRangeError, match=r'Value "-1" out of range \[0, ∞\['):
            NonNegativeRange(-1)

    def test_max_below_min(self):
        """Maximum below minimum is rejected."""
        with pytest.raises(OutOfRangeError, match=r'Value "2" out of range \[3, ∞\[') as exc_info:
            NonNegativeRange(3, 2)

        assert exc_info.value.value == 2
        assert exc_info.value.lower_bound == 3
        assert exc_info.value.upper_bound is None

    def test_out_of_range_is_value_error(self):
        with pytest.raises(ValueError):
            NonNegativeRange(-5)

    def test_immutable(self):
        range_ = NonNegativeRange(1, 2)
        with pytest.raises(AttributeError):
            range_.min = 5

    def test_hashable(self):
        ranges = {NonNegativeRange(1, 2), NonNegativeRange(1, 2), NonNegativeRange(1)}
        assert len(ranges) == 2


class TestFromString:
    """Tests for parsing the text form."""

    @pytest.mark.parametrize(
        "text,expected_min,expected_max,expected_str,expected_defined,expected_exact",
        [
            ("", 0, None, "", False, False),
            ("  42\r\n", 42, 42, "42", True, True),
            ("5 -", 5, None, "5-", True, False),
            ("0  -  99", 0, 99, "0-99", True, False),
            ("7\t-12", 7, 12, "7-12", True, False),
        ],
        ids=["empty", "exact", "left", "right", "both"],
    )
    def test_parse(
        self,
        text: str,
        expected_min: int,
        expected_max: int | None,
        expected_str: str,
        expected_defined: bool,
        expected_exact: bool,
    ):
        range_ = NonNegativeRange.from_string(text)

        assert range_ == NonNegativeRange(expected_min, expected_max)
        assert range_.min == expected_min
        assert range_.max == expected_max
        assert str(range_) == expected_str
        assert range_.is_defined() is expected_defined
        assert range_.is_exact() is expected_exact

    def test_whitespace_only(self):
        assert NonNegativeRange.from_string(" \t\n") == NonNegativeRange()

    def test_syntax_error(self):
        with pytest.raises(
            InvalidSyntaxError,
            match=r'^Syntax error in "45\+"; not a valid length range$',
        ) as exc_info:
            NonNegativeRange.from_string("45+")

        assert exc_info.value.text == "45+"

    @pytest.mark.parametrize("text", ["-", "-5", "5--", "5-6-7", "a-b", "1.5", "x"])
    def test_rejects_malformed(self, text: str):
        with pytest.raises(InvalidSyntaxError):
            NonNegativeRange.from_string(text)

    def test_max_below_min_in_text(self):
        """A well-formed string can still describe an impossible range."""
        with pytest.raises(OutOfRangeError):
            NonNegativeRange.from_string("9-3")


class TestRendering:
    """Tests for str() of ranges built directly."""

    @pytest.mark.parametrize(
        "range_,expected",
        [
            (NonNegativeRange(), ""),
            (NonNegativeRange(0, 0), "0"),
            (NonNegativeRange(0, 7), "0-7"),
            (NonNegativeRange(3), "3-"),
            (NonNegativeRange(4, 4), "4"),
        ],
    )
    def test_str(self, range_: NonNegativeRange, expected: str):
        assert str(range_) == expected

    @pytest.mark.parametrize("text", ["", "0", "42", "5-", "0-99", "7-12"])
    def test_reparse_rendered(self, text: str):
        range_ = NonNegativeRange.from_string(text)
        assert NonNegativeRange.from_string(str(range_)) == range_

    def test_zero_exact_is_defined(self):
        """[0, 0] is distinct from the unbounded range."""
        range_ = NonNegativeRange(0, 0)
        assert range_.is_defined() is True
        assert range_.is_exact() is True


class TestContains:
    """Tests for membership."""

    @pytest.mark.parametrize(
        "text,value,expected",
        [
            ("", 1, True),
            ("77", 76, False),
            ("77", 77, True),
            ("77", 78, False),
            ("5-", 4, False),
            ("5-", 5, True),
            ("5-", 6, True),
            ("0-9", 0, True),
            ("0-9", 9, True),
            ("0-9", 10, False),
            ("20-30", 19, False),
            ("20-30", 20, True),
            ("20-30", 30, True),
            ("20-30", 31, False),
        ],
    )
    def test_contains(self, text: str, value: int, expected: bool):
        assert NonNegativeRange.from_string(text).contains(value) is expected

    def test_in_operator(self):
        range_ = NonNegativeRange(2, 4)
        assert 3 in range_
        assert 5 not in range_

    def test_negative_value_not_contained(self):
        assert NonNegativeRange().contains(-1) is False
