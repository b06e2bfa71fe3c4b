"""Tests for range specification parsing and normalization."""

import warnings

import pytest

from splitjoin.core.errors import (
    MissingDelimiterError,
    MultipleDelimiterError,
    MultipleDelimiterWarning,
    RangeBoundsError,
    RangeOverflowError,
    RangeParseError,
    RangeUnderflowError,
)
from splitjoin.core.range_normalizer import (
    Interval,
    RangeSpec,
    normalize,
    parse_range_spec,
    resolve_index,
)


class TestParseRangeSpec:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            (":", RangeSpec(None, None)),
            ("1:", RangeSpec(1, None)),
            (":-1", RangeSpec(None, -1)),
            ("-2:-1", RangeSpec(-2, -1)),
            ("+2:3", RangeSpec(2, 3)),
            (" 1 : 2 ", RangeSpec(1, 2)),
            ("007:", RangeSpec(7, None)),
        ],
    )
    def test_valid_specs(self, text, expected):
        assert parse_range_spec(text) == expected

    @pytest.mark.parametrize("text", ["", "1", "-1", "abc"])
    def test_missing_separator(self, text):
        with pytest.raises(MissingDelimiterError) as exc_info:
            parse_range_spec(text)
        assert (
            exc_info.value.message
            == "Error: invalid value for range_str: delimiter (':') not found"
        )

    @pytest.mark.parametrize("text", ["::", "1:2:3", ":1:"])
    def test_multiple_separators_rejected_in_strict_mode(self, text):
        with pytest.raises(MultipleDelimiterError) as exc_info:
            parse_range_spec(text)
        assert exc_info.value.message == (
            "Error: invalid value for range_str: "
            "more than one occurence of delimiter (':')"
        )

    def test_lenient_mode_warns_and_uses_first_two_parts(self):
        with pytest.warns(MultipleDelimiterWarning, match="more than one occurence"):
            spec = parse_range_spec("1:2:3", strict=False)
        assert spec == RangeSpec(1, 2)

    def test_lenient_mode_does_not_warn_for_single_separator(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            assert parse_range_spec("1:2", strict=False) == RangeSpec(1, 2)

    @pytest.mark.parametrize("text", ["a:", ":b", "1.5:", ":1e3", "--1:", "1-:", "0x1:"])
    def test_non_decimal_endpoint(self, text):
        with pytest.raises(RangeParseError):
            parse_range_spec(text)

    def test_parse_error_names_the_part(self):
        with pytest.raises(RangeParseError) as exc_info:
            parse_range_spec("1:x2")
        assert exc_info.value.part == "x2"
        assert "'x2' is not a decimal integer" in exc_info.value.message

    def test_str_round_trip(self):
        for text in [":", "1:", ":-1", "-2:-1"]:
            assert str(parse_range_spec(text)) == text


class TestResolveIndex:
    @pytest.mark.parametrize(
        ("value", "expected"), [(0, 0), (1, 1), (3, 3), (-1, 2), (-3, 0)]
    )
    def test_in_bounds(self, value, expected):
        assert resolve_index(value, 3) == expected

    def test_underflow(self):
        with pytest.raises(RangeUnderflowError) as exc_info:
            resolve_index(-4, 3)
        assert exc_info.value.value == -4
        assert exc_info.value.field_count == 3

    def test_overflow(self):
        with pytest.raises(RangeOverflowError):
            resolve_index(4, 3)

    def test_bounds_errors_share_base_class(self):
        with pytest.raises(RangeBoundsError):
            resolve_index(-4, 3)
        with pytest.raises(RangeBoundsError):
            resolve_index(4, 3)

    def test_zero_fields(self):
        assert resolve_index(0, 0) == 0
        with pytest.raises(RangeOverflowError):
            resolve_index(1, 0)
        with pytest.raises(RangeUnderflowError):
            resolve_index(-1, 0)


class TestNormalize:
    def test_full_range(self):
        assert normalize(":", 3) == Interval(0, 3)

    def test_open_end(self):
        assert normalize("1:", 3) == Interval(1, 3)

    def test_negative_end(self):
        assert normalize(":-1", 3) == Interval(0, 2)

    def test_both_negative(self):
        assert normalize("-2:-1", 3) == Interval(1, 2)

    def test_reversed_bounds_are_empty_not_an_error(self):
        interval = normalize("2:1", 3)
        assert interval == Interval(2, 1)
        assert interval.is_empty

    def test_accepts_parsed_spec(self):
        assert normalize(RangeSpec(-1, None), 5) == Interval(4, 5)

    def test_start_underflow(self):
        with pytest.raises(RangeUnderflowError):
            normalize("-4:", 3)

    def test_end_overflow(self):
        with pytest.raises(RangeOverflowError):
            normalize(":4", 3)

    def test_both_endpoints_checked(self):
        with pytest.raises(RangeOverflowError):
            normalize("0:9", 3)

    def test_lenient_flag_forwarded(self):
        with pytest.warns(MultipleDelimiterWarning):
            assert normalize("::", 2, strict=False) == Interval(0, 2)

    def test_interval_rejects_negative_bounds(self):
        with pytest.raises(ValueError):
            Interval(-1, 2)
