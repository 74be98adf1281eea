"""Unit tests for reporttime.api.timing.format_duration."""

import re
from decimal import Decimal

import pytest

from reporttime.api.timing.format_duration import format_duration

pytestmark = pytest.mark.timing


def _parse_pretty(pretty: str, precision: int) -> Decimal:
    """Rebuild total seconds from a pretty string like '1day, 01:01:01.5'."""
    days = 0
    match = re.match(r"^(\d+)days?, (.*)$", pretty)
    if match:
        days = int(match.group(1))
        pretty = match.group(2)
    parts = pretty.split(":")
    seconds = Decimal(parts[-1] or "0")
    minutes = int(parts[-2]) if len(parts) >= 2 else 0
    hours = int(parts[-3]) if len(parts) >= 3 else 0
    return days * 86400 + hours * 3600 + minutes * 60 + seconds


class TestFormatDuration:
    def test_zero(self):
        formatted = format_duration(0.0, 3)
        assert (formatted.days, formatted.hours, formatted.minutes) == (0, 0, 0)
        assert formatted.seconds == Decimal("0.000")
        assert formatted.pretty == "0.000"

    def test_hours_minutes_seconds(self):
        formatted = format_duration(Decimal("10934.100"), 3)
        assert formatted.pretty == "3:02:14.100"
        assert (formatted.hours, formatted.minutes, formatted.seconds_text()) == (3, 2, "14.100")

    def test_one_day(self):
        formatted = format_duration(90061.5, 1)
        assert (formatted.days, formatted.hours, formatted.minutes) == (1, 1, 1)
        assert formatted.seconds == Decimal("1.5")
        assert formatted.pretty == "1day, 01:01:01.5"

    def test_truncates_instead_of_rounding(self):
        formatted = format_duration(4.9999, 3)
        assert formatted.pretty == "4.999"
        assert formatted.elapsed == Decimal("4.999")

    def test_plural_days(self):
        assert format_duration(2 * 86400 + 5, 0).pretty == "2days, 00:00:05"

    def test_minutes_only(self):
        assert format_duration(62.25, 2).pretty == "1:02.25"

    def test_two_digit_minutes_keep_leading_digit(self):
        assert format_duration(754, 3).pretty == "12:34.000"

    def test_two_digit_seconds(self):
        assert format_duration(42.5, 3).pretty == "42.500"

    def test_precision_zero_omits_separator(self):
        formatted = format_duration(5.9, 0)
        assert formatted.pretty == "5"
        assert formatted.seconds_text() == "5"

    def test_precision_zero_zero_duration(self):
        assert format_duration(0, 0).pretty == "0"

    def test_precision_nine(self):
        assert format_duration(Decimal("1.123456789123"), 9).pretty == "1.123456789"

    def test_precision_is_clamped(self):
        assert format_duration(1.5, 12).precision == 9
        assert format_duration(1.5, -1).pretty == "1"

    def test_negative_clamps_to_zero(self):
        assert format_duration(-3.2, 3).pretty == "0.000"

    def test_nan_clamps_to_zero(self):
        assert format_duration(float("nan"), 3).pretty == "0.000"

    def test_exact_hour_boundary(self):
        formatted = format_duration(3600, 3)
        assert formatted.pretty == "1:00:00.000"
        assert (formatted.hours, formatted.minutes) == (1, 0)

    def test_large_duration(self):
        formatted = format_duration(Decimal("123456789.5"), 1)
        assert formatted.days == 1428
        assert formatted.pretty.startswith("1428days, ")

    def test_variables(self):
        variables = format_duration(90061.5, 1).variables()
        assert variables == {
            "rtdays": "1",
            "rthours": "1",
            "rtmins": "1",
            "rtsecs": "1.5",
            "rttime": "1day, 01:01:01.5",
            "reporttime_exec_time": "90061.5",
        }

    def test_report_line(self):
        assert format_duration(5.001, 3).report_line() == "real 5.001s"

    def test_deterministic(self):
        assert format_duration(7.25, 2) == format_duration(7.25, 2)

    @pytest.mark.parametrize("precision", [0, 1, 3, 6, 9])
    @pytest.mark.parametrize(
        "elapsed",
        ["0", "0.000999", "4.9999", "59.999", "60", "3599.5", "86399.999", "90061.5", "1000000.123456789"],
    )
    def test_pretty_string_reconstructs_elapsed(self, elapsed, precision):
        value = Decimal(elapsed)
        formatted = format_duration(value, precision)
        tolerance = Decimal(1).scaleb(-precision)
        assert 0 <= value - _parse_pretty(formatted.pretty, precision) < tolerance
        assert formatted.total_seconds() == formatted.elapsed
