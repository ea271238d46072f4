"""Tests for time utilities and formatters."""

from datetime import datetime

import pytest
import pytz

from utils.formatters import format_amount, format_currency, format_number, round_half_up
from utils.time_utils import (
    SESSION_WINDOWS,
    SessionWindow,
    date_label,
    from_epoch_ms,
    to_epoch_ms,
    utc_hour,
)


class TestTimeUtils:
    """Test cases for epoch conversion and session windows."""

    def test_epoch_round_trip(self):
        """Test conversion between datetime and epoch ms."""
        dt = datetime(2024, 1, 15, 14, 30, tzinfo=pytz.utc)
        ms = to_epoch_ms(dt)

        assert ms == 1705329000000
        assert from_epoch_ms(ms) == dt

    def test_naive_datetime_is_utc(self):
        """Test naive datetimes are read as UTC."""
        assert to_epoch_ms(datetime(2024, 1, 15, 14, 30)) == 1705329000000

    def test_utc_hour(self):
        """Test hour extraction ignores local timezone."""
        ny = pytz.timezone("America/New_York")
        dt = ny.localize(datetime(2024, 1, 15, 9, 0))

        assert utc_hour(to_epoch_ms(dt)) == 14

    def test_date_label(self):
        """Test short date labels."""
        assert date_label(to_epoch_ms(datetime(2023, 12, 3, 23, 59, tzinfo=pytz.utc))) == "12/3/2023"

    def test_wrapping_window(self):
        """Test windows crossing midnight."""
        asia = SESSION_WINDOWS["ASIA"]

        assert asia.contains(22) is True
        assert asia.contains(0) is True
        assert asia.contains(8) is True
        assert asia.contains(9) is False
        assert asia.contains(21) is False

    def test_plain_window(self):
        """Test start inclusive, end exclusive."""
        window = SessionWindow(name="Test", start=7, end=17)

        assert window.contains(7) is True
        assert window.contains(16) is True
        assert window.contains(17) is False

    def test_overlap_has_no_window(self):
        """Test OVERLAP is not in the window table."""
        assert "OVERLAP" not in SESSION_WINDOWS


class TestFormatters:
    """Test cases for display formatting."""

    def test_format_currency(self):
        """Test currency formatting with sign and symbol."""
        assert format_currency(1234.5) == "$1,234.50"
        assert format_currency(-200.0, "EUR") == "-€200.00"
        assert format_currency(1500.4, "JPY") == "¥1,500"
        assert format_currency(10.0, "SEK") == "SEK 10.00"

    def test_format_number(self):
        """Test fixed decimals."""
        assert format_number(1234.5678) == "1,234.57"
        assert format_number(3.0, decimals=0) == "3"

    def test_round_half_up(self):
        """Test exact halves round away from zero."""
        assert round_half_up(0.125) == 0.13
        assert round_half_up(-0.125) == -0.13
        assert round_half_up(2.5, decimals=0) == 3.0
        # 1.005 is stored just below the half
        assert round_half_up(1.005) == 1.0

    def test_format_amount(self):
        """Test whole amounts drop the decimal part."""
        assert format_amount(300.0) == "300"
        assert format_amount(250.5) == "250.5"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
