"""
Tests for timestamp parsing, formatting and week arithmetic.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from utils.currency import format_currency, format_signed, format_transaction_amount
from utils.date_helpers import (
    days_since_week_start,
    format_display_date,
    format_timestamp,
    is_local_offset,
    now_local,
    parse_display_date,
    parse_timestamp,
    to_frame_of,
    week_bounds,
)


class TestTimestamps:
    def test_parse_z_suffix(self):
        assert parse_timestamp('2024-05-15T14:30:00.000Z') == datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)

    def test_parse_offset(self):
        d = parse_timestamp('2024-05-15T11:30:00-03:00')
        assert d.astimezone(timezone.utc) == datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)

    def test_parse_bare_date(self):
        assert parse_timestamp('2024-05-15') == datetime(2024, 5, 15)

    @pytest.mark.parametrize('value', ['', '   ', 'yesterday', None])
    def test_parse_invalid(self, value):
        with pytest.raises(ValueError):
            parse_timestamp(value)

    def test_format_converts_to_utc(self):
        d = datetime(2024, 5, 15, 11, 30, tzinfo=timezone(timedelta(hours=-3)))
        assert format_timestamp(d) == '2024-05-15T14:30:00.000Z'

    def test_to_frame_of_naive_reference(self):
        aware = datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)
        local = to_frame_of(aware, datetime(2024, 5, 15))
        assert local.tzinfo is None
        assert local == aware.astimezone().replace(tzinfo=None)

    def test_local_offset_detection(self, new_york_tz):
        assert is_local_offset(now_local())
        assert is_local_offset(datetime(2024, 1, 15, 9, 0).astimezone())
        assert not is_local_offset(datetime(2024, 7, 1, tzinfo=timezone.utc))
        assert not is_local_offset(datetime(2024, 7, 1))

    def test_to_frame_of_local_reference_in_winter(self, new_york_tz):
        summer_now = datetime(2024, 7, 1, 12, 0).astimezone()
        winter = to_frame_of(datetime(2024, 1, 1, 4, 30, tzinfo=timezone.utc), summer_now)
        assert (winter.year, winter.month, winter.day, winter.hour) == (2023, 12, 31, 23)


class TestWeek:
    @pytest.mark.parametrize('day, expected', [
        (date(2024, 5, 12), 0),   # Sunday
        (date(2024, 5, 13), 1),
        (date(2024, 5, 18), 6),   # Saturday
    ])
    def test_sunday_is_zero(self, day, expected):
        assert days_since_week_start(day) == expected

    def test_bounds_keep_time_of_day(self):
        now = datetime(2024, 5, 15, 14, 30, tzinfo=timezone.utc)
        start, end = week_bounds(now)
        assert start == datetime(2024, 5, 12, 14, 30, tzinfo=timezone.utc)
        assert end == datetime(2024, 5, 18, 14, 30, tzinfo=timezone.utc)


class TestDisplay:
    def test_display_formats(self):
        d = date(2024, 5, 3)
        assert format_display_date(d, 'DD/MM/YYYY') == '03/05/2024'
        assert format_display_date(d, 'MM/DD/YYYY') == '05/03/2024'
        assert format_display_date(None) == 'N/A'

    def test_parse_display_falls_back_to_iso(self):
        assert parse_display_date('03/05/2024', 'DD/MM/YYYY') == date(2024, 5, 3)
        assert parse_display_date('2024-05-03', 'DD/MM/YYYY') == date(2024, 5, 3)
        assert parse_display_date('31/31/2024', 'DD/MM/YYYY') is None

    def test_currency(self):
        assert format_currency(1234.5) == 'R$ 1,234.50'
        assert format_transaction_amount(300, 'expense', '$') == '-$ 300.00'
        assert format_transaction_amount(300, 'income', '$') == '+$ 300.00'
        assert format_signed(700) == '+R$ 700.00'
        assert format_signed(-350, '$') == '-$ 350.00'
