from datetime import datetime

from src.bus_attendance.bus_attendance.common.datetime_utils import day_window, days_in_month, month_window


def test_day_window_is_local_midnight_to_midnight():
    start, end = day_window(datetime(2026, 2, 28, 18, 30, 12))
    assert start == datetime(2026, 2, 28)
    assert end == datetime(2026, 3, 1)


def test_days_in_month():
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2026, 4) == 30
    assert days_in_month(2026, 12) == 31


def test_month_window_december():
    assert month_window(2025, 12) == (datetime(2025, 12, 1), datetime(2025, 12, 31, 23, 59, 59))
