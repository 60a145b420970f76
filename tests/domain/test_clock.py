"""Tests for clock implementations."""

from datetime import date

from docissue.domain.clock import FixedClock, SystemClock


def test_fixed_clock() -> None:
    assert FixedClock(date(2026, 2, 1)).today() == date(2026, 2, 1)


def test_system_clock_reads_host_date() -> None:
    before = date.today()
    today = SystemClock().today()
    assert before <= today <= date.today()
