"""Tests for monthly and year-to-date aggregation."""
from datetime import date

import pytest

from flextime.transformers import monthly_aggregator
from flextime.utilities.models import DailySum, MonthlySum


@pytest.fixture
def year_end_days():
    return [
        DailySum(date=date(2024, 11, 4), hours=2),
        DailySum(date=date(2024, 11, 5), hours=-1),
        DailySum(date=date(2024, 12, 2), hours=3, is_holiday=True),
        DailySum(date=date(2024, 12, 3), hours=-0.5),
        DailySum(date=date(2024, 12, 4), hours=-8, is_vacation_day=True, vacation_hours=8),
        DailySum(date=date(2025, 1, 2), hours=1),
        DailySum(date=date(2025, 2, 3), hours=-3),
    ]


def test_empty_days_give_no_summaries(settings):
    assert monthly_aggregator.sum_monthly_time([], settings) == []
    assert monthly_aggregator.group_entries_by_month_desc([], settings) == []


def test_monthly_sums_and_ytd_reset(settings, year_end_days):
    summaries = monthly_aggregator.sum_monthly_time(year_end_days, settings)

    assert summaries == [
        MonthlySum(date(2024, 11, 1), flextime_accrued=2, flextime_used=1, flextime_ytd=1),
        MonthlySum(
            date(2024, 12, 1),
            flextime_accrued=0,
            flextime_used=8.5,
            flextime_ytd=-7.5,
            vacation_time_used=8,
        ),
        MonthlySum(date(2025, 1, 1), flextime_accrued=1, flextime_used=0, flextime_ytd=1),
        MonthlySum(date(2025, 2, 1), flextime_accrued=0, flextime_used=3, flextime_ytd=-2),
    ]


def test_holidays_do_not_count_toward_flextime(settings):
    days = [
        DailySum(date=date(2025, 6, 19), hours=4, is_holiday=True),
        DailySum(date=date(2025, 6, 20), hours=-8, is_holiday=True),
    ]

    [summary] = monthly_aggregator.sum_monthly_time(days, settings)

    assert summary.flextime_accrued == 0
    assert summary.flextime_used == 0
    assert summary.flextime_ytd == 0


def test_vacation_hours_only_count_on_vacation_days(settings):
    days = [
        DailySum(date=date(2025, 6, 2), hours=-8, is_vacation_day=True, vacation_hours=8),
        DailySum(date=date(2025, 6, 3), hours=-4, is_vacation_day=True, vacation_hours=4),
        DailySum(date=date(2025, 6, 4), hours=0, vacation_hours=5),
    ]

    [summary] = monthly_aggregator.sum_monthly_time(days, settings)

    assert summary.vacation_time_used == 12
    assert summary.flextime_used == 12


def test_days_after_end_date_are_not_summarised(settings):
    days = [
        DailySum(date=date(2025, 6, 30), hours=-8),
        DailySum(date=date(2025, 7, 1), hours=2),
    ]

    groups = monthly_aggregator.group_entries_by_month_desc(days, settings)

    july, june = groups
    assert june.summary.flextime_used == 8
    assert july.summary.flextime_accrued == 0
    assert july.summary.flextime_ytd == -8
    assert [day.date for day in july.entries] == [date(2025, 7, 1)]


def test_groups_are_descending(settings, year_end_days):
    groups = monthly_aggregator.group_entries_by_month_desc(year_end_days, settings)

    assert [group.month for group in groups] == [
        date(2025, 2, 1),
        date(2025, 1, 1),
        date(2024, 12, 1),
        date(2024, 11, 1),
    ]
    december = groups[2]
    assert [day.date for day in december.entries] == [
        date(2024, 12, 4),
        date(2024, 12, 3),
        date(2024, 12, 2),
    ]
    assert december.summary.month == december.month


def test_sum_and_ytd_laws(settings, year_end_days):
    summaries = monthly_aggregator.sum_monthly_time(year_end_days, settings)

    previous = {}
    for summary in summaries:
        assert summary.flextime_accrued >= 0
        assert summary.flextime_used >= 0
        month_days = [
            day for day in year_end_days
            if day.date.replace(day=1) == summary.month and not day.is_holiday
        ]
        net = summary.flextime_accrued - summary.flextime_used
        assert net == pytest.approx(sum(day.hours for day in month_days))
        expected = previous.get(summary.month.year, 0) + net
        assert summary.flextime_ytd == pytest.approx(expected)
        previous[summary.month.year] = summary.flextime_ytd
