"""Monthly and year-to-date flextime aggregation for flextime tracker."""
import logging
from dataclasses import asdict
from datetime import date
from typing import Dict, List, Sequence

import pandas as pd

from flextime.utilities import utils
from flextime.utilities.models import DailySum, MonthGroup, MonthlySum, TrackerSettings

logger = logging.getLogger(__name__)


def days_to_frame(days: Sequence[DailySum]) -> pd.DataFrame:
    """Build a dataframe of daily sums with a month key column."""
    frame = pd.DataFrame([asdict(day) for day in days])
    frame["month"] = frame["date"].map(utils.month_start)
    return frame


def _sum_by_month(values: pd.Series, months: pd.Series, index: pd.Index) -> pd.Series:
    return values.groupby(months).sum().reindex(index, fill_value=0.0).astype(float)


def sum_monthly_time(
    days: Sequence[DailySum],
    settings: TrackerSettings,
) -> List[MonthlySum]:
    """
    Summarise daily sums per calendar month.

    Positive daily hours accrue flextime and negative hours use it, with
    holidays counting toward neither. Only days the settings cover are
    summarised. The year-to-date balance restarts at zero every January.

    Args:
        days: Daily sums
        settings: Tracker settings

    Returns:
        Monthly sums in ascending month order
    """
    if not days:
        return []

    frame = days_to_frame(days)
    index = pd.Index(sorted(frame["month"].unique()), name="month")

    eligible = frame[frame["date"].map(settings.covers).astype(bool)]
    counted = eligible[~eligible["is_holiday"].astype(bool)]
    vacation = eligible[eligible["is_vacation_day"].astype(bool)]

    summary = pd.DataFrame(index=index)
    summary["flextime_accrued"] = _sum_by_month(
        counted["hours"].where(counted["hours"] > 0, 0.0), counted["month"], index
    )
    summary["flextime_used"] = _sum_by_month(
        counted["hours"].where(counted["hours"] < 0, 0.0).abs(), counted["month"], index
    )
    summary["vacation_time_used"] = _sum_by_month(
        vacation["vacation_hours"], vacation["month"], index
    )

    net = summary["flextime_accrued"] - summary["flextime_used"]
    years = pd.Series([month.year for month in index], index=index)
    summary["flextime_ytd"] = net.groupby(years).cumsum()

    return [
        MonthlySum(
            month=month,
            flextime_accrued=float(row.flextime_accrued),
            flextime_used=float(row.flextime_used),
            flextime_ytd=float(row.flextime_ytd),
            vacation_time_used=float(row.vacation_time_used),
        )
        for month, row in summary.iterrows()
    ]


def group_entries_by_month_desc(
    days: Sequence[DailySum],
    settings: TrackerSettings,
) -> List[MonthGroup]:
    """
    Bundle daily sums with their month's summary.

    Args:
        days: Daily sums
        settings: Tracker settings

    Returns:
        Month groups, newest month first, each with days newest first
    """
    by_month: Dict[date, List[DailySum]] = {}
    for day in days:
        by_month.setdefault(utils.month_start(day.date), []).append(day)

    summaries = {summary.month: summary for summary in sum_monthly_time(days, settings)}

    grouped = [
        MonthGroup(
            month=month,
            summary=summaries.get(month, MonthlySum(month=month)),
            entries=tuple(sorted(month_days, key=lambda day: day.date, reverse=True)),
        )
        for month, month_days in by_month.items()
    ]
    grouped.sort(key=lambda group: group.month, reverse=True)

    logger.info("Grouped %d days into %d months", len(days), len(grouped))
    return grouped
