"""Daily flextime aggregation for flextime tracker."""
import logging
from dataclasses import asdict
from datetime import date
from typing import Dict, List, Optional, Sequence, Set

import pandas as pd

from flextime.utilities import config, utils
from flextime.utilities.models import DailySum, TimeEntry, TrackerSettings

logger = logging.getLogger(__name__)


def entries_to_frame(entries: Sequence[TimeEntry]) -> pd.DataFrame:
    """Build a dataframe with one row per time entry, in entry order."""
    if not entries:
        return pd.DataFrame(columns=["id", "project", "labor_code", "date", "hours", "notes"])
    return pd.DataFrame([asdict(entry) for entry in entries])


def _marked_dates(frame: pd.DataFrame, marker: str) -> pd.DataFrame:
    return frame[frame["labor_code"].astype(str).str.contains(marker, regex=False)]


def hours_by_date(frame: pd.DataFrame) -> Dict[date, float]:
    """Total logged hours per calendar day."""
    return frame.groupby("date", sort=True)["hours"].sum().to_dict()


def vacation_hours_by_date(frame: pd.DataFrame) -> Dict[date, float]:
    """Hours of the first vacation entry on each vacation day."""
    vacation = _marked_dates(frame, config.VACATION_MARKER)
    if vacation.empty:
        return {}
    return vacation.groupby("date", sort=False)["hours"].first().to_dict()


def holiday_dates(frame: pd.DataFrame) -> Set[date]:
    return set(_marked_dates(frame, config.HOLIDAY_MARKER)["date"])


def sum_entries_by_day(
    entries: Sequence[TimeEntry],
    settings: TrackerSettings,
    today: Optional[date] = None,
) -> List[DailySum]:
    """
    Collapse time entries into one flextime record per calendar day.

    Every day from the first of the earliest entry's month through the
    settings' end date is considered. Workdays are charged the standard
    workday length; weekend days count logged hours as pure surplus.
    Days failing utils.is_reportable_day are left out.

    Args:
        entries: Validated time entries
        settings: Tracker settings
        today: Current calendar day (defaults to date.today())

    Returns:
        Daily sums in ascending date order
    """
    if not entries:
        return []

    today = today or date.today()
    frame = entries_to_frame(entries)

    raw_hours = hours_by_date(frame)
    vacation_hours = vacation_hours_by_date(frame)
    holidays = holiday_dates(frame)

    start = utils.month_start(min(raw_hours))
    calendar_days = pd.date_range(start, settings.end_date, freq="D")

    result: List[DailySum] = []
    for timestamp in calendar_days:
        day = timestamp.date()
        logged = float(raw_hours.get(day, 0.0))
        if not utils.is_reportable_day(day, logged, settings, today):
            continue

        adjusted = logged if utils.is_weekend(day, settings) else logged - settings.workday_hours
        result.append(DailySum(
            date=day,
            hours=adjusted,
            is_vacation_day=day in vacation_hours,
            vacation_hours=float(vacation_hours.get(day, 0.0)),
            is_holiday=day in holidays,
        ))

    logger.info(
        "Aggregated %d entries into %d days (%s to %s)",
        len(entries),
        len(result),
        start,
        settings.end_date,
    )
    return result
