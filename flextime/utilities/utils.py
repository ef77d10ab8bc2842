"""Utility functions for flextime tracker."""
from datetime import date, datetime
from typing import Iterable, Optional

from flextime.utilities import config
from flextime.utilities.models import TrackerSettings


def create_settings(
    workday_hours: Optional[float] = None,
    weekends: Optional[Iterable[str]] = None,
    end_date: Optional[date] = None,
) -> TrackerSettings:
    """
    Create tracker settings, falling back to configured defaults.

    Args:
        workday_hours: Length of a standard workday
        weekends: Abbreviated weekday labels treated as weekend days
        end_date: Last day of the report (defaults to today)

    Returns:
        TrackerSettings instance
    """
    today = datetime.now().date()

    labels = config.DEFAULT_WEEKENDS if weekends is None else weekends
    unknown = sorted(set(labels) - set(config.WEEKDAY_LABELS))
    if unknown:
        raise ValueError(
            f"Unknown weekday label(s): {', '.join(unknown)}. "
            f"Use {', '.join(config.WEEKDAY_LABELS)}"
        )

    return TrackerSettings(
        workday_hours=config.DEFAULT_WORKDAY_HOURS if workday_hours is None else float(workday_hours),
        weekends=frozenset(labels),
        end_date=end_date or today,
    )


def month_start(day: date) -> date:
    """Return the first day of the month containing day."""
    return day.replace(day=1)


def weekday_label(day: date) -> str:
    """Abbreviated weekday name, e.g. 'Mon'."""
    return config.WEEKDAY_LABELS[day.weekday()]


def is_weekend(day: date, settings: TrackerSettings) -> bool:
    return weekday_label(day) in settings.weekends


def is_reportable_day(
    day: date,
    raw_hours: float,
    settings: TrackerSettings,
    today: date,
) -> bool:
    """
    Decide whether a calendar day belongs in the report.

    A day is reported when it lies within the settings' range and either
    is a past workday or has hours logged against it.

    Args:
        day: Calendar day
        raw_hours: Hours logged on that day before workday adjustment
        settings: Tracker settings
        today: Current calendar day

    Returns:
        True if the day should be reported
    """
    if not settings.covers(day):
        return False
    past_workday = not is_weekend(day, settings) and day < today
    return past_workday or raw_hours != 0
