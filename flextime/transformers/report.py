"""Plain-text and JSON rendering of month groups."""
import json
from typing import List, Sequence

from flextime.utilities import utils
from flextime.utilities.models import DailySum, MonthGroup


def format_number(value: float) -> str:
    """Format hours without trailing zeros, e.g. 8.0 -> '8', 7.50 -> '7.5'."""
    return ("%.2f" % value).rstrip("0").rstrip(".")


def format_hours(value: float, signed: bool = False) -> str:
    """
    Render an hour count with a pluralised unit.

    Args:
        value: Number of hours
        signed: If True, prefix non-negative values with '+'

    Returns:
        Text such as '+3 hours' or '-1 hour'
    """
    text = format_number(value)
    if text == "-0":
        text = "0"
    if signed and not text.startswith("-"):
        text = f"+{text}"
    unit = "hour" if abs(value) == 1 else "hours"
    return f"{text} {unit}"


def _day_line(day: DailySum) -> str:
    flags = []
    if day.is_holiday:
        flags.append("holiday")
    if day.is_vacation_day:
        flags.append(f"vacation {format_hours(day.vacation_hours)}")
    suffix = f"  [{', '.join(flags)}]" if flags else ""
    return f"  {day.date.isoformat()} {utils.weekday_label(day.date)}  {format_hours(day.hours, signed=True)}{suffix}"


def render_month_groups(groups: Sequence[MonthGroup]) -> str:
    """Render month groups as a plain-text report."""
    lines: List[str] = []
    for group in groups:
        summary = group.summary
        lines.append(group.month.strftime("%B %Y"))
        lines.append(f"  Flextime YTD:  {format_hours(summary.flextime_ytd)}")
        lines.append(f"  Accrued:       {format_hours(summary.flextime_accrued, signed=True)}")
        lines.append(f"  Used:          -{format_hours(summary.flextime_used)}")
        lines.append(f"  Vacation used: {format_hours(summary.vacation_time_used)}")
        lines.extend(_day_line(day) for day in group.entries)
        lines.append("")
    return "\n".join(lines)


def groups_to_json(groups: Sequence[MonthGroup], indent: int = 2) -> str:
    return json.dumps([group.to_dict() for group in groups], indent=indent)
