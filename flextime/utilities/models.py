"""Data models for flextime tracker."""
from dataclasses import asdict, dataclass, field, replace
from datetime import date
from typing import Any, Dict, FrozenSet, List, Tuple

from flextime.utilities import config


@dataclass(frozen=True)
class TrackerSettings:
    """Schedule settings the aggregators read; owned by the caller."""
    workday_hours: float = config.DEFAULT_WORKDAY_HOURS
    weekends: FrozenSet[str] = config.DEFAULT_WEEKENDS
    end_date: date = field(default_factory=date.today)

    def covers(self, day: date) -> bool:
        """True if the day falls on or before the report end date."""
        return day <= self.end_date

    def with_end_date(self, end_date: date) -> "TrackerSettings":
        return replace(self, end_date=end_date)

    def reset_end_date(self) -> "TrackerSettings":
        return replace(self, end_date=date.today())


@dataclass(frozen=True)
class TimeEntry:
    """One validated spreadsheet row."""
    id: int
    project: str
    labor_code: str
    date: date
    hours: float
    notes: str


@dataclass(frozen=True)
class DailySum:
    """Flex delta and day classification for one calendar day."""
    date: date
    hours: float
    is_vacation_day: bool = False
    vacation_hours: float = 0.0
    is_holiday: bool = False

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["date"] = self.date.isoformat()
        return data


@dataclass(frozen=True)
class MonthlySum:
    """Flextime and vacation totals for one calendar month."""
    month: date
    flextime_accrued: float = 0.0
    flextime_used: float = 0.0
    flextime_ytd: float = 0.0
    vacation_time_used: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["month"] = self.month.isoformat()
        return data


@dataclass(frozen=True)
class MonthGroup:
    """Month summary bundled with its days, newest day first."""
    month: date
    summary: MonthlySum
    entries: Tuple[DailySum, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "month": self.month.isoformat(),
            "summary": self.summary.to_dict(),
            "entries": [entry.to_dict() for entry in self.entries],
        }


@dataclass
class ParseResult:
    """Entries that survived normalization plus row diagnostics."""
    entries: List[TimeEntry] = field(default_factory=list)
    rows_read: int = 0
    rows_rejected: int = 0
    errors: List[str] = field(default_factory=list)
