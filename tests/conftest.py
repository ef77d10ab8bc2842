"""Shared fixtures for flextime tests."""
from datetime import date

import pandas as pd
import pytest

from flextime.utilities.models import TimeEntry, TrackerSettings

HEADERS = ["Project", "Labor Code", "Date", "Input", "Notes"]


@pytest.fixture
def settings():
    return TrackerSettings(
        workday_hours=8.0,
        weekends=frozenset({"Sat", "Sun"}),
        end_date=date(2025, 6, 30),
    )


@pytest.fixture
def today():
    return date(2026, 1, 15)


@pytest.fixture
def make_entries():
    """Build TimeEntry objects from (date, hours, labor_code) tuples."""
    def _make(*rows):
        return [
            TimeEntry(
                id=index,
                project="Apollo",
                labor_code=labor_code,
                date=entry_date,
                hours=hours,
                notes="",
            )
            for index, (entry_date, hours, labor_code) in enumerate(rows)
        ]
    return _make


@pytest.fixture
def write_workbook(tmp_path):
    """Write rows (dicts keyed by header) to an .xlsx file and return its path."""
    def _write(rows, name="timesheet.xlsx", headers=HEADERS):
        path = tmp_path / name
        frame = pd.DataFrame(rows, columns=headers)
        frame.to_excel(path, index=False, sheet_name="Time")
        return path
    return _write


@pytest.fixture
def sample_rows():
    return [
        {"Project": "Apollo", "Labor Code": "DEV", "Date": "2025-05-30", "Input": 9, "Notes": ""},
        {"Project": "Apollo", "Labor Code": "DEV", "Date": "2025-06-02", "Input": 4, "Notes": "am"},
        {"Project": "Gemini", "Labor Code": "DEV", "Date": "2025-06-02", "Input": 6, "Notes": "pm"},
        {"Project": "PTO", "Labor Code": "SMTO Vacation", "Date": "2025-06-03", "Input": 8, "Notes": "beach"},
        {"Project": "Apollo", "Labor Code": "DEV", "Date": "2025-06-07", "Input": 3, "Notes": "weekend"},
        {"Project": "Apollo", "Labor Code": "DEV", "Date": "undefined", "Input": 5, "Notes": "bad"},
        {"Project": "Apollo", "Labor Code": "DEV", "Date": "2014-12-31", "Input": 5, "Notes": "old"},
    ]
