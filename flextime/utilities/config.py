"""Configuration constants and settings for flextime tracker."""
import os
from typing import FrozenSet, List, Set

# ============================================================================
# SCHEDULE DEFAULTS
# ============================================================================

DEFAULT_WORKDAY_HOURS = float(os.getenv("FLEXTIME_WORKDAY_HOURS", "8"))

DEFAULT_WEEKENDS: FrozenSet[str] = frozenset(
    label.strip()
    for label in os.getenv("FLEXTIME_WEEKENDS", "Sat,Sun").split(",")
    if label.strip()
)

# Abbreviated labels in date.weekday() order
WEEKDAY_LABELS: List[str] = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]

# ============================================================================
# FILE SYSTEM CONFIGURATION
# ============================================================================

SPREADSHEET_EXTENSIONS: Set[str] = {".xls", ".xlsx"}

# ============================================================================
# COLUMN DEFINITIONS
# ============================================================================

DATE_COLUMN = "Date"
HOURS_COLUMN = "Input"
PROJECT_COLUMN = "Project"
LABOR_CODE_COLUMN = "Labor Code"
NOTES_COLUMN = "Notes"

REQUIRED_CORE_COLUMNS = [DATE_COLUMN, HOURS_COLUMN]

# Placeholder written for cells the sheet leaves empty
MISSING_CELL = "undefined"

# ============================================================================
# BUSINESS RULES
# ============================================================================

REJECTED_DATE_VALUES: Set[str] = {"", "undefined", "null"}

MIN_ENTRY_YEAR = 2015
MAX_ENTRY_YEAR = 2100

VACATION_MARKER = "SMTO"
HOLIDAY_MARKER = "Holiday"

# Number of rejected rows logged individually before summarising
REJECTED_SAMPLE_SIZE = 3
