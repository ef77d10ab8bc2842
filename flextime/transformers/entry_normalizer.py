"""Conversion of raw spreadsheet records into validated time entries."""
import logging
import math
from datetime import date
from typing import Dict, List, Mapping, Sequence

import pandas as pd

from flextime.utilities import config
from flextime.utilities.errors import NumericParseAnomaly, RowRejected
from flextime.utilities.models import ParseResult, TimeEntry

logger = logging.getLogger(__name__)


def parse_entry_date(value: str, row_number: int) -> date:
    """
    Parse the Date cell of a row.

    Raises:
        RowRejected: If the date is missing, unparseable or out of range
    """
    text = (value or "").strip()
    if text.lower() in config.REJECTED_DATE_VALUES:
        raise RowRejected("missing date", row_number)

    parsed = pd.to_datetime(text, errors="coerce")
    if pd.isna(parsed):
        raise RowRejected(f"invalid date '{text}'", row_number)

    if not config.MIN_ENTRY_YEAR <= parsed.year <= config.MAX_ENTRY_YEAR:
        raise RowRejected(
            f"date {parsed.date()} outside {config.MIN_ENTRY_YEAR}-{config.MAX_ENTRY_YEAR}",
            row_number,
        )
    return parsed.date()


def parse_entry_hours(value: str, row_number: int) -> float:
    """
    Parse the Input cell of a row as a number of hours.

    Raises:
        NumericParseAnomaly: If the value is not a finite number
    """
    hours = pd.to_numeric((value or "").strip(), errors="coerce")
    if pd.isna(hours) or not math.isfinite(float(hours)):
        raise NumericParseAnomaly(f"invalid hours '{value}'", row_number)
    return float(hours)


def _text(record: Mapping[str, str], column: str) -> str:
    return str(record.get(column, config.MISSING_CELL))


def normalize_entries(records: Sequence[Mapping[str, str]]) -> ParseResult:
    """
    Build time entries from header-keyed records, dropping invalid rows.

    Rejected rows are counted and reported but never stop processing.
    Surviving entries keep their sheet order and are numbered from 0.

    Args:
        records: Rows as produced by excel_reader.rows_to_records

    Returns:
        ParseResult with entries and row diagnostics
    """
    result = ParseResult(rows_read=len(records))
    valid_rows: List[Dict[str, object]] = []
    rejected: List[RowRejected] = []

    for index, record in enumerate(records):
        # Header occupies the first sheet row
        row_number = index + 2
        try:
            entry_date = parse_entry_date(_text(record, config.DATE_COLUMN), row_number)
            hours = parse_entry_hours(_text(record, config.HOURS_COLUMN), row_number)
        except RowRejected as exc:
            rejected.append(exc)
            continue

        valid_rows.append({
            "project": _text(record, config.PROJECT_COLUMN),
            "labor_code": _text(record, config.LABOR_CODE_COLUMN),
            "date": entry_date,
            "hours": hours,
            "notes": _text(record, config.NOTES_COLUMN),
        })

    result.entries = [TimeEntry(id=position, **row) for position, row in enumerate(valid_rows)]
    result.rows_rejected = len(rejected)

    for exc in rejected[:config.REJECTED_SAMPLE_SIZE]:
        logger.warning("Rejected row: %s", exc)
        result.errors.append(str(exc))
    if len(rejected) > config.REJECTED_SAMPLE_SIZE:
        remaining = len(rejected) - config.REJECTED_SAMPLE_SIZE
        logger.warning("%d more rows rejected", remaining)
        result.errors.append(f"{remaining} more rows were rejected")

    logger.info(
        "Normalized %d rows: %d entries kept, %d rejected",
        result.rows_read,
        len(result.entries),
        result.rows_rejected,
    )
    return result
