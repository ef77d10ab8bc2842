"""Main orchestration pipeline for flextime processing."""
import asyncio
import logging
import time
from datetime import date
from pathlib import Path
from typing import List, Optional

from flextime.extractors import excel_reader
from flextime.extractors.excel_reader import SpreadsheetSource
from flextime.transformers import daily_aggregator, entry_normalizer, monthly_aggregator
from flextime.utilities import utils
from flextime.utilities.models import MonthGroup, TrackerSettings

logger = logging.getLogger(__name__)


def build_month_groups(
    rows: List[List[str]],
    settings: TrackerSettings,
    today: Optional[date] = None,
) -> List[MonthGroup]:
    """
    Turn extracted spreadsheet rows into month groups.

    Args:
        rows: Rows from excel_reader, header first
        settings: Tracker settings
        today: Current calendar day (defaults to date.today())

    Returns:
        Month groups, newest month first
    """
    records = excel_reader.rows_to_records(rows)
    parsed = entry_normalizer.normalize_entries(records)

    days = daily_aggregator.sum_entries_by_day(parsed.entries, settings, today=today)
    groups = monthly_aggregator.group_entries_by_month_desc(days, settings)

    logger.info(
        "Built %d month groups from %d rows (%d rejected)",
        len(groups),
        parsed.rows_read,
        parsed.rows_rejected,
    )
    return groups


def parse_time_data(
    source: SpreadsheetSource,
    settings: Optional[TrackerSettings] = None,
    today: Optional[date] = None,
) -> List[MonthGroup]:
    """
    Run the complete flextime pipeline on one spreadsheet.

    Args:
        source: File path, raw file bytes or a binary file object
        settings: Tracker settings (uses config defaults if not provided)
        today: Current calendar day (defaults to date.today())

    Returns:
        Month groups, newest month first

    Raises:
        UnreadableFileError: If the spreadsheet cannot be read
    """
    settings = settings or utils.create_settings()
    start_time = time.time()

    if isinstance(source, (str, Path)):
        rows = excel_reader.read_spreadsheet_file(source)
    else:
        rows = excel_reader.read_spreadsheet(source)

    groups = build_month_groups(rows, settings, today=today)

    logger.info("Pipeline complete in %.2f seconds", time.time() - start_time)
    return groups


async def parse_time_data_async(
    source: SpreadsheetSource,
    settings: Optional[TrackerSettings] = None,
    today: Optional[date] = None,
) -> List[MonthGroup]:
    """
    Async variant of parse_time_data; the file read runs in a worker thread.

    Raises:
        UnreadableFileError: If the spreadsheet cannot be read
    """
    settings = settings or utils.create_settings()

    if isinstance(source, (str, Path)):
        rows = await asyncio.to_thread(excel_reader.read_spreadsheet_file, source)
    else:
        rows = await asyncio.to_thread(excel_reader.read_spreadsheet, source)

    return build_month_groups(rows, settings, today=today)
