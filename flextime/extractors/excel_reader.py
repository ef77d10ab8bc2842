"""Excel file reading for flextime tracker."""
import io
import logging
from pathlib import Path
from typing import BinaryIO, Dict, List, Sequence, Union

import pandas as pd

from flextime.utilities import config
from flextime.utilities.errors import UnreadableFileError

logger = logging.getLogger(__name__)

SpreadsheetSource = Union[str, Path, bytes, bytearray, BinaryIO]


def is_spreadsheet_file(name: str | Path) -> bool:
    """Check whether a file name carries a supported spreadsheet extension."""
    return Path(name).suffix.lower() in config.SPREADSHEET_EXTENSIONS


def read_spreadsheet_file(file_path: str | Path) -> List[List[str]]:
    """
    Read the first worksheet of a spreadsheet on disk.

    Args:
        file_path: Path to an .xls or .xlsx file

    Returns:
        Rows of string cells, header row first

    Raises:
        UnreadableFileError: If the file type is unsupported or unreadable
    """
    path = Path(file_path)
    if not is_spreadsheet_file(path):
        raise UnreadableFileError(
            f"File {path.name} is not a spreadsheet "
            f"(expected {', '.join(sorted(config.SPREADSHEET_EXTENSIONS))})"
        )
    return read_spreadsheet(path)


def read_spreadsheet(source: SpreadsheetSource) -> List[List[str]]:
    """
    Read the first worksheet of a spreadsheet into rows of strings.

    Empty cells become the MISSING_CELL placeholder and fully blank rows
    are skipped.

    Args:
        source: File path, raw file bytes or a binary file object

    Returns:
        Rows of string cells, header row first

    Raises:
        UnreadableFileError: If the data cannot be parsed as a spreadsheet
    """
    if isinstance(source, (bytes, bytearray)):
        source = io.BytesIO(source)

    try:
        workbook = pd.ExcelFile(source)
    except Exception as exc:
        raise UnreadableFileError(f"File could not be opened as a spreadsheet: {exc}") from exc

    if not workbook.sheet_names:
        raise UnreadableFileError("Spreadsheet contains no sheets")

    sheet_name = workbook.sheet_names[0]
    try:
        frame = workbook.parse(sheet_name, header=None, dtype=str)
    except Exception as exc:
        raise UnreadableFileError(f"Sheet '{sheet_name}' could not be read: {exc}") from exc

    frame = frame.dropna(how="all")
    if frame.empty:
        logger.warning("Sheet '%s' is empty", sheet_name)
        return []

    frame = frame.astype(object).where(frame.notna(), config.MISSING_CELL)
    rows = [[str(value).strip() for value in row] for row in frame.values.tolist()]

    logger.debug("Read %d rows from sheet '%s'", len(rows), sheet_name)
    return rows


def rows_to_records(rows: Sequence[Sequence[str]]) -> List[Dict[str, str]]:
    """
    Map data rows to dictionaries keyed by the header row.

    Args:
        rows: Rows as returned by read_spreadsheet

    Returns:
        One dictionary per data row
    """
    if not rows:
        return []

    headers = list(rows[0])
    missing_required = [
        column for column in config.REQUIRED_CORE_COLUMNS
        if column not in headers
    ]
    if missing_required:
        logger.warning("Sheet is missing required columns: %s", ", ".join(missing_required))

    records: List[Dict[str, str]] = []
    for values in rows[1:]:
        records.append({
            header: str(values[index]) if index < len(values) else config.MISSING_CELL
            for index, header in enumerate(headers)
        })
    return records
