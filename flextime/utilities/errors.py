"""Exception types for flextime tracker."""
from typing import Optional


class FlextimeError(Exception):
    """Base class for all flextime errors."""


class UnreadableFileError(FlextimeError):
    """The uploaded file could not be decoded as a spreadsheet."""


class RowRejected(FlextimeError):
    """A single spreadsheet row was dropped during normalization."""

    def __init__(self, reason: str, row_number: Optional[int] = None):
        self.reason = reason
        self.row_number = row_number
        if row_number is None:
            super().__init__(reason)
        else:
            super().__init__(f"Row {row_number}: {reason}")


class NumericParseAnomaly(RowRejected):
    """The hours value of a row is not a number."""
