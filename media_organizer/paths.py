"""
Destination path construction from media kind and resolved date.
"""

from pathlib import Path

from .classifier import MediaKind
from .constants import MAX_YEAR, MIN_YEAR, MONTH_NAMES
from .dates import ResolvedDate


class InvalidMonthError(ValueError):
    """Raised when a month outside 1-12 reaches path construction."""

    def __init__(self, month: int):
        super().__init__(f"invalid month, should be between 1 and 12 got {month}")
        self.month = month


class InvalidYearError(ValueError):
    """Raised when a year outside the supported range reaches path construction."""

    def __init__(self, year: int):
        super().__init__(f"invalid year, should be between {MIN_YEAR} and {MAX_YEAR} got {year}")
        self.year = year


def month_dirname(month: int) -> str:
    """Return the month folder name, e.g. 4 -> '04 - April'."""
    if not 1 <= month <= 12:
        raise InvalidMonthError(month)
    return f"{month:02d} - {MONTH_NAMES[month - 1]}"


def build_destination_path(kind: MediaKind, date: ResolvedDate, file_name: str) -> Path:
    """Build the path of a file relative to the destination root of its kind.

    Photos go to ``<year>/<MM> - <MonthName>/<file_name>``, videos to
    ``<year>/<file_name>``.
    """
    if not MIN_YEAR <= date.year <= MAX_YEAR:
        raise InvalidYearError(date.year)
    year = str(date.year)

    if kind is MediaKind.PHOTO:
        return Path(year) / month_dirname(date.month) / file_name
    if kind is MediaKind.VIDEO:
        return Path(year) / file_name

    raise ValueError(f"no destination layout for {kind.value} files")
