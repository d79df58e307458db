"""
media-organizer - Move photos and videos into date-based folders.

Photos are placed under ``<year>/<MM> - <MonthName>/`` using their EXIF
capture date or, failing that, a date in the file name. Videos are placed
under ``<year>/`` using the date in the file name.
"""

__version__ = "0.2.0"


# Public API
from .classifier import MediaKind, classify_media
from .cli import main
from .config import Config, ConfigError, Settings, load_settings
from .core import FileOutcome, MediaOrganizer, OutcomeStatus
from .dates import ResolvedDate, date_from_filename, date_from_metadata
from .file_operations import DestinationConflictError, FileOperations, find_source_files
from .paths import InvalidMonthError, InvalidYearError, build_destination_path
from .resolver import ClassificationOutcome, ClassificationStatus, classify_file, resolve_date

__all__ = [
    "main", "MediaKind", "classify_media", "Config", "ConfigError", "Settings",
    "load_settings", "FileOutcome", "MediaOrganizer", "OutcomeStatus", "ResolvedDate",
    "date_from_filename", "date_from_metadata", "DestinationConflictError",
    "FileOperations", "find_source_files", "InvalidMonthError", "InvalidYearError", "build_destination_path",
    "ClassificationOutcome", "ClassificationStatus", "classify_file", "resolve_date",
]
