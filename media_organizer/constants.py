"""
File extension constants and shared helpers for media organization.
"""

import logging
from typing import Optional

from rich.console import Console

PROGRAM = "media-organizer"

# Extensions are compared case-sensitively and without the leading dot.
# "JPG" is accepted but "JPEG" is not.
PHOTO_EXTENSIONS = ("jpeg", "jpg", "JPG")
VIDEO_EXTENSIONS = ("mp4",)

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
)

# EXIF date-time value format, e.g. "2019:01:23 14:05:09"
EXIF_DATETIME_FORMAT = "%Y:%m:%d %H:%M:%S"

# Years accepted for destination folders
MIN_YEAR = 1839
MAX_YEAR = 3000

_console: Optional[Console] = None


def get_console() -> Console:
    """Return the shared rich console used for all terminal output."""
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_logger(name: str = PROGRAM) -> logging.Logger:
    """Return the program logger (or a named child logger)."""
    return logging.getLogger(name)
