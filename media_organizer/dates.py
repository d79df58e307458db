"""Date extraction from file names and embedded EXIF metadata."""

import re
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple, Union

import piexif

from .classifier import MediaKind
from .constants import EXIF_DATETIME_FORMAT, get_logger


logger = get_logger()

# WhatsApp style (IMG-20200407-WA0004.jpg) and camera style (IMG_20200407_123456.jpg)
PHOTO_FILENAME_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^IMG-(\d{4})(\d{2})(\d{2})-WA\d+\..*$"),
    re.compile(r"^IMG_(\d{4})(\d{2})(\d{2})_\d+\..*$"),
)

# VID-YYYYMMDD-whatever.mp4 where "VID-" is optional and "-" may be "_"
VIDEO_FILENAME_PATTERNS: Tuple[re.Pattern, ...] = (
    re.compile(r"^(?:VID[-_])?(\d{4})(\d{2})(\d{2})[_-].+\.mp4$"),
)


@dataclass(frozen=True)
class ResolvedDate:
    """Calendar date governing where a file is placed."""
    year: int
    month: int
    day: int


def date_from_filename(file_name: str, kind: MediaKind) -> Optional[ResolvedDate]:
    """Extract a date from a file name using the grammar for the given media kind.

    Values are taken as written: a month of 13 is returned as 13. Returns None
    when the name does not match.
    """
    if kind is MediaKind.PHOTO:
        patterns = PHOTO_FILENAME_PATTERNS
    elif kind is MediaKind.VIDEO:
        patterns = VIDEO_FILENAME_PATTERNS
    else:
        return None

    for pattern in patterns:
        match = pattern.match(file_name)
        if match:
            year, month, day = (int(group) for group in match.groups())
            return ResolvedDate(year, month, day)

    return None


def parse_exif_datetime(value: str) -> Optional[ResolvedDate]:
    """Parse an EXIF 'YYYY:MM:DD HH:MM:SS' value, rejecting impossible dates."""
    try:
        parsed = datetime.strptime(value.strip(), EXIF_DATETIME_FORMAT)
    except ValueError:
        return None
    return ResolvedDate(parsed.year, parsed.month, parsed.day)


def date_from_metadata(source: Union[str, Path, bytes]) -> Optional[ResolvedDate]:
    """Read the EXIF DateTimeOriginal of a JPEG given its path or raw bytes.

    Missing or malformed metadata is an ordinary condition here, so every
    failure while reading or parsing becomes None.
    """
    if isinstance(source, Path):
        source = str(source)

    try:
        exif_data = piexif.load(source)
        raw = exif_data.get("Exif", {}).get(piexif.ExifIFD.DateTimeOriginal)
        if not raw:
            logger.debug(f"No DateTimeOriginal tag in {_describe(source)}")
            return None

        if isinstance(raw, bytes):
            raw = raw.rstrip(b"\x00").decode("ascii")
        resolved = parse_exif_datetime(raw)
        if resolved is None:
            logger.debug(f"Malformed DateTimeOriginal {raw!r} in {_describe(source)}")
        return resolved

    except Exception as e:
        logger.debug(f"Could not read EXIF metadata from {_describe(source)}: {e}")
        return None


def _describe(source: Union[str, bytes]) -> str:
    if isinstance(source, bytes):
        return f"<{len(source)} bytes>"
    return source
