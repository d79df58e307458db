"""
Date resolution per media kind.

Photos prefer the EXIF capture date over the file name, since files are
often renamed but the camera clock is not. Videos only use the file name.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from .classifier import MediaKind, classify_media
from .constants import get_logger
from .dates import ResolvedDate, date_from_filename, date_from_metadata


logger = get_logger()


class ClassificationStatus(Enum):
    PHOTO = "photo"
    VIDEO = "video"
    SKIPPED_UNSUPPORTED = "skipped_unsupported"
    DATE_UNRESOLVED = "date_unresolved"


@dataclass(frozen=True)
class ClassificationOutcome:
    """Media kind of a file together with its resolved date, if any."""
    kind: MediaKind
    date: Optional[ResolvedDate] = None

    @property
    def status(self) -> ClassificationStatus:
        if self.kind is MediaKind.UNSUPPORTED:
            return ClassificationStatus.SKIPPED_UNSUPPORTED
        if self.date is None:
            return ClassificationStatus.DATE_UNRESOLVED
        if self.kind is MediaKind.PHOTO:
            return ClassificationStatus.PHOTO
        return ClassificationStatus.VIDEO


def resolve_date(kind: MediaKind, path: Union[str, Path],
                 content: Optional[bytes] = None) -> Optional[ResolvedDate]:
    """Resolve the placement date of a file of the given kind.

    ``content`` may carry the file's bytes when they are already in memory;
    otherwise the metadata is read from ``path``.
    """
    path = Path(path)

    if kind is MediaKind.PHOTO:
        resolved = date_from_metadata(content if content is not None else path)
        if resolved is not None:
            logger.debug(f"Date from EXIF for {path.name}: {resolved}")
            return resolved
        resolved = date_from_filename(path.name, MediaKind.PHOTO)
        if resolved is not None:
            logger.debug(f"Date from file name for {path.name}: {resolved}")
        return resolved

    if kind is MediaKind.VIDEO:
        return date_from_filename(path.name, MediaKind.VIDEO)

    return None


def classify_file(path: Union[str, Path], content: Optional[bytes] = None) -> ClassificationOutcome:
    """Classify a file and resolve its date in one step."""
    kind = classify_media(path)
    if kind is MediaKind.UNSUPPORTED:
        return ClassificationOutcome(kind)
    return ClassificationOutcome(kind, resolve_date(kind, path, content))
