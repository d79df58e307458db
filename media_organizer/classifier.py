"""
Media kind detection from file extensions.
"""

from enum import Enum
from pathlib import Path
from typing import Union

from .constants import PHOTO_EXTENSIONS, VIDEO_EXTENSIONS


class MediaKind(Enum):
    PHOTO = "photo"
    VIDEO = "video"
    UNSUPPORTED = "unsupported"


def get_extension(path: Union[str, Path]) -> str:
    """Return the extension of a file name without the leading dot ('' if none)."""
    return Path(path).suffix[1:]


def classify_media(path: Union[str, Path]) -> MediaKind:
    """Determine the media kind of a file from its extension alone."""
    ext = get_extension(path)
    if not ext:
        return MediaKind.UNSUPPORTED
    if ext in PHOTO_EXTENSIONS:
        return MediaKind.PHOTO
    if ext in VIDEO_EXTENSIONS:
        return MediaKind.VIDEO
    return MediaKind.UNSUPPORTED
