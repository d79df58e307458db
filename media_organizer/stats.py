"""
Statistics tracking for media organization runs.
"""

from typing import Dict

from .classifier import MediaKind


class StatsManager:
    """Encapsulates per-run counters, one increment per processed file."""

    def __init__(self):
        self._stats = {
            'photos': 0,
            'videos': 0,
            'skipped': 0,
            'date_unresolved': 0,
            'invalid_month': 0,
            'invalid_year': 0,
            'conflicts': 0,
            'failed': 0,
        }

    def increment_moved(self, kind: MediaKind) -> None:
        """Count a successfully moved photo or video."""
        if kind is MediaKind.VIDEO:
            self._stats['videos'] += 1
        else:
            self._stats['photos'] += 1

    def increment(self, key: str) -> None:
        """Increment a named counter."""
        self._stats[key] += 1

    def get_stats(self) -> Dict[str, int]:
        """Get a copy of current statistics."""
        return self._stats.copy()

    def get_total_moved(self) -> int:
        return self._stats['photos'] + self._stats['videos']

    def get_total_failures(self) -> int:
        """Files that were supported but could not be organized."""
        return (self._stats['date_unresolved'] + self._stats['invalid_month'] +
                self._stats['invalid_year'] +
                self._stats['conflicts'] + self._stats['failed'])

    def has_errors(self) -> bool:
        return self.get_total_failures() > 0

    # Individual stat getters for reporting
    def get_photos(self) -> int:
        return self._stats['photos']

    def get_videos(self) -> int:
        return self._stats['videos']

    def get_skipped(self) -> int:
        return self._stats['skipped']

    def get_date_unresolved(self) -> int:
        return self._stats['date_unresolved']

    def get_invalid_month(self) -> int:
        return self._stats['invalid_month']

    def get_invalid_year(self) -> int:
        return self._stats['invalid_year']

    def get_conflicts(self) -> int:
        return self._stats['conflicts']

    def get_failed(self) -> int:
        return self._stats['failed']
