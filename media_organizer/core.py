"""
Core media organizing pipeline.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, List, Optional

from rich.logging import RichHandler
from rich.progress import Progress, TaskID
from rich.table import Table

from .classifier import MediaKind, classify_media
from .constants import get_console, get_logger
from .file_operations import DestinationConflictError, FileOperations, find_source_files
from .paths import InvalidMonthError, InvalidYearError, build_destination_path
from .resolver import classify_file
from .stats import StatsManager


class OutcomeStatus(Enum):
    MOVED = "moved"
    SKIPPED = "skipped"
    DATE_UNRESOLVED = "date_unresolved"
    INVALID_MONTH = "invalid_month"
    INVALID_YEAR = "invalid_year"
    DESTINATION_CONFLICT = "destination_conflict"
    FAILED = "failed"


@dataclass
class FileOutcome:
    """What happened to one source file."""
    source: Path
    status: OutcomeStatus
    kind: MediaKind = MediaKind.UNSUPPORTED
    destination: Optional[Path] = None
    error: Optional[str] = None

    @property
    def is_failure(self) -> bool:
        return self.status not in (OutcomeStatus.MOVED, OutcomeStatus.SKIPPED)


_STATS_KEYS = {
    OutcomeStatus.SKIPPED: 'skipped',
    OutcomeStatus.DATE_UNRESOLVED: 'date_unresolved',
    OutcomeStatus.INVALID_MONTH: 'invalid_month',
    OutcomeStatus.INVALID_YEAR: 'invalid_year',
    OutcomeStatus.DESTINATION_CONFLICT: 'conflicts',
    OutcomeStatus.FAILED: 'failed',
}


def setup_logging(verbose: bool = False) -> None:
    """Route the program logger through rich; WARNING and up unless verbose."""
    console_handler = RichHandler(console=get_console(), rich_tracebacks=True,
                                  show_path=False)
    console_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)
    console_handler.setFormatter(logging.Formatter("%(message)s"))

    logger = get_logger()
    logger.setLevel(logging.DEBUG)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    logger.addHandler(console_handler)


class MediaOrganizer:
    """Moves photos and videos into date-based folders under their destination roots.

    A destination of None disables organizing that kind of media. Every file
    yields exactly one FileOutcome; failures on one file never stop the batch.
    """

    def __init__(self, photos_dst: Optional[Path] = None, videos_dst: Optional[Path] = None,
                 dry_run: bool = False):
        self.photos_dst = photos_dst
        self.videos_dst = videos_dst
        self.dry_run = dry_run
        self.stats_manager = StatsManager()
        self.console = get_console()
        self.logger = get_logger()
        self.file_ops = FileOperations(dry_run=dry_run)

    def destination_root(self, kind: MediaKind) -> Optional[Path]:
        if kind is MediaKind.PHOTO:
            return self.photos_dst
        if kind is MediaKind.VIDEO:
            return self.videos_dst
        return None

    def process_file(self, file_path: Path) -> FileOutcome:
        """Classify, resolve, and move a single file."""
        classification = classify_file(file_path)
        kind = classification.kind

        if kind is MediaKind.UNSUPPORTED:
            self.logger.debug(f"Skipping unsupported file: {file_path}")
            return FileOutcome(file_path, OutcomeStatus.SKIPPED, kind)

        root = self.destination_root(kind)
        if root is None:
            self.logger.debug(f"Skipping {file_path}: no {kind.value} destination configured")
            return FileOutcome(file_path, OutcomeStatus.SKIPPED, kind)

        if classification.date is None:
            return self._failure(file_path, OutcomeStatus.DATE_UNRESOLVED, kind,
                                 error=f"could not resolve a date for {kind.value}")

        try:
            dest_path = root / build_destination_path(kind, classification.date, file_path.name)
        except InvalidMonthError as e:
            return self._failure(file_path, OutcomeStatus.INVALID_MONTH, kind, error=str(e))
        except InvalidYearError as e:
            return self._failure(file_path, OutcomeStatus.INVALID_YEAR, kind, error=str(e))

        try:
            self.file_ops.move_file_safely(file_path, dest_path)
        except DestinationConflictError as e:
            return self._failure(file_path, OutcomeStatus.DESTINATION_CONFLICT, kind,
                                 destination=dest_path, error=str(e))
        except OSError as e:
            return self._failure(file_path, OutcomeStatus.FAILED, kind,
                                 destination=dest_path, error=str(e))

        return FileOutcome(file_path, OutcomeStatus.MOVED, kind, destination=dest_path)

    def _failure(self, file_path: Path, status: OutcomeStatus, kind: MediaKind,
                 destination: Optional[Path] = None, error: Optional[str] = None) -> FileOutcome:
        self.logger.error(f"Failed to organize {file_path}: {error}")
        return FileOutcome(file_path, status, kind, destination=destination, error=error)

    def record_outcome(self, outcome: FileOutcome) -> None:
        if outcome.status is OutcomeStatus.MOVED:
            self.stats_manager.increment_moved(outcome.kind)
        else:
            self.stats_manager.increment(_STATS_KEYS[outcome.status])

    def organize(self, files: Iterable[Path], progress: Optional[Progress] = None,
                 task: Optional[TaskID] = None) -> List[FileOutcome]:
        """Process files one at a time, in the order given.

        When a rich progress bar and task are given, the task shows the file
        being processed and advances once per file.
        """
        track = progress is not None and task is not None
        outcomes = []
        for file_path in files:
            if track:
                progress.update(task, description=f"Processing: {file_path.name}")
            try:
                outcome = self.process_file(file_path)
            except Exception as e:
                outcome = self._failure(file_path, OutcomeStatus.FAILED,
                                        classify_media(file_path), error=str(e))
            self.record_outcome(outcome)
            outcomes.append(outcome)
            if track:
                progress.advance(task)
        return outcomes

    def run(self, source: Path) -> List[FileOutcome]:
        """Organize every file under source with a progress bar."""
        files = list(find_source_files(source))
        self.logger.info(f"Starting to process {len(files)} files from {source}")

        with Progress(console=self.console) as progress:
            task = progress.add_task("Processing files...", total=len(files))
            return self.organize(files, progress, task)

    def print_summary(self) -> None:
        """Print processing summary."""
        title = "Processing Summary (dry run)" if self.dry_run else "Processing Summary"
        table = Table(title=title)
        table.add_column("Category", style="cyan")
        table.add_column("Count", style="green")

        table.add_row("Photos", str(self.stats_manager.get_photos()))
        table.add_row("Videos", str(self.stats_manager.get_videos()))
        table.add_row("Skipped", str(self.stats_manager.get_skipped()))
        table.add_row("Date Unresolved", str(self.stats_manager.get_date_unresolved()))
        table.add_row("Invalid Month", str(self.stats_manager.get_invalid_month()))
        table.add_row("Invalid Year", str(self.stats_manager.get_invalid_year()))
        table.add_row("Destination Conflicts", str(self.stats_manager.get_conflicts()))
        table.add_row("Failed Moves", str(self.stats_manager.get_failed()))

        self.console.print(table)

        if self.stats_manager.has_errors():
            self.console.print(f"\n[red]{self.stats_manager.get_total_failures()} files "
                               f"could not be organized and were left in place[/red]")
