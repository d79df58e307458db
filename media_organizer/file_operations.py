"""
Source tree traversal and file moves for media organization.
"""

import shutil
from pathlib import Path
from typing import Iterator, Set

from .constants import get_logger


class DestinationConflictError(FileExistsError):
    """Raised when the destination of a move is already taken."""

    def __init__(self, dest: Path):
        super().__init__(f"a file with the same name already exists in the destination path: {dest}")
        self.dest = dest


def find_source_files(source: Path) -> Iterator[Path]:
    """Yield every regular file under source in sorted order, skipping symlinks."""
    for file_path in sorted(source.rglob("*")):
        if file_path.is_symlink() or not file_path.is_file():
            continue
        # Files under a symlinked directory are not ours to move
        if any((source / parent).is_symlink()
               for parent in file_path.relative_to(source).parents
               if parent != Path(".")):
            continue
        yield file_path


class FileOperations:
    """Moves files into the destination trees, with dry-run support."""

    def __init__(self, dry_run: bool = False):
        self.dry_run = dry_run
        self.logger = get_logger()
        # Destinations claimed by earlier dry-run moves in this run
        self.planned: Set[Path] = set()

    def move_file_safely(self, source: Path, dest: Path) -> None:
        """Move source to dest, refusing to overwrite an existing file.

        Raises DestinationConflictError when dest exists and OSError when the
        move itself fails. In dry-run mode only the conflict check runs, and
        destinations planned earlier in the run count as taken.
        """
        if dest in self.planned or dest.exists():
            raise DestinationConflictError(dest)

        if self.dry_run:
            self.planned.add(dest)
            self.logger.info(f"[dry-run] {source} -> {dest}")
            return

        self.ensure_directory(dest.parent)
        shutil.move(str(source), str(dest))

        # Verify the operation
        if not dest.exists():
            raise FileNotFoundError(f"File not found after move: {dest}")
        if source.exists():
            raise FileExistsError(f"Source file still exists after move: {source}")

        self.logger.info(f"{source} -> {dest}")

    def ensure_directory(self, directory: Path) -> None:
        """Create directory and parents if needed, with dry-run support."""
        if not self.dry_run and not directory.exists():
            directory.mkdir(parents=True, exist_ok=True)
