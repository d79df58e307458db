"""
pytest configuration and fixtures for media-organizer tests.
"""

import io
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

import piexif
import pytest
from PIL import Image


@dataclass
class CliResult:
    """Result from running CLI command."""
    exit_code: int
    output: str
    error: str


def write_jpeg(path: Path, date_time_original: Optional[str] = None) -> Path:
    """Write a small real JPEG, optionally carrying an EXIF DateTimeOriginal."""
    path.parent.mkdir(parents=True, exist_ok=True)
    image = Image.new("RGB", (8, 8), color=(200, 120, 40))
    if date_time_original is None:
        image.save(path, "JPEG")
    else:
        exif_dict = {
            "0th": {},
            "Exif": {piexif.ExifIFD.DateTimeOriginal: date_time_original.encode("ascii")},
            "GPS": {},
            "1st": {},
            "thumbnail": None,
        }
        image.save(path, "JPEG", exif=piexif.dump(exif_dict))
    return path


@pytest.fixture
def make_jpeg():
    """Factory for JPEG files with or without EXIF capture dates."""
    return write_jpeg


@pytest.fixture
def media_dirs(tmp_path):
    """Source, photos and videos directories for one test."""
    source = tmp_path / "source"
    photos = tmp_path / "photos"
    videos = tmp_path / "videos"
    for directory in (source, photos, videos):
        directory.mkdir()
    return source, photos, videos


@pytest.fixture
def create_test_files(tmp_path):
    """Helper to create plain test files under a directory."""

    def create_files(file_specs: List[dict], root: Optional[Path] = None) -> Path:
        """Create test files based on specifications.

        Args:
            file_specs: List of dicts with keys:
                - name: relative file name (may contain subdirectories)
                - content: file content (optional)
            root: Directory to create them in (default: tmp_path / "test_files")

        Returns:
            Path to directory containing created files
        """
        test_dir = root or tmp_path / "test_files"
        test_dir.mkdir(parents=True, exist_ok=True)

        for spec in file_specs:
            file_path = test_dir / spec['name']
            file_path.parent.mkdir(parents=True, exist_ok=True)

            content = spec.get('content', b'test file content')
            if isinstance(content, str):
                file_path.write_text(content)
            else:
                file_path.write_bytes(content)

        return test_dir

    return create_files


@pytest.fixture
def cli_runner(monkeypatch, tmp_path):
    """Create a CLI runner that captures output and isolates the home directory."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))

    def run_cli(*args):
        """Run media-organizer CLI with given arguments.

        Returns:
            CliResult with exit_code, output, and error
        """
        from media_organizer.cli import main

        old_stdout = sys.stdout
        old_stderr = sys.stderr
        stdout = io.StringIO()
        stderr = io.StringIO()

        try:
            sys.stdout = stdout
            sys.stderr = stderr
            exit_code = main([str(a) for a in args])
            return CliResult(exit_code=exit_code, output=stdout.getvalue(),
                             error=stderr.getvalue())
        except SystemExit as e:
            # argparse exits on --help and usage errors
            return CliResult(
                exit_code=e.code if e.code is not None else 0,
                output=stdout.getvalue(),
                error=stderr.getvalue()
            )
        finally:
            sys.stdout = old_stdout
            sys.stderr = old_stderr

    return run_cli


@pytest.fixture
def assert_file_structure():
    """Helper to assert expected file structure."""

    def check_structure(base_path: Path, expected_structure: dict):
        """Assert that directory has expected structure.

        Args:
            base_path: Root directory to check
            expected_structure: Dict describing expected structure
                e.g., {"2020": {"04 - April": ["IMG-20200407-WA0004.jpg"]}}
        """
        def check_level(path: Path, structure: dict):
            for name, value in structure.items():
                item_path = path / name
                assert item_path.exists(), f"Expected {item_path} to exist"
                assert item_path.is_dir(), f"Expected {item_path} to be a directory"

                if isinstance(value, dict):
                    check_level(item_path, value)
                else:
                    actual_files = sorted(f.name for f in item_path.iterdir() if f.is_file())
                    assert actual_files == sorted(value), \
                        f"Expected files {sorted(value)} in {item_path}, got {actual_files}"

        check_level(base_path, expected_structure)

    return check_structure
