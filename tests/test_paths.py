"""
Test destination path construction.
"""

import pytest
from pathlib import Path

from media_organizer.classifier import MediaKind
from media_organizer.dates import ResolvedDate
from media_organizer.paths import (InvalidMonthError, InvalidYearError, build_destination_path,
                                   month_dirname)


class TestDestinationPath:

    def test_photo_layout(self):
        path = build_destination_path(MediaKind.PHOTO, ResolvedDate(2020, 4, 7),
                                      "IMG-20200407-WA0004.jpg")
        assert path == Path("2020") / "04 - April" / "IMG-20200407-WA0004.jpg"
        assert path.as_posix() == "2020/04 - April/IMG-20200407-WA0004.jpg"

    def test_video_layout(self):
        path = build_destination_path(MediaKind.VIDEO, ResolvedDate(2020, 8, 29),
                                      "20200829_205420.mp4")
        assert path.as_posix() == "2020/20200829_205420.mp4"

    def test_video_ignores_month(self):
        """Videos are only split by year, so any month value is irrelevant."""
        path = build_destination_path(MediaKind.VIDEO, ResolvedDate(2020, 13, 1), "x.mp4")
        assert path.as_posix() == "2020/x.mp4"

    def test_same_inputs_same_path(self):
        date = ResolvedDate(2019, 1, 23)
        first = build_destination_path(MediaKind.PHOTO, date, "camera.jpg")
        second = build_destination_path(MediaKind.PHOTO, date, "camera.jpg")
        assert first == second

    @pytest.mark.parametrize("month", [0, 13, 99])
    def test_invalid_month(self, month):
        with pytest.raises(InvalidMonthError) as excinfo:
            build_destination_path(MediaKind.PHOTO, ResolvedDate(2020, month, 1), "a.jpg")
        assert excinfo.value.month == month
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize("kind", [MediaKind.PHOTO, MediaKind.VIDEO])
    @pytest.mark.parametrize("year", [0, 1838, 3001])
    def test_invalid_year(self, kind, year):
        with pytest.raises(InvalidYearError) as excinfo:
            build_destination_path(kind, ResolvedDate(year, 4, 7), "IMG-00000407-WA0001.jpg")
        assert excinfo.value.year == year
        assert isinstance(excinfo.value, ValueError)

    @pytest.mark.parametrize("year", [1839, 3000])
    def test_year_bounds_are_inclusive(self, year):
        path = build_destination_path(MediaKind.VIDEO, ResolvedDate(year, 1, 1), "clip.mp4")
        assert path.as_posix() == f"{year}/clip.mp4"

    def test_unsupported_kind(self):
        with pytest.raises(ValueError):
            build_destination_path(MediaKind.UNSUPPORTED, ResolvedDate(2020, 1, 1), "a.txt")


class TestMonthDirname:

    @pytest.mark.parametrize("month, expected", [
        (1, "01 - January"),
        (4, "04 - April"),
        (9, "09 - September"),
        (12, "12 - December"),
    ])
    def test_names(self, month, expected):
        assert month_dirname(month) == expected
