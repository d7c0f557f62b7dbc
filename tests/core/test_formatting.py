"""Tests for core.formatting utilities."""

from __future__ import annotations

import pytest

from unity_indexer.core.formatting import (
    compress_path,
    format_duration,
    format_path_list,
    pluralize,
)


class TestCompressPath:
    """Tests for compress_path function."""

    def test_short_path_unchanged(self) -> None:
        assert compress_path("Scripts/Player.cs", max_len=30) == "Scripts/Player.cs"

    def test_long_path_compressed(self) -> None:
        result = compress_path("Scripts/Player/Movement/PlayerMover.cs", max_len=30)
        assert result == "Scripts/.../PlayerMover.cs"

    def test_very_long_path_uses_filename_only(self) -> None:
        result = compress_path("very_long_directory_name/another_long_name/Mover.cs", max_len=20)
        assert result == "Mover.cs"

    def test_two_segment_path_unchanged(self) -> None:
        result = compress_path("Scripts/very_long_filename_that_exceeds.cs", max_len=20)
        assert result == "Scripts/very_long_filename_that_exceeds.cs"


class TestFormatPathList:
    """Tests for format_path_list function."""

    def test_empty_list(self) -> None:
        assert format_path_list([]) == ""

    def test_single_path(self) -> None:
        assert format_path_list(["a.cs"]) == "a.cs"

    def test_two_paths(self) -> None:
        assert format_path_list(["a.cs", "b.cs"]) == "a.cs, b.cs"

    def test_more_than_max_shown(self) -> None:
        result = format_path_list(["a.cs", "b.cs", "c.cs", "d.cs"])
        assert result == "a.cs, b.cs, +2 more"

    def test_falls_back_to_count(self) -> None:
        paths = [f"{'x' * 40}/{i}.cs" for i in range(5)]
        assert format_path_list(paths, max_total=20) == "5 files"

    def test_deep_paths_are_compressed(self) -> None:
        paths = [
            "Assets/Scripts/Player/Movement/PlayerMover.cs",
            "Assets/Scripts/Enemies/Boss/BossBrain.cs",
        ]
        assert format_path_list(paths) == "Assets/.../PlayerMover.cs, Assets/.../BossBrain.cs"

    def test_first_path_then_count_when_too_long(self) -> None:
        paths = ["Assets/A/B/First.cs", "Assets/A/B/Second.cs"]
        assert format_path_list(paths, max_total=30) == "Assets/A/B/First.cs, +1 more"


class TestPluralize:
    """Tests for pluralize function."""

    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, "0 functions"), (1, "1 function"), (2, "2 functions")],
    )
    def test_regular_plural(self, count: int, expected: str) -> None:
        assert pluralize(count, "function") == expected

    def test_custom_plural(self) -> None:
        assert pluralize(3, "class", "classes") == "3 classes"


class TestFormatDuration:
    """Tests for format_duration function."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [(0.345, "0.3s"), (90.0, "1m 30s"), (3661.0, "1h 1m")],
    )
    def test_formats(self, seconds: float, expected: str) -> None:
        assert format_duration(seconds) == expected

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            format_duration(-1)
