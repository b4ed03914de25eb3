"""Tests for text and path truncation."""

import pytest

from termfit.core.truncate import (
    ASCII_ELLIPSIS,
    ELLIPSIS,
    pad_to_width,
    truncate,
    truncate_and_pad,
    truncate_end,
    truncate_path,
    visible_len,
)

SAMPLES = [
    "",
    "a",
    "hello",
    "hello world",
    "x" * 200,
    "ab\U0001F600cd",
    "ab\ud83d\ude00cd",
    "cafe\u0301 au lait",
    "/home/user/project/src/main.py",
]


def _has_lone_surrogate(s: str) -> bool:
    for i, ch in enumerate(s):
        if "\ud800" <= ch <= "\udbff":
            if i + 1 >= len(s) or not ("\udc00" <= s[i + 1] <= "\udfff"):
                return True
        elif "\udc00" <= ch <= "\udfff":
            if i == 0 or not ("\ud800" <= s[i - 1] <= "\udbff"):
                return True
    return False


class TestTruncate:
    """Tests for truncate(), which keeps the end of the string."""

    def test_fits_unchanged(self) -> None:
        assert truncate("hello", 10) == "hello"
        assert truncate("hello", 5) == "hello"

    def test_keeps_tail(self) -> None:
        assert truncate("hello world", 5) == ELLIPSIS + "orld"

    def test_ascii_marker(self) -> None:
        assert truncate("hello world", 8, ASCII_ELLIPSIS) == "...world"

    @pytest.mark.parametrize("max_len", [0, -1, -100])
    def test_non_positive_is_empty(self, max_len: int) -> None:
        assert truncate("hello", max_len) == ""

    def test_marker_longer_than_budget(self) -> None:
        assert truncate("hello world", 2, ASCII_ELLIPSIS) == ".."
        assert truncate("hello world", 3, ASCII_ELLIPSIS) == "..."

    @pytest.mark.parametrize("text", SAMPLES)
    def test_length_bound_and_idempotence(self, text: str) -> None:
        for n in range(-1, 40):
            once = truncate(text, n)
            assert len(once) <= max(0, n)
            assert truncate(once, n) == once

    def test_does_not_split_surrogate_pair(self) -> None:
        result = truncate("ab\ud83d\ude00cd", 4)
        assert result == ELLIPSIS + "cd"
        assert not _has_lone_surrogate(result)

    def test_does_not_start_with_combining_mark(self) -> None:
        assert truncate("ae\u0301bc", 4) == ELLIPSIS + "bc"

    def test_emoji_kept_whole(self) -> None:
        assert truncate("xxx\U0001F600yz", 4) == ELLIPSIS + "\U0001F600yz"


class TestTruncateEnd:
    """Tests for truncate_end(), which keeps the start of the string."""

    def test_keeps_head(self) -> None:
        assert truncate_end("hello world", 6) == "hello" + ELLIPSIS

    def test_fits_unchanged(self) -> None:
        assert truncate_end("short", 80) == "short"

    @pytest.mark.parametrize("text", SAMPLES)
    def test_length_bound_and_idempotence(self, text: str) -> None:
        for n in range(-1, 40):
            once = truncate_end(text, n)
            assert len(once) <= max(0, n)
            assert truncate_end(once, n) == once

    def test_does_not_split_surrogate_pair(self) -> None:
        result = truncate_end("ab\ud83d\ude00cd", 4)
        assert result == "ab" + ELLIPSIS
        assert not _has_lone_surrogate(result)

    def test_does_not_strip_combining_mark_from_base(self) -> None:
        assert truncate_end("cafe\u0301 bar", 5) == "caf" + ELLIPSIS

    def test_surrogate_samples_stay_well_formed(self) -> None:
        for n in range(1, 10):
            assert not _has_lone_surrogate(truncate_end("ab\ud83d\ude00cd", n))
            assert not _has_lone_surrogate(truncate("ab\ud83d\ude00cd", n))


class TestTruncatePath:
    """Tests for truncate_path()."""

    def test_fits_unchanged(self) -> None:
        assert truncate_path("/a/b/c/d/e", 15) == "/a/b/c/d/e"

    def test_keeps_last_two_segments(self) -> None:
        assert truncate_path("/a/b/c/d/e", 8) == ".../d/e"
        assert truncate_path("/home/user/project/src/main.py", 20) == ".../src/main.py"

    def test_short_budget_keeps_last_segments(self) -> None:
        result = truncate_path("/a/b/c/d/e", 15)
        assert result.endswith("d/e")
        assert len(result) <= 15

    def test_falls_back_to_tail(self) -> None:
        path = "/very/long/directory_name/another_long_file_name.py"
        result = truncate_path(path, 20)
        assert result.startswith("...")
        assert result.endswith("file_name.py")
        assert len(result) == 20

    def test_windows_separator(self) -> None:
        assert truncate_path("C:\\Users\\me\\projects\\app\\main.py", 16) == "...\\app\\main.py"

    def test_non_positive(self) -> None:
        assert truncate_path("/a/b/c", 0) == ""

    @pytest.mark.parametrize("n", [1, 3, 5, 8, 12, 20, 40])
    def test_idempotent(self, n: int) -> None:
        path = "/home/user/projects/termfit/src/termfit/core/layout.py"
        once = truncate_path(path, n)
        assert len(once) <= n
        assert truncate_path(once, n) == once


class TestPadding:
    """Tests for width helpers."""

    def test_visible_len_ignores_ansi(self) -> None:
        assert visible_len("\x1b[31mred\x1b[0m") == 3

    def test_pad_to_width(self) -> None:
        assert pad_to_width("ab", 5) == "ab   "
        assert pad_to_width("abcdef", 3) == "abcdef"

    def test_truncate_and_pad_exact_width(self) -> None:
        assert truncate_and_pad("ab", 4) == "ab  "
        assert truncate_and_pad("abcdef", 4) == "abc" + ELLIPSIS
        assert truncate_and_pad("abc", 0) == ""
