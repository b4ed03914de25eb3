"""Text truncation - fitting strings into a column budget without breaking characters."""

from __future__ import annotations

import re
import unicodedata

ELLIPSIS = "…"
ASCII_ELLIPSIS = "..."

# Pattern to match ANSI escape sequences (including ~ terminator for F-keys, etc.)
_ANSI_ESCAPE = re.compile(r'\x1b\[[0-9;]*[A-Za-z~]')


def visible_len(s: str) -> int:
    """Get visible length of string (excluding ANSI escape codes)."""
    return len(_ANSI_ESCAPE.sub('', s))


def _is_low_surrogate(ch: str) -> bool:
    return '\udc00' <= ch <= '\udfff'


def _is_high_surrogate(ch: str) -> bool:
    return '\ud800' <= ch <= '\udbff'


def _clean_head(fragment: str) -> str:
    """Drop characters orphaned at the start of a kept tail."""
    i = 0
    while i < len(fragment) and (
        _is_low_surrogate(fragment[i]) or unicodedata.combining(fragment[i])
    ):
        i += 1
    return fragment[i:]


def _clean_tail(fragment: str, following: str) -> str:
    """Drop a dangling high surrogate, or a base char whose marks were cut off."""
    if fragment and _is_high_surrogate(fragment[-1]):
        return fragment[:-1]
    if following and unicodedata.combining(following[0]):
        # Base character would lose its combining marks
        end = len(fragment)
        while end > 0 and unicodedata.combining(fragment[end - 1]):
            end -= 1
        return fragment[:max(0, end - 1)]
    return fragment


def _marker_fit(ellipsis: str, max_len: int) -> str:
    if max_len <= 0:
        return ""
    return ellipsis[-max_len:]


def truncate(text: str, max_len: int, ellipsis: str = ELLIPSIS) -> str:
    """
    Truncate text to max_len code points, keeping the end.

    The dropped head is replaced by the ellipsis marker. Strings that
    already fit are returned unchanged.

    Args:
        text: String to truncate
        max_len: Maximum length in code points
        ellipsis: Marker placed in front of the kept tail
    """
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text
    keep = max_len - len(ellipsis)
    if keep <= 0:
        return _marker_fit(ellipsis, max_len)
    return ellipsis + _clean_head(text[-keep:])


def truncate_end(text: str, max_len: int, ellipsis: str = ELLIPSIS) -> str:
    """Truncate text to max_len code points, keeping the start and marking the cut."""
    if max_len <= 0:
        return ""
    if len(text) <= max_len:
        return text
    keep = max_len - len(ellipsis)
    if keep <= 0:
        return _marker_fit(ellipsis, max_len)
    return _clean_tail(text[:keep], text[keep:]) + ellipsis


def truncate_path(path: str, max_len: int) -> str:
    """
    Truncate a filesystem path, preferring to keep the last two segments.

    "/home/user/project/src/main.py" -> ".../src/main.py"

    Falls back to plain tail truncation with a "..." prefix when even the
    last two segments do not fit.
    """
    if max_len <= 0:
        return ""
    if len(path) <= max_len:
        return path

    sep = "\\" if "\\" in path and "/" not in path else "/"
    segments = [s for s in path.split(sep) if s]
    if len(segments) >= 2:
        candidate = f"...{sep}" + sep.join(segments[-2:])
        if len(candidate) <= max_len:
            return candidate

    return truncate(path, max_len, ellipsis=ASCII_ELLIPSIS)


def pad_to_width(s: str, width: int, char: str = ' ') -> str:
    """Pad string with char to reach exactly width visible characters."""
    current = visible_len(s)
    if current >= width:
        return s
    return s + char * (width - current)


def truncate_and_pad(s: str, width: int, ellipsis: str = ELLIPSIS) -> str:
    """Truncate if too long, pad if too short. Always returns exactly width chars."""
    if width <= 0:
        return ""
    fitted = truncate_end(s, width, ellipsis)
    return fitted + ' ' * (width - len(fitted))
