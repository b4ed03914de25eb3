"""Edit-operation primitives supplied by an LCS diff implementation.

The engine only consumes runs of equal/inserted/deleted items. Anything that
can produce those (difflib here, any other differ via the protocols) can be
plugged in.
"""

from __future__ import annotations

import difflib
from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable, Mapping, Optional, Protocol, Sequence, Union


class OpTag(Enum):
    """Kind of edit run."""
    EQUAL = "equal"
    INSERT = "insert"
    DELETE = "delete"


@dataclass(frozen=True)
class DiffOp:
    """A run of consecutive items sharing one edit kind."""
    tag: OpTag
    items: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.items)

    @property
    def value(self) -> str:
        return "".join(self.items)


RawOp = Union[DiffOp, Mapping[str, Any], None]


class LineDiffer(Protocol):
    """Produces line-level edit runs."""

    def line_ops(self, old_lines: Sequence[str], new_lines: Sequence[str]) -> Iterable[RawOp]:
        ...


class CharDiffer(Protocol):
    """Produces character-level edit runs."""

    def char_ops(self, old: str, new: str) -> Iterable[RawOp]:
        ...


class SequenceMatcherDiffer:
    """
    Line and character differ backed by difflib.SequenceMatcher.

    Replacements come out as the deleted run followed by the inserted run,
    which is the old-then-new order the renderers rely on.
    """

    def __init__(self, autojunk: bool = False):
        self.autojunk = autojunk

    def _ops(self, a: Sequence[str], b: Sequence[str]) -> list[DiffOp]:
        matcher = difflib.SequenceMatcher(None, a, b, autojunk=self.autojunk)
        ops: list[DiffOp] = []
        for tag, i1, i2, j1, j2 in matcher.get_opcodes():
            if tag == "equal":
                ops.append(DiffOp(OpTag.EQUAL, tuple(a[i1:i2])))
            elif tag == "delete":
                ops.append(DiffOp(OpTag.DELETE, tuple(a[i1:i2])))
            elif tag == "insert":
                ops.append(DiffOp(OpTag.INSERT, tuple(b[j1:j2])))
            else:  # replace
                ops.append(DiffOp(OpTag.DELETE, tuple(a[i1:i2])))
                ops.append(DiffOp(OpTag.INSERT, tuple(b[j1:j2])))
        return ops

    def line_ops(self, old_lines: Sequence[str], new_lines: Sequence[str]) -> list[DiffOp]:
        return self._ops(list(old_lines), list(new_lines))

    def char_ops(self, old: str, new: str) -> list[DiffOp]:
        return self._ops(list(old), list(new))


def _tag_from_mapping(raw: Mapping[str, Any]) -> Optional[OpTag]:
    if "tag" in raw:
        try:
            return OpTag(raw["tag"])
        except ValueError:
            return None
    added = bool(raw.get("added"))
    removed = bool(raw.get("removed"))
    if added and removed:
        return None
    if added:
        return OpTag.INSERT
    if removed:
        return OpTag.DELETE
    return OpTag.EQUAL


def coerce_op(raw: RawOp, split_lines: bool = True) -> Optional[DiffOp]:
    """
    Normalize one raw edit run, or return None if it cannot be interpreted.

    Mappings follow the common {"value", "count", "added", "removed"} shape.
    A string value is split into lines (or characters when split_lines is
    False) and must agree with a positive integer count.
    """
    if raw is None:
        return None
    if isinstance(raw, DiffOp):
        if not isinstance(raw.tag, OpTag) or not raw.items:
            return None
        if not all(isinstance(item, str) for item in raw.items):
            return None
        return raw
    if not isinstance(raw, Mapping):
        return None

    tag = _tag_from_mapping(raw)
    value = raw.get("value")
    count = raw.get("count")
    if tag is None or value is None:
        return None
    if isinstance(count, bool) or not isinstance(count, int) or count <= 0:
        return None

    if isinstance(value, str):
        items = value.splitlines() if split_lines else list(value)
    elif isinstance(value, (list, tuple)) and all(isinstance(v, str) for v in value):
        items = list(value)
    else:
        return None

    if not items:
        return None
    return DiffOp(tag, tuple(items[:count]))
