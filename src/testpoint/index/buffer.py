"""Immutable source snapshots.

`SourceBuffer` provides the line-text and buffer-scan capabilities the
locator needs without a shared cursor: every query takes the offset or
pattern it needs and leaves nothing behind.
"""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass, field
from pathlib import Path

from testpoint.core.errors import IndexingError, TargetError


@dataclass(frozen=True)
class SourceBuffer:
    """Text of one source file at the moment of a query."""

    text: str
    path: Path | None = None
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(m.end() for m in re.finditer("\n", self.text))
        object.__setattr__(self, "_line_starts", tuple(starts))

    @classmethod
    def from_path(cls, path: Path) -> SourceBuffer:
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise IndexingError.source_unreadable(str(path), str(e)) from e
        return cls(text=text, path=path)

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def _line_index(self, offset: int) -> int:
        offset = min(max(offset, 0), len(self.text))
        return bisect.bisect_right(self._line_starts, offset) - 1

    def _line_bounds(self, index: int) -> tuple[int, int]:
        start = self._line_starts[index]
        if index + 1 < len(self._line_starts):
            end = self._line_starts[index + 1] - 1  # drop the newline
        else:
            end = len(self.text)
        return start, end

    def line_text_at(self, offset: int) -> str:
        """Return the text of the line containing ``offset``, without its newline."""
        start, end = self._line_bounds(self._line_index(offset))
        return self.text[start:end].rstrip("\r")

    def line_number_at(self, offset: int) -> int:
        """1-based line number of ``offset``."""
        return self._line_index(offset) + 1

    def find_first_match(self, pattern: re.Pattern[str] | str) -> int | None:
        """Offset of the first match of ``pattern`` scanning from the buffer start."""
        if isinstance(pattern, str):
            pattern = re.compile(pattern, re.MULTILINE)
        match = pattern.search(self.text)
        return match.start() if match else None

    def offset_at(self, line: int, column: int | None = None) -> int:
        """Convert a 1-based line and 0-based column to a character offset.

        Without a column the offset is the end of the line, so the whole
        line counts as "at or after" anything defined on it.
        """
        if line < 1 or line > self.line_count:
            raise TargetError.invalid_position(
                line, column, f"buffer has {self.line_count} lines"
            )
        start, end = self._line_bounds(line - 1)
        if column is None:
            return end
        if column < 0 or start + column > end:
            raise TargetError.invalid_position(
                line, column, f"line is {end - start} characters long"
            )
        return start + column
