"""Minimal host document: text plus offset/position translation.

This plays the part of the editor's document model for the CLI and tests;
the extraction engine only ever sees its ``position_at`` callable.
"""

from __future__ import annotations

from bisect import bisect_right
from dataclasses import dataclass, field

from css_specificity.model.selector import Position


@dataclass(frozen=True)
class TextDocument:
    """An immutable document with 0-based line/column addressing.

    Lines are separated by ``\\n``; a preceding ``\\r`` stays part of the
    line text.
    """

    text: str
    language_id: str = "css"
    _line_starts: tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        starts = [0]
        starts.extend(i + 1 for i, ch in enumerate(self.text) if ch == "\n")
        object.__setattr__(self, "_line_starts", tuple(starts))

    @property
    def line_count(self) -> int:
        return len(self._line_starts)

    def position_at(self, offset: int) -> Position:
        """Translate *offset* to a Position, clamped to the document."""
        offset = max(0, min(offset, len(self.text)))
        line = bisect_right(self._line_starts, offset) - 1
        return Position(line=line, column=offset - self._line_starts[line])

    def offset_at(self, position: Position) -> int:
        line = max(0, min(position.line, self.line_count - 1))
        start = self._line_starts[line]
        return min(start + max(position.column, 0), start + len(self.line_at(line)))

    def line_at(self, line: int) -> str:
        start = self._line_starts[line]
        end = self.text.find("\n", start)
        return self.text[start:] if end == -1 else self.text[start:end]
