"""Selector models: scanned rule blocks and located selectors."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Position:
    """A 0-based line/column location inside a document."""

    line: int
    column: int


@dataclass(frozen=True)
class Span:
    """A half-open ``[start, end)`` range of offsets into the original text."""

    start: int
    end: int


@dataclass(frozen=True)
class RuleBlock:
    """A ``selector { body }`` block found by the scanner.

    Attributes:
        prelude: Source text before the opening brace, trimmed.
        body: Source text between the braces (masked copy, comments blanked).
        start: Offset of the first prelude character in the original text.
        end: Offset just past the last prelude character.
        body_start: Offset just past the opening brace.
        body_end: Offset of the closing brace.
        depth: Number of style blocks enclosing this one (0 = top level).
    """

    prelude: str
    body: str
    start: int
    end: int
    body_start: int
    body_end: int
    depth: int = 0


@dataclass(frozen=True)
class ExtractedSelector:
    """A cleaned selector and the span of its source form in the original text."""

    selector_text: str
    start_offset: int
    end_offset: int


@dataclass(frozen=True)
class ExtractedRule:
    """An extracted selector with the line number supplied by the host document."""

    selector: str
    start_offset: int
    end_offset: int
    line: int

    def to_dict(self) -> dict[str, object]:
        return {
            "selector": self.selector,
            "start_offset": self.start_offset,
            "end_offset": self.end_offset,
            "line": self.line,
        }
