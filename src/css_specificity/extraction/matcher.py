"""Rule-block scanner over the masked working copy.

The scanner walks the masked text once, tracking brace depth, quoted strings
and ``#{...}`` / ``@{...}`` interpolations. Because the masked copy keeps
every character at its original offset, spans are recorded directly against
the source text.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from css_specificity.model.selector import RuleBlock

__all__ = ["scan_blocks"]


@dataclass
class _OpenBlock:
    start: int
    end: int
    body_start: int
    depth: int
    body_end: int | None = None

    def freeze(self, source: str, masked: str) -> RuleBlock:
        assert self.body_end is not None
        return RuleBlock(
            prelude=source[self.start:self.end],
            body=masked[self.body_start:self.body_end],
            start=self.start,
            end=self.end,
            body_start=self.body_start,
            body_end=self.body_end,
            depth=self.depth,
        )


def _trim(text: str, start: int, end: int) -> tuple[int, int]:
    while start < end and text[start].isspace():
        start += 1
    while end > start and text[end - 1].isspace():
        end -= 1
    return start, end


def _skip_interpolation(text: str, open_brace: int) -> int:
    """Return the offset just past the ``}`` closing an interpolation."""
    depth = 0
    for i in range(open_brace, len(text)):
        if text[i] == "{":
            depth += 1
        elif text[i] == "}":
            depth -= 1
            if depth == 0:
                return i + 1
    return len(text)


def scan_blocks(masked: str, source: str | None = None) -> Iterator[RuleBlock]:
    """Yield every closed ``prelude { body }`` block in document order.

    *masked* is the working copy from :func:`mask_source`; *source* is the
    original text the preludes are sliced from (defaults to *masked*).

    A prelude starts after the previous ``{``, ``}`` or ``;``, so a
    declaration preceding a nested rule never becomes part of its selector.
    Blocks are yielded once their top-level ancestor closes. Blocks still
    open at the end of input are dropped; their closed descendants are
    still yielded. A stray ``}`` at depth 0 is ignored.
    """
    source = masked if source is None else source
    stack: list[_OpenBlock] = []
    pending: list[_OpenBlock] = []
    prelude_start = 0
    quote: str | None = None
    i = 0
    n = len(masked)
    while i < n:
        ch = masked[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
        elif ch == '"' or ch == "'":
            quote = ch
        elif ch == "{":
            if i > 0 and masked[i - 1] in "#@":
                i = _skip_interpolation(masked, i)
                continue
            start, end = _trim(masked, prelude_start, i)
            block = _OpenBlock(start=start, end=end, body_start=i + 1, depth=len(stack))
            stack.append(block)
            pending.append(block)
            prelude_start = i + 1
        elif ch == "}":
            if stack:
                stack.pop().body_end = i
                if not stack:
                    for done in pending:
                        yield done.freeze(source, masked)
                    pending = []
            prelude_start = i + 1
        elif ch == ";":
            prelude_start = i + 1
        i += 1

    for block in pending:
        if block.body_end is not None:
            yield block.freeze(source, masked)
