"""Comment, variable-declaration and at-rule stripping.

Two renditions share one scan:

* ``strip_comments`` removes comments outright and is used where the text
  itself matters (selector cleaning).
* The ``mask_*`` functions replace every stripped character with a space
  (newlines are kept), so the working copy has the same length as the
  source and any offset found in it is an offset in the original.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from css_specificity.extraction.dialects import DialectPolicy

__all__ = [
    "strip_comments",
    "mask_comments",
    "mask_variable_declarations",
    "mask_at_rules",
    "mask_source",
]

# Less-style variable declaration: @name: value;
_VARIABLE_DECL_RE = re.compile(r"@[a-zA-Z][\w-]*\s*:\s*[^;{}]+;")


def _comment_spans(text: str, line_comments: bool = False) -> Iterator[tuple[int, int]]:
    """Yield ``(start, end)`` spans of comments in *text*.

    Comment markers inside quoted strings are ignored. A ``//`` inside
    parentheses is not a line comment (``url(http://...)``). An unclosed
    block comment runs to the end of the text.
    """
    i = 0
    n = len(text)
    quote: str | None = None
    parens = 0
    while i < n:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
            i += 1
            continue
        if ch == '"' or ch == "'":
            quote = ch
        elif text.startswith("/*", i):
            end = text.find("*/", i + 2)
            end = n if end == -1 else end + 2
            yield i, end
            i = end
            continue
        elif line_comments and parens == 0 and text.startswith("//", i):
            end = text.find("\n", i)
            end = n if end == -1 else end
            yield i, end
            i = end
            continue
        elif ch == "(":
            parens += 1
        elif ch == ")" and parens:
            parens -= 1
        elif ch in "{};":
            parens = 0
        i += 1


def _blank(text: str, spans: Iterable[tuple[int, int]]) -> str:
    chars = list(text)
    for start, end in spans:
        for k in range(start, end):
            if chars[k] not in "\r\n":
                chars[k] = " "
    return "".join(chars)


def _remove(text: str, spans: Iterable[tuple[int, int]]) -> str:
    pieces: list[str] = []
    last = 0
    for start, end in spans:
        pieces.append(text[last:start])
        last = end
    pieces.append(text[last:])
    return "".join(pieces)


def strip_comments(text: str, line_comments: bool = False) -> str:
    """Return *text* with all comments removed.

    Removal is repeated until nothing changes, since joining the text around
    a comment can form a new ``/*`` marker.
    """
    while True:
        stripped = _remove(text, list(_comment_spans(text, line_comments)))
        if stripped == text:
            return stripped
        text = stripped


def mask_comments(text: str, line_comments: bool = False) -> str:
    """Blank out comments, keeping every other character at its offset."""
    return _blank(text, list(_comment_spans(text, line_comments)))


def mask_variable_declarations(text: str) -> str:
    """Blank out ``@name: value;`` statements."""
    return _blank(text, [m.span() for m in _VARIABLE_DECL_RE.finditer(text)])


def _at_rule_end(text: str, start: int) -> int:
    """Return the offset just past the at-rule beginning at *start*.

    A statement at-rule ends at ``;``. A block at-rule ends after the brace
    matching its first ``{``, at any depth. A ``}`` met before either closes
    the enclosing block, so the at-rule stops just before it.
    """
    n = len(text)
    depth = 0
    quote: str | None = None
    i = start
    while i < n:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
        elif ch == '"' or ch == "'":
            quote = ch
        elif ch == "{":
            depth += 1
        elif ch == "}":
            if depth == 0:
                return i
            depth -= 1
            if depth == 0:
                return i + 1
        elif ch == ";" and depth == 0:
            return i + 1
        i += 1
    return n


def _at_rule_spans(text: str) -> Iterator[tuple[int, int]]:
    i = 0
    n = len(text)
    at_statement_start = True
    quote: str | None = None
    while i < n:
        ch = text[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote or ch == "\n":
                quote = None
            i += 1
            continue
        if (
            ch == "@"
            and at_statement_start
            and i + 1 < n
            and (text[i + 1].isalpha() or text[i + 1] == "-")
        ):
            end = _at_rule_end(text, i)
            yield i, end
            i = end
            at_statement_start = True
            continue
        if ch in "{};":
            at_statement_start = True
        elif not ch.isspace():
            at_statement_start = False
            if ch == '"' or ch == "'":
                quote = ch
        i += 1


def mask_at_rules(text: str) -> str:
    """Blank out every at-rule, body and all, including nested ones.

    Only an ``@keyword`` at the start of a statement counts, so ``@`` inside
    a selector or value (Less ``@{var}`` interpolation, guard arguments) is
    left alone.
    """
    return _blank(text, list(_at_rule_spans(text)))


def mask_source(text: str, policy: DialectPolicy) -> str:
    """Produce the offset-preserving working copy used for structural scanning."""
    masked = mask_comments(text, line_comments=policy.line_comments)
    if policy.strip_variables:
        masked = mask_variable_declarations(masked)
    return mask_at_rules(masked)
