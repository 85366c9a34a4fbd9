"""Locate a cleaned selector string in the original source text.

Cleaning drops comments and normalizes whitespace, so a cleaned selector
usually differs from its source form. The strategies below re-derive the
source span with increasingly permissive searches; the first hit wins.
"""

from __future__ import annotations

import re

from css_specificity.model.selector import Span

__all__ = ["locate_selector"]

# One block comment between tokens, or plain whitespace.
_TOKEN_GAP = r"(?:\s*/\*[^*]*\*/\s*|\s+)"
_TRAILING_COMMENT = r"(?:\s*/\*[^*]*\*/\s*)?"


def _span_before_brace(text: str, start: int) -> Span | None:
    brace = text.find("{", start)
    if brace == -1:
        return None
    selector = text[start:brace].strip()
    return Span(start, start + len(selector))


def _search(pattern: str, text: str) -> re.Match[str] | None:
    return re.search(pattern, text, re.IGNORECASE)


def _locate_part(text: str, selector: str) -> Span | None:
    escaped = re.escape(selector)

    # Exact literal directly before a brace.
    match = _search(rf"({escaped})\s*\{{", text)
    if match:
        return Span(match.start(1), match.end(1))

    # Tokens separated by whitespace or one embedded comment.
    tokens = selector.split()
    if len(tokens) > 1:
        flexible = _TOKEN_GAP.join(re.escape(token) for token in tokens)
        match = _search(rf"({flexible})\s*\{{", text)
        if match:
            return Span(match.start(1), match.start(1) + len(match.group(1).rstrip()))
    else:
        # Single token, optionally followed by one comment.
        token = re.escape(tokens[0]) if tokens else escaped
        match = _search(rf"({token}{_TRAILING_COMMENT})\s*\{{", text)
        if match:
            return Span(match.start(1), match.start(1) + len(match.group(1).rstrip()))

    # Any occurrence, extended to the next brace.
    match = _search(f"({escaped})", text)
    if match:
        return _span_before_brace(text, match.start(1))
    return None


def locate_selector(text: str, selector: str) -> Span | None:
    """Return the span of *selector* in *text* just before its rule's ``{``.

    A comma list is anchored on its first clause and extended to the next
    brace, which recovers multi-line lists with comments between clauses.
    Returns None when no plausible span exists.
    """
    selector = selector.strip()
    if not selector:
        return None
    if "," in selector:
        first = selector.split(",")[0].strip()
        if first:
            anchor = _locate_part(text, first)
            if anchor:
                span = _span_before_brace(text, anchor.start)
                if span:
                    return span
    return _locate_part(text, selector)
