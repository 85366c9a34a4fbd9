"""Selector validation and normalization."""

from __future__ import annotations

import re

from css_specificity.extraction.stripper import strip_comments

__all__ = ["is_valid_selector", "clean_selector"]

_KEYFRAME_STEP_RE = re.compile(r"^(?:from|to|\d+%)$")

# A plain declaration such as ``color: red`` or ``color:red;``. Whitespace
# after the colon or a trailing semicolon is required, otherwise ``a:hover``
# would read as a declaration.
_DECLARATION_RE = re.compile(
    r"""
    ^[a-zA-Z-]+\s*:         # property name and colon
    (?P<gap>\s*)            # whitespace after the colon
    [^;:()\[\]]+?           # value
    (?P<semi>;?)\s*$        # optional terminating semicolon
    """,
    re.VERBOSE,
)

_SELECTOR_MARKERS = "([.#"

_WHITESPACE_RE = re.compile(r"\s+")
_COMMA_RE = re.compile(r"\s*,\s*")


def is_valid_selector(raw: str) -> bool:
    """Return False when *raw* is not a style-rule selector.

    Rejected: empty text, keyframe steps (``from``, ``to``, ``50%``),
    residual at-rules, and text shaped like a property declaration that
    carries none of ``( [ . #``.
    """
    trimmed = raw.strip()
    if not trimmed:
        return False
    if _KEYFRAME_STEP_RE.match(trimmed):
        return False
    if trimmed.startswith("@"):
        return False
    match = _DECLARATION_RE.match(trimmed)
    if (
        match
        and (match.group("gap") or match.group("semi"))
        and not any(marker in trimmed for marker in _SELECTOR_MARKERS)
    ):
        return False
    return True


def clean_selector(raw: str) -> str:
    """Remove comments, collapse whitespace, and normalize commas to ``", "``.

    Idempotent: ``clean_selector(clean_selector(s)) == clean_selector(s)``.
    """
    text = _WHITESPACE_RE.sub(" ", raw)
    text = strip_comments(text)
    text = _WHITESPACE_RE.sub(" ", text)
    text = _COMMA_RE.sub(", ", text)
    return text.strip()
