"""CSS specificity calculator.

Each category is counted and then removed from a working copy before the
next one is scanned, so no text is counted twice. Order matters:

    strings -> :not(...) -> #id -> .class -> [attr] -> ::pseudo-element
    -> :pseudo-class -> type selectors

``:not()`` contributes nothing itself; its argument is scored recursively and
added in. Inline specificity is never derivable from selector text and is
always 0.
"""

from __future__ import annotations

import re

from css_specificity.model.specificity import (
    ZERO,
    SpecificityResult,
    SpecificityVector,
)

__all__ = [
    "calculate",
    "calculate_single",
    "compare_specificity",
    "split_selector_list",
]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")
_STRING_RE = re.compile(r""""(?:\\.|[^"\\])*"|'(?:\\.|[^'\\])*'""")

# \w is Unicode-aware, so non-ASCII identifiers are covered.
_ID_RE = re.compile(r"#[\w-]+")
_CLASS_RE = re.compile(r"\.[\w-]+")
_ATTRIBUTE_RE = re.compile(r"\[[^\]]+\]")

_PSEUDO_NAME = r"-?[^\W\d][\w-]*"
_PSEUDO_ELEMENT_RE = re.compile(rf"::{_PSEUDO_NAME}")
_PSEUDO_CLASS_RE = re.compile(
    rf":(?!not\(){_PSEUDO_NAME}(?:\((?:[^()]|\([^()]*\))*\))?"
)

_COMBINATOR_RE = re.compile(r"[>+~\s]")
_TYPE_RE = re.compile(r"^[\w-]+$")

_NOT_OPEN = ":not("


def split_selector_list(selector_list: str) -> list[str]:
    """Split on commas that are outside parentheses, brackets and quotes."""
    parts: list[str] = []
    depth = 0
    quote: str | None = None
    start = 0
    for i, ch in enumerate(selector_list):
        if quote:
            if ch == quote:
                quote = None
        elif ch == '"' or ch == "'":
            quote = ch
        elif ch in "([":
            depth += 1
        elif ch in ")]" and depth:
            depth -= 1
        elif ch == "," and depth == 0:
            parts.append(selector_list[start:i])
            start = i + 1
    parts.append(selector_list[start:])
    return parts


def _extract_negations(selector: str) -> tuple[str, list[str]]:
    """Remove every ``:not(...)`` group and return the remainder and arguments.

    Parentheses are balanced, so ``:not(:nth-child(2))`` stays whole. An
    unterminated group takes the rest of the selector as its argument.
    """
    remainder: list[str] = []
    arguments: list[str] = []
    i = 0
    while True:
        j = selector.find(_NOT_OPEN, i)
        if j == -1:
            remainder.append(selector[i:])
            break
        remainder.append(selector[i:j])
        k = j + len(_NOT_OPEN)
        depth = 1
        while k < len(selector) and depth:
            if selector[k] == "(":
                depth += 1
            elif selector[k] == ")":
                depth -= 1
            k += 1
        if depth:
            arguments.append(selector[j + len(_NOT_OPEN):])
        else:
            arguments.append(selector[j + len(_NOT_OPEN):k - 1])
        i = k
    return "".join(remainder), arguments


def calculate_single(selector: str) -> SpecificityVector:
    """Score one complex selector (no top-level commas)."""
    working = _STRING_RE.sub("", selector)

    working, negations = _extract_negations(working)
    total = ZERO
    for argument in negations:
        inner = calculate_single(argument)
        total += SpecificityVector(
            ids=inner.ids,
            class_like=inner.class_like,
            element_like=inner.element_like,
        )

    working, ids = _ID_RE.subn("", working)
    working, classes = _CLASS_RE.subn("", working)
    working, attributes = _ATTRIBUTE_RE.subn("", working)
    working, pseudo_elements = _PSEUDO_ELEMENT_RE.subn("", working)
    working, pseudo_classes = _PSEUDO_CLASS_RE.subn("", working)

    working = _COMBINATOR_RE.sub(" ", working).replace("*", "")
    types = sum(1 for token in working.split() if _TYPE_RE.match(token))

    return total + SpecificityVector(
        ids=ids,
        class_like=classes + attributes + pseudo_classes,
        element_like=pseudo_elements + types,
    )


def compare_specificity(a: SpecificityVector, b: SpecificityVector) -> int:
    """Return 1 if *a* outranks *b*, -1 if *b* outranks *a*, else 0."""
    if a > b:
        return 1
    if a < b:
        return -1
    return 0


def calculate(selector_list: str) -> SpecificityResult:
    """Score a selector list; the result is its highest-ranking clause.

    Empty or unparseable input scores ``(0,0,0,0) = 0``.
    """
    text = _WHITESPACE_RE.sub(" ", _COMMENT_RE.sub("", selector_list)).strip()
    best = ZERO
    if text:
        for clause in split_selector_list(text):
            vector = calculate_single(clause.strip())
            if compare_specificity(vector, best) > 0:
                best = vector
    return SpecificityResult.from_vector(best)
