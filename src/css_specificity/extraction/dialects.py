"""Dialect policies and language-id lookup.

Every dialect runs the same pipeline; a :class:`DialectPolicy` decides which
stripping stages run and which scanned blocks are reported.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath

from css_specificity.errors import UnsupportedLanguageError
from css_specificity.model.dialect import Dialect

__all__ = [
    "DialectPolicy",
    "POLICIES",
    "LANGUAGE_DIALECTS",
    "get_policy",
    "dialect_for_language",
    "dialect_for_path",
    "is_recognized_dialect",
]


@dataclass(frozen=True)
class DialectPolicy:
    """Stage switches for one dialect.

    Attributes:
        dialect: The dialect this policy belongs to.
        line_comments: Treat ``//`` to end of line as a comment.
        strip_variables: Blank ``@name: value;`` statements before at-rules.
        report_nested: Report rules nested inside other rules.
        nested_prefixes: A nested rule is reported only when its selector
            opens with one of these.
        skip_prefixes: Selectors opening with one of these are never reported.
    """

    dialect: Dialect
    line_comments: bool = False
    strip_variables: bool = False
    report_nested: bool = False
    nested_prefixes: tuple[str, ...] = (".", "#")
    skip_prefixes: tuple[str, ...] = ("@",)


POLICIES: dict[Dialect, DialectPolicy] = {
    Dialect.DEFAULT: DialectPolicy(dialect=Dialect.DEFAULT),
    Dialect.NESTED: DialectPolicy(
        dialect=Dialect.NESTED,
        line_comments=True,
        report_nested=True,
        skip_prefixes=("@", "$"),
    ),
    Dialect.VARIABLE_BEARING: DialectPolicy(
        dialect=Dialect.VARIABLE_BEARING,
        line_comments=True,
        strip_variables=True,
    ),
}

LANGUAGE_DIALECTS: dict[str, Dialect] = {
    "css": Dialect.DEFAULT,
    "sass": Dialect.DEFAULT,
    "scss": Dialect.NESTED,
    "less": Dialect.VARIABLE_BEARING,
}


def get_policy(dialect: Dialect) -> DialectPolicy:
    return POLICIES[dialect]


def is_recognized_dialect(language_id: str) -> bool:
    """Return True if *language_id* names a supported stylesheet language."""
    return language_id.lower() in LANGUAGE_DIALECTS


def dialect_for_language(language_id: str) -> Dialect:
    """Map an editor language id (``css``, ``scss``, ...) to its dialect."""
    try:
        return LANGUAGE_DIALECTS[language_id.lower()]
    except KeyError:
        raise UnsupportedLanguageError(language_id) from None


def dialect_for_path(path: str | PurePath) -> Dialect:
    """Map a file name to its dialect by suffix."""
    suffix = PurePath(path).suffix.lstrip(".")
    return dialect_for_language(suffix or str(path))
