"""Helpers shared by the CLI commands."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_specificity.errors import UnsupportedLanguageError
from css_specificity.extraction import dialect_for_language, dialect_for_path
from css_specificity.extraction.dialects import LANGUAGE_DIALECTS
from css_specificity.model.dialect import Dialect

DIALECT_CHOICE = click.Choice(sorted(LANGUAGE_DIALECTS), case_sensitive=False)

dialect_option = click.option(
    "--dialect",
    "language",
    type=DIALECT_CHOICE,
    default=None,
    help="Stylesheet language; inferred from the file suffix when omitted.",
)


def resolve_dialect(path: Path, language: str | None) -> Dialect:
    """Pick the dialect from *language* or the file suffix, exiting on failure."""
    try:
        if language:
            return dialect_for_language(language)
        return dialect_for_path(path)
    except UnsupportedLanguageError as exc:
        click.echo(f"Error: {exc} (use --dialect)", err=True)
        sys.exit(1)


def read_source(path: Path) -> str:
    return path.read_text(encoding="utf-8")
