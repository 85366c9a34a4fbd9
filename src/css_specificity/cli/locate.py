"""CLI command: css-specificity locate -- find a selector's source span."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from css_specificity.cli.common import read_source
from css_specificity.document import TextDocument
from css_specificity.extraction import clean_selector, locate_selector


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@click.argument("selector")
def locate(stylesheet: str, selector: str) -> None:
    """Find where SELECTOR opens a rule in STYLESHEET.

    Prints FILE:LINE:COL-LINE:COL followed by the matched source text, or
    exits with code 1 when the selector cannot be found.
    """
    path = Path(stylesheet)
    source = read_source(path)
    cleaned = clean_selector(selector)

    span = locate_selector(source, cleaned)
    if span is None:
        click.echo(f"Not found: {cleaned}", err=True)
        sys.exit(1)

    document = TextDocument(source)
    start = document.position_at(span.start)
    end = document.position_at(span.end)
    matched = " ".join(source[span.start:span.end].split())
    click.echo(
        f"{path.name}:{start.line + 1}:{start.column + 1}"
        f"-{end.line + 1}:{end.column + 1}  {matched}"
    )
