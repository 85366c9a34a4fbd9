"""CLI command: css-specificity annotate -- print a stylesheet with scores inline."""

from __future__ import annotations

from pathlib import Path

import click

from css_specificity.annotate import build_annotations, render_annotations
from css_specificity.cli.common import dialect_option, read_source, resolve_dialect
from css_specificity.config import AnnotatorConfig
from css_specificity.document import TextDocument


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@dialect_option
@click.option(
    "--prefix",
    default=AnnotatorConfig.prefix,
    show_default=True,
    help="Text placed before each specificity score.",
)
def annotate(stylesheet: str, language: str | None, prefix: str) -> None:
    """Print STYLESHEET with each rule's specificity after its opening brace."""
    path = Path(stylesheet)
    dialect = resolve_dialect(path, language)
    source = read_source(path)
    document = TextDocument(source, language_id=language or path.suffix.lstrip("."))

    config = AnnotatorConfig(prefix=prefix, dialect=dialect)
    rendered = render_annotations(document, build_annotations(document, config))
    click.echo(rendered, nl=not rendered.endswith("\n"))
