"""CLI command: css-specificity scan -- list a stylesheet's rules and scores."""

from __future__ import annotations

import json
from pathlib import Path

import click

from css_specificity.cli.common import dialect_option, read_source, resolve_dialect
from css_specificity.document import TextDocument
from css_specificity.extraction import extract_rules
from css_specificity.specificity import calculate


@click.command()
@click.argument("stylesheet", type=click.Path(exists=True, dir_okay=False))
@dialect_option
@click.option("--json", "as_json", is_flag=True, help="Print rules as JSON.")
def scan(stylesheet: str, language: str | None, as_json: bool) -> None:
    """Extract the rules of STYLESHEET and show each selector's specificity.

    Line numbers are 1-based.
    """
    path = Path(stylesheet)
    dialect = resolve_dialect(path, language)
    source = read_source(path)
    document = TextDocument(source, language_id=language or path.suffix.lstrip("."))

    rules = extract_rules(source, dialect, document.position_at)
    scored = [(rule, calculate(rule.selector)) for rule in rules]

    if as_json:
        payload = [
            {**rule.to_dict(), "specificity": result.to_dict()}
            for rule, result in scored
        ]
        click.echo(json.dumps(payload, indent=2))
        return

    if not scored:
        click.echo(f"No rules found in {path.name}")
        return

    for rule, result in scored:
        click.echo(f"{rule.line + 1:>5}  {result.formatted:<16}  {rule.selector}")
    click.echo()
    click.echo(f"Summary: {len(scored)} rule(s) [dialect={dialect.value}]")
