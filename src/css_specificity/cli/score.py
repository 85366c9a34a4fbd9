"""CLI command: css-specificity score -- score selectors given on the command line."""

from __future__ import annotations

import json

import click

from css_specificity.specificity import calculate


@click.command()
@click.argument("selectors", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print results as JSON.")
def score(selectors: tuple[str, ...], as_json: bool) -> None:
    """Print the specificity of each SELECTOR.

    A comma-separated list scores as its highest-ranking clause.
    """
    results = [(selector, calculate(selector)) for selector in selectors]

    if as_json:
        payload = [{"selector": s, **result.to_dict()} for s, result in results]
        click.echo(json.dumps(payload, indent=2))
        return

    width = max(len(s) for s, _ in results)
    for selector, result in results:
        click.echo(f"{selector.ljust(width)}  {result.formatted}")
