"""css-specificity CLI entry point: Click group with subcommands."""

import logging

import click

from css_specificity import __version__


@click.group()
@click.version_option(version=__version__, prog_name="css-specificity")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """css-specificity - extract stylesheet selectors and score their specificity."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s"
        )


# Import and register subcommands
from css_specificity.cli.score import score  # noqa: E402
from css_specificity.cli.scan import scan  # noqa: E402
from css_specificity.cli.annotate import annotate  # noqa: E402
from css_specificity.cli.locate import locate  # noqa: E402

cli.add_command(score)
cli.add_command(scan)
cli.add_command(annotate)
cli.add_command(locate)
