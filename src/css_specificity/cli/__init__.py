from css_specificity.cli.main import cli

__all__ = ["cli"]
