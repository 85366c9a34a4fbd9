"""Dialect model: the stylesheet language variants the extractor understands."""

from __future__ import annotations

from enum import Enum


class Dialect(Enum):
    """Stylesheet dialect, which decides how source text is stripped and scanned."""

    DEFAULT = "default"
    NESTED = "nested"
    VARIABLE_BEARING = "variable_bearing"
