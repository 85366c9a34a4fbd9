from __future__ import annotations

from dataclasses import dataclass

from css_specificity.model.dialect import Dialect


@dataclass(frozen=True)
class AnnotatorConfig:
    enabled: bool = True
    show_inline_comments: bool = True
    prefix: str = " // Specificity: "
    dialect: Dialect | None = None  # None = infer from the document language
