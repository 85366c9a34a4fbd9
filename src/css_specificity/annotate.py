"""Place specificity annotations on rule lines.

An annotation sits just after the opening brace of its rule when that brace
is on the rule's first line, otherwise at the end of that line.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from css_specificity.config import AnnotatorConfig
from css_specificity.document import TextDocument
from css_specificity.extraction import (
    dialect_for_language,
    extract_rules,
    is_recognized_dialect,
)
from css_specificity.model.selector import ExtractedRule
from css_specificity.model.specificity import SpecificityResult
from css_specificity.specificity import calculate

__all__ = ["Annotation", "build_annotations", "render_annotations"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Annotation:
    """Text to display at a 0-based (line, column) anchor."""

    line: int
    column: int
    selector: str
    result: SpecificityResult
    text: str


def _anchor_column(document: TextDocument, rule: ExtractedRule) -> int:
    line_text = document.line_at(rule.line)
    end = document.position_at(rule.end_offset)
    search_from = end.column if end.line == rule.line else 0
    brace = line_text.find("{", search_from)
    return brace + 1 if brace != -1 else len(line_text)


def build_annotations(
    document: TextDocument, config: AnnotatorConfig | None = None
) -> list[Annotation]:
    """Compute one annotation per extracted rule of *document*."""
    config = config or AnnotatorConfig()
    if not (config.enabled and config.show_inline_comments):
        return []
    if config.dialect is not None:
        dialect = config.dialect
    elif is_recognized_dialect(document.language_id):
        dialect = dialect_for_language(document.language_id)
    else:
        logger.debug("Not a stylesheet language: %s", document.language_id)
        return []

    annotations: list[Annotation] = []
    for rule in extract_rules(document.text, dialect, document.position_at):
        result = calculate(rule.selector)
        annotations.append(
            Annotation(
                line=rule.line,
                column=_anchor_column(document, rule),
                selector=rule.selector,
                result=result,
                text=f"{config.prefix}{result.formatted}",
            )
        )
    return annotations


def render_annotations(document: TextDocument, annotations: list[Annotation]) -> str:
    """Return the document text with every annotation inserted inline."""
    lines = document.text.split("\n")
    for annotation in sorted(
        annotations, key=lambda a: (a.line, a.column), reverse=True
    ):
        line = lines[annotation.line]
        lines[annotation.line] = (
            line[: annotation.column] + annotation.text + line[annotation.column :]
        )
    return "\n".join(lines)
