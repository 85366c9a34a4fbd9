"""Selector extraction pipeline: mask, scan, validate, clean."""

from __future__ import annotations

import logging
from typing import Callable

from css_specificity.extraction.cleaner import clean_selector, is_valid_selector
from css_specificity.extraction.dialects import DialectPolicy, get_policy
from css_specificity.extraction.matcher import scan_blocks
from css_specificity.extraction.stripper import mask_source, strip_comments
from css_specificity.model.dialect import Dialect
from css_specificity.model.selector import (
    ExtractedRule,
    ExtractedSelector,
    Position,
    RuleBlock,
)

__all__ = ["extract_selectors", "extract_rules"]

logger = logging.getLogger(__name__)

PositionAt = Callable[[int], Position]


def _candidate(block: RuleBlock, policy: DialectPolicy) -> str | None:
    """Return the cleaned selector for *block*, or None if it is not reported."""
    raw = strip_comments(block.prelude, line_comments=policy.line_comments).strip()
    if block.depth:
        if not policy.report_nested:
            return None
        if not raw.startswith(policy.nested_prefixes):
            logger.debug("Skipping nested prelude %r at %d", raw, block.start)
            return None
    if raw.startswith(policy.skip_prefixes) or not is_valid_selector(raw):
        logger.debug("Rejected prelude %r at %d", raw, block.start)
        return None
    return clean_selector(raw) or None


def extract_selectors(
    text: str, dialect: Dialect = Dialect.DEFAULT
) -> list[ExtractedSelector]:
    """Extract style-rule selectors from *text* with their source spans.

    Results are in document order. In the nested dialect a nested selector
    whose cleaned text was already reported is suppressed. Malformed input
    yields a best-effort result, never an error.
    """
    policy = get_policy(dialect)
    masked = mask_source(text, policy)

    candidates: list[tuple[RuleBlock, str]] = []
    for block in scan_blocks(masked, text):
        selector = _candidate(block, policy)
        if selector:
            candidates.append((block, selector))

    seen = {selector for block, selector in candidates if block.depth == 0}
    results: list[ExtractedSelector] = []
    for block, selector in candidates:
        if block.depth:
            if selector in seen:
                logger.debug("Suppressed duplicate nested selector %r", selector)
                continue
            seen.add(selector)
        results.append(
            ExtractedSelector(
                selector_text=selector,
                start_offset=block.start,
                end_offset=block.end,
            )
        )

    logger.debug(
        "Extracted %d selector(s) from %d candidate block(s) [dialect=%s]",
        len(results),
        len(candidates),
        dialect.value,
    )
    return results


def extract_rules(
    document_text: str, dialect: Dialect, position_at: PositionAt
) -> list[ExtractedRule]:
    """Extract selectors and attach the line number of each span's start.

    *position_at* comes from the host document model; line numbers are
    whatever it reports.
    """
    return [
        ExtractedRule(
            selector=found.selector_text,
            start_offset=found.start_offset,
            end_offset=found.end_offset,
            line=position_at(found.start_offset).line,
        )
        for found in extract_selectors(document_text, dialect)
    ]
