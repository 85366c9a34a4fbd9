from css_specificity.extraction.cleaner import clean_selector, is_valid_selector
from css_specificity.extraction.dialects import (
    DialectPolicy,
    dialect_for_language,
    dialect_for_path,
    get_policy,
    is_recognized_dialect,
)
from css_specificity.extraction.locator import locate_selector
from css_specificity.extraction.matcher import scan_blocks
from css_specificity.extraction.pipeline import extract_rules, extract_selectors
from css_specificity.extraction.stripper import mask_source, strip_comments

__all__ = [
    "extract_selectors",
    "extract_rules",
    "clean_selector",
    "is_valid_selector",
    "locate_selector",
    "scan_blocks",
    "mask_source",
    "strip_comments",
    "DialectPolicy",
    "get_policy",
    "dialect_for_language",
    "dialect_for_path",
    "is_recognized_dialect",
]
