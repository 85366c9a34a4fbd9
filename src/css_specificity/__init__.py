"""css_specificity: extract stylesheet selectors and score their specificity."""

__version__ = "0.1.0"

from css_specificity.errors import CssSpecificityError, UnsupportedLanguageError  # noqa: E402
from css_specificity.extraction import (  # noqa: E402
    clean_selector,
    dialect_for_language,
    extract_rules,
    extract_selectors,
    is_recognized_dialect,
    locate_selector,
)
from css_specificity.model import (  # noqa: E402
    Dialect,
    ExtractedRule,
    ExtractedSelector,
    Position,
    SpecificityResult,
    SpecificityVector,
)
from css_specificity.specificity import calculate_specificity  # noqa: E402

__all__ = [
    "__version__",
    # extraction
    "extract_rules",
    "extract_selectors",
    "clean_selector",
    "locate_selector",
    "is_recognized_dialect",
    "dialect_for_language",
    # scoring
    "calculate_specificity",
    # models
    "Dialect",
    "Position",
    "ExtractedSelector",
    "ExtractedRule",
    "SpecificityVector",
    "SpecificityResult",
    # errors
    "CssSpecificityError",
    "UnsupportedLanguageError",
]
