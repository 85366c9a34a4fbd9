"""css_specificity model layer -- public type re-exports."""

from css_specificity.model.dialect import Dialect
from css_specificity.model.selector import (
    ExtractedRule,
    ExtractedSelector,
    Position,
    RuleBlock,
    Span,
)
from css_specificity.model.specificity import (
    ZERO,
    SpecificityResult,
    SpecificityVector,
)

__all__ = [
    # dialect
    "Dialect",
    # selector
    "Position",
    "RuleBlock",
    "Span",
    "ExtractedSelector",
    "ExtractedRule",
    # specificity
    "SpecificityVector",
    "SpecificityResult",
    "ZERO",
]
