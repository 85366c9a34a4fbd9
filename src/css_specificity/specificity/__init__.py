from css_specificity.specificity.calculator import (
    calculate,
    calculate_single,
    compare_specificity,
    split_selector_list,
)

calculate_specificity = calculate

__all__ = [
    "calculate",
    "calculate_single",
    "calculate_specificity",
    "compare_specificity",
    "split_selector_list",
]
