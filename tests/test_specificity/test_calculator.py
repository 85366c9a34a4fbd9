"""Tests for the specificity calculator."""

import pytest

from css_specificity.model.specificity import SpecificityResult, SpecificityVector
from css_specificity.specificity import (
    calculate,
    calculate_single,
    calculate_specificity,
    compare_specificity,
    split_selector_list,
)


def _vector(selector: str) -> list[int]:
    return calculate(selector).vector.as_list()


# ---------------------------------------------------------------------------
# Basic selectors
# ---------------------------------------------------------------------------


class TestBasicSelectors:
    def test_universal_is_zero(self):
        result = calculate("*")
        assert result.vector.as_list() == [0, 0, 0, 0]
        assert result.weight == 0

    @pytest.mark.parametrize("selector", ["div", "span", "h1", "custom-element"])
    def test_type_selector(self, selector):
        assert _vector(selector) == [0, 0, 0, 1]

    @pytest.mark.parametrize("selector", [".x", ".button", ".nav-item", ".a_b"])
    def test_class_selector(self, selector):
        assert _vector(selector) == [0, 0, 1, 0]

    @pytest.mark.parametrize("selector", ["#x", "#main", "#special-btn"])
    def test_id_selector(self, selector):
        assert _vector(selector) == [0, 1, 0, 0]

    def test_unicode_identifiers(self):
        assert _vector(".café") == [0, 0, 1, 0]
        assert _vector("#überschrift") == [0, 1, 0, 0]
        assert _vector(".按钮") == [0, 0, 1, 0]


# ---------------------------------------------------------------------------
# Attribute selectors
# ---------------------------------------------------------------------------


class TestAttributeSelectors:
    def test_bare_attribute(self):
        assert _vector("[data-role]") == [0, 0, 1, 0]

    def test_attribute_with_value(self):
        assert _vector('[type="text"]') == [0, 0, 1, 0]

    def test_multiple_attributes(self):
        result = calculate('input[type="text"][required]')
        assert result.vector.as_list() == [0, 0, 2, 1]
        assert result.weight == 21

    def test_quoted_value_cannot_leak_syntax(self):
        # ".x" and "#y" inside the string are not selectors.
        assert _vector('a[title=".x #y"]') == [0, 0, 1, 1]


# ---------------------------------------------------------------------------
# Pseudo-classes and pseudo-elements
# ---------------------------------------------------------------------------


class TestPseudoClasses:
    def test_simple(self):
        assert calculate("a:hover").weight == 11

    def test_chained(self):
        assert _vector("a:hover:focus") == [0, 0, 2, 1]

    def test_functional(self):
        assert _vector("li:nth-child(2n+1)") == [0, 0, 1, 1]
        assert _vector("tr:nth-of-type(odd)") == [0, 0, 1, 1]

    def test_nested_parentheses_in_argument(self):
        assert _vector("li:is(:nth-child(2))") == [0, 0, 1, 1]


class TestPseudoElements:
    def test_single(self):
        assert _vector("p::before") == [0, 0, 0, 2]

    def test_multiple(self):
        assert _vector("p::first-line::first-letter") == [0, 0, 0, 3]

    def test_vendor_prefixed(self):
        assert _vector("div::-webkit-scrollbar") == [0, 0, 0, 2]

    def test_counted_before_pseudo_classes(self):
        assert _vector("a:hover::after") == [0, 0, 1, 2]


# ---------------------------------------------------------------------------
# :not()
# ---------------------------------------------------------------------------


class TestNegation:
    def test_class_argument(self):
        result = calculate(".nav-item:not(.disabled)")
        assert result.vector.as_list() == [0, 0, 2, 0]
        assert result.weight == 20

    def test_id_argument(self):
        result = calculate("div:not(#special)")
        assert result.vector.as_list() == [0, 1, 0, 1]
        assert result.weight == 101

    def test_type_argument(self):
        assert _vector(".item:not(span)") == [0, 0, 1, 1]

    def test_multiple_negations(self):
        assert _vector("input:not([disabled]):not(.hidden)") == [0, 0, 2, 1]

    def test_nested_negation(self):
        assert _vector("a:not(:not(.x))") == [0, 0, 1, 1]

    def test_functional_argument(self):
        assert _vector("li:not(:nth-child(2))") == [0, 0, 1, 1]

    def test_empty_negation_counts_nothing(self):
        assert _vector("a:not()") == [0, 0, 0, 1]


# ---------------------------------------------------------------------------
# Combinators and complex selectors
# ---------------------------------------------------------------------------


class TestCombinators:
    @pytest.mark.parametrize(
        "selector",
        [".a .b", ".a > .b", ".a + .b", ".a ~ .b", ".a>.b", ".a+.b"],
    )
    def test_two_classes(self, selector):
        assert _vector(selector) == [0, 0, 2, 0]

    def test_id_and_class(self):
        assert calculate("#sidebar .button").weight == 110

    def test_compound(self):
        assert _vector("div.container") == [0, 0, 1, 1]

    def test_universal_in_compound(self):
        assert _vector("* > .a") == [0, 0, 1, 0]
        assert _vector("*.a") == [0, 0, 1, 0]


class TestComplexSelectors:
    def test_everything(self):
        result = calculate('div > p + span[data-role="tooltip"]:hover::before')
        assert result.vector.as_list() == [0, 0, 2, 4]
        assert result.weight == 24

    def test_id_classes_and_pseudo(self):
        assert _vector("#header .nav-menu .item.active:hover") == [0, 1, 4, 0]

    def test_type_and_functional_pseudo(self):
        assert _vector("body .header .nav .item:nth-child(2n+1)") == [0, 0, 4, 1]


# ---------------------------------------------------------------------------
# Selector lists
# ---------------------------------------------------------------------------


class TestSelectorLists:
    def test_highest_clause_wins(self):
        result = calculate(".a, #b, div.c")
        assert result.vector.as_list() == [0, 1, 0, 0]
        assert result.weight == 100

    def test_complex_clauses(self):
        assert calculate(".nav .item, #main .button, body div").weight == 110

    def test_tie_keeps_first_maximum(self):
        assert calculate(".a, .b").vector == SpecificityVector(class_like=1)

    def test_comma_inside_parentheses_does_not_split(self):
        assert split_selector_list(":is(.a, .b) p, div") == [":is(.a, .b) p", " div"]

    def test_comma_inside_attribute_does_not_split(self):
        assert split_selector_list('[data-x="a,b"], p') == ['[data-x="a,b"]', " p"]


# ---------------------------------------------------------------------------
# Degenerate input
# ---------------------------------------------------------------------------


class TestEdgeCases:
    @pytest.mark.parametrize("selector", ["", "   ", "\n\t", "/* only */", ","])
    def test_zero_result(self, selector):
        result = calculate(selector)
        assert result.vector.as_list() == [0, 0, 0, 0]
        assert result.weight == 0

    def test_comments_ignored(self):
        assert calculate(".button /* comment */ .active").weight == 20

    def test_extra_whitespace(self):
        assert calculate("  .container    .button  ").weight == 20

    def test_inline_always_zero(self):
        assert calculate("#a #b .c d").vector.inline == 0

    def test_no_exception_on_garbage(self):
        result = calculate("}{)(][:::##..")
        assert isinstance(result, SpecificityResult)


# ---------------------------------------------------------------------------
# Formatting and comparison
# ---------------------------------------------------------------------------


class TestFormatting:
    def test_formatted(self):
        assert calculate("#main .button:hover").formatted == "(0,1,2,0) = 120"

    def test_zero_formatted(self):
        assert calculate("*").formatted == "(0,0,0,0) = 0"

    def test_complex_formatted(self):
        assert calculate("div.container#main:hover::before").formatted == "(0,1,2,2) = 122"

    def test_to_dict(self):
        assert calculate("#x").to_dict() == {
            "vector": [0, 1, 0, 0],
            "weight": 100,
            "formatted": "(0,1,0,0) = 100",
        }

    def test_public_alias(self):
        assert calculate_specificity is calculate


class TestCompare:
    def test_first_difference_wins(self):
        one_id = SpecificityVector(ids=1)
        many_classes = SpecificityVector(class_like=15)
        assert compare_specificity(one_id, many_classes) == 1
        assert compare_specificity(many_classes, one_id) == -1

    def test_equal(self):
        assert compare_specificity(calculate_single(".a"), calculate_single(".b")) == 0

    def test_weight(self):
        assert SpecificityVector(0, 1, 2, 3).weight == 123
