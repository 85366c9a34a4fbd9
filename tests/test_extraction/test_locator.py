"""Tests for locating cleaned selectors in raw stylesheet text."""

from css_specificity.extraction.locator import locate_selector
from css_specificity.model.selector import Span


def _found(text: str, selector: str) -> str:
    span = locate_selector(text, selector)
    assert span is not None
    return text[span.start:span.end]


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------


class TestExactMatch:
    def test_tight_span(self):
        text = "\n.button {\n  color: red;\n}"
        assert locate_selector(text, ".button") == Span(1, 8)

    def test_first_rule_wins(self):
        text = ".a { }\n.a { }"
        assert locate_selector(text, ".a") == Span(0, 2)

    def test_case_insensitive(self):
        assert _found("DIV.Box { }", "div.box") == "DIV.Box"

    def test_regex_metacharacters_escaped(self):
        text = 'a[href$=".pdf"]:not(.x) + b { }'
        assert _found(text, 'a[href$=".pdf"]:not(.x) + b') == 'a[href$=".pdf"]:not(.x) + b'


class TestTokenFlexibleMatch:
    def test_comment_between_tokens(self):
        text = ".nav /* main */ .item { }"
        assert _found(text, ".nav .item") == ".nav /* main */ .item"

    def test_extra_whitespace_between_tokens(self):
        text = ".nav\n    .item\n{ }"
        assert _found(text, ".nav .item") == ".nav\n    .item"


class TestTrailingCommentMatch:
    def test_single_token_with_trailing_comment(self):
        text = ".button /* primary */ {\n}"
        assert _found(text, ".button") == ".button /* primary */"


class TestFallback:
    def test_occurrence_extended_to_brace(self):
        text = ".a:hover/* x */::after { }"
        assert _found(text, ".a:hover") == ".a:hover/* x */::after"

    def test_no_brace_after_occurrence(self):
        assert locate_selector(".a { } .b", ".b") is None


# ---------------------------------------------------------------------------
# Comma lists
# ---------------------------------------------------------------------------


class TestCommaLists:
    def test_multiline_list_anchored_on_first_clause(self):
        text = "\n.nav-item,\n.nav-link,\n.nav-button {\n  display: block;\n}"
        assert _found(text, ".nav-item, .nav-link, .nav-button") == ".nav-item,\n.nav-link,\n.nav-button"

    def test_list_with_interleaved_comments(self):
        text = "h1, /* big */\nh2 { }"
        assert _found(text, "h1, h2") == "h1, /* big */\nh2"


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------


class TestNotFound:
    def test_absent_selector(self):
        assert locate_selector(".a { }", ".missing") is None

    def test_empty_selector(self):
        assert locate_selector(".a { }", "") is None
        assert locate_selector(".a { }", "   ") is None

    def test_empty_text(self):
        assert locate_selector("", ".a") is None
