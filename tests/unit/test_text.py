"""Tests for slugify and to_markdown."""

import logging
import re

import pytest
import regex
from input_parser import DEFAULT_SLUG_RULE, InvalidInput, ParserError, slugify, to_markdown

DASHED = {"lowercase": True, "remove": None, "replacement": "-"}


class TestSlugify:
    """Test slugify."""

    def test_default_rule(self):
        """Default rule lowercases and drops everything but word chars and hyphens."""
        assert slugify("A String") == "astring"
        assert slugify("A-String") == "a-string"

    def test_override_rule(self):
        """Disabling remove keeps words apart with the separator."""
        assert slugify("A String", DASHED) == "a-string"

    def test_and_operator(self):
        """The spelled-out '&' is replaced by the and-operator."""
        assert slugify("String & String", DASHED, "e") == "string-e-string"

    def test_and_operator_replaces_every_occurrence(self):
        """Every '-and-' token is substituted."""
        assert slugify("Salt & Pepper & Oil", DASHED, "y") == "salt-y-pepper-y-oil"

    def test_and_operator_leaves_words_alone(self):
        """Only standalone 'and' tokens are substituted."""
        assert slugify("Sandy Andes", DASHED, "e") == "sandy-andes"

    def test_and_without_operator(self):
        """Without an operator the spelled-out 'and' stays."""
        assert slugify("String & String", DASHED) == "string-and-string"

    def test_symbols_spelled_before_removal(self):
        """Symbols survive the default remove rule as words."""
        assert slugify("$5 Deal") == "dollar5deal"
        assert slugify("Fish & Chips") == "fishandchips"

    def test_transliteration(self):
        """Accented text is transliterated."""
        assert slugify("Crème Brûlée") == "cremebrulee"
        assert slugify("Crème Brûlée", DASHED) == "creme-brulee"

    def test_lowercase_disabled(self):
        """lowercase=False keeps the case; 'lower' is an alias."""
        assert slugify("A String", {"lowercase": False, "remove": None}) == "A-String"
        assert slugify("A String", {"lower": False, "remove": None}) == "A-String"

    def test_custom_separator(self):
        """replacement sets the separator."""
        assert slugify("Hello World", {"remove": None, "replacement": "_"}) == "hello_world"

    def test_and_operator_only_rewrites_hyphen_token(self):
        """Only a literal '-and-' is rewritten; other separators keep 'and'."""
        rule = {"remove": None, "replacement": "_"}

        assert slugify("Salt & Pepper", rule, "e") == "salt_and_pepper"
        assert slugify("Salt & Pepper", DASHED, "e") == "salt-e-pepper"

    def test_underscore_kept(self):
        """Underscores survive the default rule and the slug engine."""
        assert slugify("A_B") == "a_b"
        assert slugify("snake_case Name") == "snake_casename"
        assert slugify("snake_case Name", DASHED) == "snake_case-name"

    def test_compiled_remove_pattern(self):
        """remove accepts a compiled pattern."""
        assert slugify("Room 101 A", {"remove": re.compile(r"[0-9]+")}) == "room-a"

    def test_extra_options_passed_through(self):
        """Unknown rule keys reach python-slugify."""
        assert slugify("Hello World", {"remove": None, "max_length": 5}) == "hello"

    def test_default_rule_untouched(self):
        """Overrides do not leak into the defaults."""
        slugify("A String", {"lowercase": False, "remove": None})

        assert DEFAULT_SLUG_RULE == {"lowercase": True, "remove": r"[^\w\-]+"}

    @pytest.mark.parametrize("text", [None, 5, ["a"], b"bytes"])
    def test_non_string_raises(self, text):
        """Non-strings raise InvalidInput."""
        with pytest.raises(InvalidInput, match="expected str"):
            slugify(text)

    def test_invalid_input_hierarchy(self):
        """InvalidInput is a ParserError and a TypeError."""
        with pytest.raises(TypeError):
            slugify(None)
        with pytest.raises(ParserError):
            slugify(None)

    def test_bad_pattern_propagates(self, caplog):
        """Engine errors are logged and re-raised unchanged."""
        with caplog.at_level(logging.ERROR, logger="input_parser.text"):
            with pytest.raises(regex.error):
                slugify("A String", {"remove": "["})

        assert "slugify('A String') failed" in caplog.text

    def test_unknown_engine_option_propagates(self):
        """Options python-slugify does not know raise TypeError."""
        with pytest.raises(TypeError):
            slugify("A String", {"no_such_option": True})


class TestToMarkdown:
    """Test to_markdown."""

    def test_paragraph(self):
        """Inline emphasis becomes Markdown; output is lowercased and capitalised."""
        assert to_markdown("<p>Hello <strong>World</strong></p>") == "Hello **world**"

    def test_atx_heading(self):
        """Headings use ATX markers."""
        result = to_markdown("<h2>Section Title</h2><p>Body Text</p>")

        assert result.startswith("## section title")
        assert result.endswith("body text")

    def test_first_character_capitalised(self):
        """Only the first character is upper-cased."""
        assert to_markdown("<p>HELLO There</p>") == "Hello there"

    def test_keep_strong_simple(self):
        """A wrapped <strong> element survives literally."""
        assert to_markdown("<p><strong>Bold</strong></p>", keep_strong=True) == "<strong>bold</strong>"

    def test_keep_strong(self, html_snippet):
        """<strong> and <a> stay as HTML; heading and paragraph tags go."""
        result = to_markdown(html_snippet, keep_strong=True)

        assert "<strong>now</strong>" in result
        assert '<a href="https://example.com/shop">our shop</a>' in result
        assert "<p>" not in result
        assert "<h1>" not in result
        assert "#" not in result
        assert "weekly deals" in result.lower()

    def test_keep_strong_keeps_blocks_apart(self):
        """Dropped heading and paragraph tags still end their block."""
        html = "<h1>Title</h1><p>Hi <strong>There</strong></p><p>Bye</p>"

        assert to_markdown(html, keep_strong=True) == "Title\n\nhi <strong>there</strong>\n\nbye"

    def test_keep_strong_heading_not_joined(self, html_snippet):
        """Heading text is separated from the following paragraph."""
        result = to_markdown(html_snippet, keep_strong=True)

        assert "dealsbuy" not in result.lower()
        assert result.startswith("Weekly deals\n\nbuy ")

    def test_without_keep_strong(self, html_snippet):
        """By default every tag is converted to Markdown."""
        result = to_markdown(html_snippet)

        assert result.startswith("# weekly deals")
        assert "**now**" in result
        assert "[our shop](https://example.com/shop)" in result
        assert "<strong>" not in result

    @pytest.mark.parametrize("value", [None, 5, ["<p>x</p>"], {"html": "<p>x</p>"}])
    def test_non_string_returned_unchanged(self, value):
        """Non-string input passes through."""
        assert to_markdown(value) == value

    def test_empty_string(self):
        """Empty HTML gives an empty string."""
        assert to_markdown("") == ""
