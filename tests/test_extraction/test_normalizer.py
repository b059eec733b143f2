"""Tests for the literal normalization steps."""

import json

import pytest

from cssvars.extraction.normalizer import (
    convert_quotes,
    normalize_literal,
    quote_keys,
    resolve_interpolations,
    strip_comments,
    strip_trailing_commas,
)


class TestResolveInterpolations:
    def test_simple_reference(self):
        assert resolve_interpolations("${COLORS.primary}") == "var(--colors-primary)"

    def test_camel_case_property(self):
        assert resolve_interpolations("${COLORS.primaryDark}") == "var(--colors-primary-dark)"

    def test_whitespace_inside_braces(self):
        assert resolve_interpolations("${ COLORS.primary }") == "var(--colors-primary)"

    def test_inside_string(self):
        assert resolve_interpolations('"${COLORS.primary}"') == '"var(--colors-primary)"'

    def test_several_references(self):
        text = "`${SIZES.gap} ${SIZES.gapLarge}`"
        assert resolve_interpolations(text) == "`var(--sizes-gap) var(--sizes-gap-large)`"

    def test_lowercase_prefix_untouched(self):
        assert resolve_interpolations("${colors.primary}") == "${colors.primary}"


class TestQuoteKeys:
    def test_bare_keys(self):
        assert quote_keys('{a: 1, b_2: "x"}') == '{"a": 1, "b_2": "x"}'

    def test_numeric_key(self):
        assert quote_keys('{1: "x"}') == '{"1": "x"}'

    def test_quoted_keys_untouched(self):
        assert quote_keys("{\"a\": 1, 'b': 2}") == "{\"a\": 1, 'b': 2}"

    def test_colon_inside_value_untouched(self):
        assert quote_keys('{url: "https://x.dev:8080"}') == '{"url": "https://x.dev:8080"}'

    def test_space_before_colon_kept(self):
        assert quote_keys("{a : 1}") == '{"a" : 1}'


class TestConvertQuotes:
    def test_single_quotes(self):
        assert convert_quotes("{'a': 'b'}") == '{"a": "b"}'

    def test_escaped_single_quote(self):
        assert convert_quotes("{'a': 'it\\'s'}") == '{"a": "it\'s"}'

    def test_double_quote_inside_single(self):
        assert convert_quotes("'say \"hi\"'") == '"say \\"hi\\""'

    def test_single_inside_double_untouched(self):
        assert convert_quotes('"\'Inter\', sans-serif"') == '"\'Inter\', sans-serif"'

    def test_template_literal(self):
        assert convert_quotes("`a\nb`") == '"a\\nb"'

    def test_apostrophe_in_comment_untouched(self):
        text = "{a: 1 // don't 'quote'\n}"
        assert convert_quotes(text) == text


class TestStripTrailingCommas:
    def test_object(self):
        assert strip_trailing_commas('{"a": 1,}') == '{"a": 1}'

    def test_array_with_whitespace(self):
        assert strip_trailing_commas("[1, 2, \n]") == "[1, 2]"

    def test_inside_string_untouched(self):
        assert strip_trailing_commas('{"a": ",}"}') == '{"a": ",}"}'


class TestStripComments:
    def test_line_and_block(self):
        text = '{"a": "http://x", // c\n "b": 1 /* d */}'
        assert strip_comments(text) == '{"a": "http://x", \n "b": 1 }'

    def test_multiline_block(self):
        assert strip_comments('{/* a\n b */"x": 1}') == '{"x": 1}'


class TestNormalizeLiteral:
    def test_full_pipeline_yields_json(self):
        raw = "{\n  primary: '#f00', // main\n  accent: `${COLORS.primary}`,\n}"
        assert json.loads(normalize_literal(raw)) == {
            "primary": "#f00",
            "accent": "var(--colors-primary)",
        }

    def test_comment_containing_key_like_text(self):
        raw = "{\n  // note: keep\n  gap: '1rem',\n}"
        assert json.loads(normalize_literal(raw)) == {"gap": "1rem"}

    def test_url_survives(self):
        raw = "{ link: 'https://example.com/a:b' }"
        assert json.loads(normalize_literal(raw)) == {"link": "https://example.com/a:b"}

    @pytest.mark.parametrize(
        "raw",
        [
            "{a: 1}",
            "{ 'a' : 1 , }",
            '{"a": 1 /* one */}',
        ],
    )
    def test_equivalent_spellings(self, raw):
        assert json.loads(normalize_literal(raw)) == {"a": 1}
