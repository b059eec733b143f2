"""Tests for masking function members out of literal text."""

import pytest

from cssvars.evaluator.functions import FUNCTION_MARKER, mask_functions


class TestValuePosition:
    @pytest.mark.parametrize(
        "value",
        [
            "function () { return 1; }",
            "function named(a, b) { return { a, b }; }",
            "async function () { await x; }",
            "() => {}",
            "x => x * 2",
            "(a, b) => Math.max(a, b)",
            "() => ({ a: 1 })",
            "async (x) => { if (x) { return 1 } }",
        ],
    )
    def test_function_value_is_masked(self, value):
        text = f'{{"f": {value}, "b": "2"}}'
        assert mask_functions(text) == f'{{"f": {FUNCTION_MARKER}, "b": "2"}}'

    def test_expression_body_stops_at_closing_brace(self):
        assert mask_functions('{"f": () => 1}') == '{"f": @function}'

    def test_array_elements(self):
        assert mask_functions('{"a": [() => 1, "x"]}') == '{"a": [@function, "x"]}'

    def test_strings_inside_bodies(self):
        text = '{"f": () => ",}", "b": "2"}'
        assert mask_functions(text) == '{"f": @function, "b": "2"}'


class TestMemberPosition:
    def test_method_shorthand(self):
        text = '{"a": "1", fn(x) { if (x) { return 1 } return 2 }}'
        assert mask_functions(text) == '{"a": "1", "fn": @function}'

    def test_async_method(self):
        assert mask_functions("{async load() { await x; }}") == '{"load": @function}'


class TestUntouched:
    @pytest.mark.parametrize(
        "text",
        [
            '{"a": "() => 1", "b": "function () {}"}',
            '{"a": true, "b": undefined, "c": -2}',
            '{"a": COLORS.primary}',
            '{"a": (1)}',
            '{"a": {"b": "c"}}',
        ],
    )
    def test_data_is_left_alone(self, text):
        assert mask_functions(text) == text
