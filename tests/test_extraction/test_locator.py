"""Tests for locating object literals in source text."""

import pytest

from cssvars.extraction.locator import (
    STRATEGIES,
    locate_literal,
    match_declaration,
    match_export_const,
    match_export_object,
)
from cssvars.scanning import find_closing_bracket


# ---------------------------------------------------------------------------
# Export shapes
# ---------------------------------------------------------------------------


class TestExportConst:
    def test_named_export(self):
        source = 'export const THEME = { a: "1" };'
        assert locate_literal(source, "THEME") == '{ a: "1" }'

    def test_multiline(self):
        source = "export const THEME = {\n  a: 1,\n  b: 2,\n};\n"
        assert locate_literal(source, "THEME") == "{\n  a: 1,\n  b: 2,\n}"

    def test_type_annotation(self):
        source = 'export const THEME: Record<string, string> = { a: "1" } as const;'
        assert locate_literal(source, "THEME") == '{ a: "1" }'

    def test_without_semicolon(self):
        source = "export const THEME = { a: 1 }\nexport const OTHER = { b: 2 }"
        assert locate_literal(source, "OTHER") == "{ b: 2 }"


class TestExportObject:
    def test_default_export(self):
        source = "export default {\n  THEME: { a: 1 },\n};"
        assert locate_literal(source, "THEME") == "{ a: 1 }"

    def test_aggregate_export(self):
        source = "export { OTHER: { x: 1 }, THEME: { a: 1 } };"
        assert locate_literal(source, "THEME") == "{ a: 1 }"

    def test_reexport_without_literal_is_ignored(self):
        assert match_export_object("export { THEME };", "THEME") is None


class TestDeclaration:
    @pytest.mark.parametrize("keyword", ["const", "let", "var"])
    def test_keywords(self, keyword):
        source = f"{keyword} THEME = {{ a: 1 }};"
        assert locate_literal(source, "THEME") == "{ a: 1 }"

    def test_not_exported(self):
        source = "function f() {}\nconst THEME = { a: 1 };\nexport default THEME;"
        assert locate_literal(source, "THEME") == "{ a: 1 }"


# ---------------------------------------------------------------------------
# Priority and name matching
# ---------------------------------------------------------------------------


class TestPriority:
    def test_strategies_are_ordered(self):
        assert STRATEGIES == [match_export_const, match_export_object, match_declaration]

    def test_named_export_beats_declaration(self):
        source = "const THEME = { a: 1 };\nexport const THEME = { b: 2 };"
        assert locate_literal(source, "THEME") == "{ b: 2 }"

    def test_export_object_beats_declaration(self):
        source = "const THEME = { a: 1 };\nexport default { THEME: { b: 2 } };"
        assert locate_literal(source, "THEME") == "{ b: 2 }"


class TestNameMatching:
    def test_longer_name_does_not_match(self):
        assert locate_literal("const THEME_DARK = { a: 1 };", "THEME") is None

    def test_dollar_name(self):
        assert locate_literal("const $theme = { a: 1 };", "$theme") == "{ a: 1 }"

    def test_missing_constant(self):
        assert locate_literal("export const OTHER = { a: 1 };", "THEME") is None

    def test_non_object_value(self):
        assert locate_literal('export const THEME = "dark";', "THEME") is None


# ---------------------------------------------------------------------------
# Balanced brace scanning
# ---------------------------------------------------------------------------


class TestBalancedBraces:
    def test_nested_object_is_included(self):
        source = "const THEME = { a: { b: 1 }, c: 2 };"
        assert locate_literal(source, "THEME") == "{ a: { b: 1 }, c: 2 }"

    def test_braces_inside_strings(self):
        source = "const THEME = { a: \"}\", b: '{', c: `}` };"
        assert locate_literal(source, "THEME") == "{ a: \"}\", b: '{', c: `}` }"

    def test_braces_inside_comments(self):
        source = "const THEME = {\n  // }\n  a: 1, /* { */\n};"
        assert locate_literal(source, "THEME") == "{\n  // }\n  a: 1, /* { */\n}"

    def test_escaped_quote_in_string(self):
        source = 'const THEME = { a: "\\"}" };'
        assert locate_literal(source, "THEME") == '{ a: "\\"}" }'

    def test_unbalanced_is_not_found(self):
        assert locate_literal("const THEME = { a: 1", "THEME") is None

    def test_find_closing_bracket_index(self):
        text = "{ {} }"
        assert find_closing_bracket(text, 0) == 5
        assert find_closing_bracket(text, 2) == 3

    def test_find_closing_bracket_parens_and_brackets(self):
        text = 'f(a, ")", (b)) [1, [2]]'
        assert find_closing_bracket(text, 1) == 13
        assert find_closing_bracket(text, 15) == 22


# ---------------------------------------------------------------------------
# Fixture files
# ---------------------------------------------------------------------------


class TestFixtures:
    def test_theme_fixture(self, fixtures_dir):
        source = (fixtures_dir / "theme.ts").read_text()
        literal = locate_literal(source, "THEME")
        assert literal.startswith("{\n  // brand")
        assert literal.endswith("onClick: () => {},\n}")

    def test_default_export_fixture(self, fixtures_dir):
        source = (fixtures_dir / "default_export.js").read_text()
        assert locate_literal(source, "TOKENS") == "{\n    gap: \"1rem\",\n    'zIndex': 10,\n  }"
