"""Tests for SCSS variable extraction."""

import pytest

from scss_formatter.variables import VariableExtractor, extract_variables


class TestVariableExtraction:
    """Test `$name: value;` declaration extraction."""

    def test_extracts_declarations_in_order(self):
        scss = "$primary: #ff0000;\n$bg: #fff;\n$font-size: 14px;"

        variables = extract_variables(scss)

        assert variables == {'primary': '#ff0000', 'bg': '#fff', 'font-size': '14px'}
        assert list(variables.keys()) == ['primary', 'bg', 'font-size']

    def test_values_are_trimmed_and_case_preserved(self):
        variables = extract_variables("$accent:    #ABCDEF   ;")

        assert variables == {'accent': '#ABCDEF'}

    def test_value_without_space_after_colon(self):
        assert extract_variables("$a:#000;") == {'a': '#000'}

    def test_value_runs_to_next_semicolon(self):
        variables = extract_variables("$stack: 'Helvetica Neue', Arial, sans-serif;")

        assert variables == {'stack': "'Helvetica Neue', Arial, sans-serif"}

    def test_later_duplicate_overwrites(self):
        variables = extract_variables("$a: #111; $b: #222; $a: #333;")

        assert variables == {'a': '#333', 'b': '#222'}

    def test_names_are_case_sensitive(self):
        variables = extract_variables("$Primary: #111; $primary: #222;")

        assert variables == {'Primary': '#111', 'primary': '#222'}

    def test_no_declarations_yields_empty_table(self):
        assert extract_variables(".btn { color: red; }") == {}
        assert extract_variables("") == {}

    @pytest.mark.parametrize("scss", [
        "$broken #fff",
        "$missing-semicolon: #fff",
        "$: #fff;",
    ])
    def test_malformed_declarations_are_skipped(self, scss):
        assert extract_variables(scss) == {}

    def test_malformed_fragment_does_not_hide_later_declarations(self):
        variables = extract_variables("$broken #fff\n$ok: #000;")

        assert variables == {'ok': '#000'}

    def test_commented_declarations_are_still_extracted(self):
        """Comments are not recognised; anything shaped like a declaration counts."""
        variables = extract_variables("// $old: #123;\n/* $legacy: #456; */\n$new: #789;")

        assert variables == {'old': '#123', 'legacy': '#456', 'new': '#789'}

    def test_extraction_is_repeatable(self):
        scss = "$a: #000;\n$b: 1px solid #fff;"
        extractor = VariableExtractor()

        assert extractor.extract(scss) == extractor.extract(scss)
        assert extract_variables(scss) == extract_variables(scss)
