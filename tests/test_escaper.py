"""Tests for escaping raw values into resource text."""

import pytest

from resvalues.escaping import escape, unescape


class TestEscape:
    """Tests for escape()."""

    def test_empty(self):
        """Test that the empty string stays empty."""
        assert escape("") == ""

    def test_plain_text(self):
        """Test that ordinary text is unchanged."""
        assert escape("Hello World") == "Hello World"

    def test_xml_special_characters(self):
        """Test entity encoding of < and &."""
        assert escape("<") == "&lt;"
        assert escape("&") == "&amp;"
        assert escape("a < b & c") == "a &lt; b &amp; c"

    def test_xml_special_characters_disabled(self):
        """Test that entity encoding can be turned off."""
        assert escape("a < b & c", escape_xml=False) == "a < b & c"
        assert escape("'<'", escape_xml=False) == "\\'<\\'"

    def test_quotes(self):
        """Test escaping of single and double quotes."""
        assert escape("'") == "\\'"
        assert escape("\"") == "\\\""
        assert escape("Don't say \"no\"") == "Don\\'t say \\\"no\\\""

    def test_quotes_with_edge_whitespace(self):
        """Test that edge whitespace is kept by quoting the whole value."""
        assert escape(" ' ") == "\" ' \""

    def test_preserve_whitespace(self):
        """Test quoting of leading and trailing whitespace."""
        assert escape("at end  ") == "\"at end  \""
        assert escape("  at begin") == "\"  at begin\""
        assert escape("\tTabbed") == "\"\tTabbed\""

    def test_quoted_escapes_quotes_and_backslashes(self):
        """Test that a quoted value cannot end its region early."""
        assert escape(" say \"hi\" ") == "\" say \\\"hi\\\" \""
        assert escape(" a\\b ") == "\" a\\\\b \""

    def test_quoted_keeps_other_characters(self):
        """Test that nothing else is substituted inside quotes."""
        assert escape(" a\nb'<& ") == "\" a\nb'<& \""

    def test_sigils_only_at_beginning(self):
        """Test escaping of @ and ? at position 0 only."""
        assert escape("@text") == "\\@text"
        assert escape("a@text") == "a@text"
        assert escape("?text") == "\\?text"
        assert escape("a?text") == "a?text"

    def test_sigil_inside_quotes(self):
        """Test that quoting already neutralizes a sigil."""
        assert escape(" ?text") == "\" ?text\""
        assert escape("@text ") == "\"@text \""

    def test_sigil_followed_by_special_character(self):
        """Test a sigil followed by characters that need escaping."""
        assert escape("@'") == "\\@\\'"
        assert escape("?\tx") == "\\?\\tx"

    def test_java_escape_sequences(self):
        """Test backslash escapes for newline, tab and backslash."""
        assert escape("\n") == "\\n"
        assert escape("\t") == "\\t"
        assert escape("\\") == "\\\\"
        assert escape("a\nb\tc") == "a\\nb\\tc"

    def test_all_whitespace_is_not_quoted(self):
        """Test that a value of only whitespace is escaped per character."""
        assert escape("\n\t") == "\\n\\t"
        assert escape("  ") == "  "


class TestEscapeRoundTrip:
    """Tests that escaped values unescape to the original."""

    @pytest.mark.parametrize("raw", [
        "Hello",
        "@string/name",
        "?attr",
        "It's",
        "Say \"cheese\"",
        "a < b && c",
        "&lt;",
        "line\nbreak\ttab",
        "back\\slash",
        "\\n",
        "\n",
        "  ",
        "",
    ])
    def test_unquoted_round_trip(self, raw):
        """Test values that escape without quotes."""
        assert unescape(escape(raw), True, False) == raw

    @pytest.mark.parametrize("raw", [
        " ' ",
        "at end  ",
        "  at begin",
        " ?text",
        " say \"hi\" ",
        " back\\slash ",
        "\n multi\nline \n",
        "  \\\"  ",
    ])
    def test_quoted_round_trip(self, raw):
        """Test values quoted for edge whitespace."""
        escaped = escape(raw)
        assert escaped.startswith("\"")
        assert unescape(escaped, True, True) == raw
