"""
Pygments lexer tests

Checks that SlidemarkLexer assigns the expected token types to the main
constructs of the markup.
"""

import pytest
from pygments.token import Generic, Keyword, Name, Number, Operator, Punctuation, String, Token

from slidemark.lib.lexer import SlidemarkLexer, get_lexer


def tokens(source):
    return list(get_lexer().get_tokens(source))


class TestLexerMetadata:
    """Test lexer registration attributes"""

    def test_names(self):
        """Aliases and filename patterns"""
        assert SlidemarkLexer.name == "Slidemark"
        assert "slidemark" in SlidemarkLexer.aliases
        assert "*.smk" in SlidemarkLexer.filenames

    def test_get_lexer(self):
        """Factory returns a fresh lexer"""
        assert isinstance(get_lexer(), SlidemarkLexer)


class TestStructureTokens:
    """Test line-level constructs"""

    @pytest.mark.parametrize(
        "line, token",
        [
            ("---", Keyword.Declaration),
            ("---t", Keyword),
            ("---t3", Keyword),
            ("---tx", Keyword),
            ("t---", Keyword),
            ("----", Punctuation),
            ("----v", Punctuation),
            ("## Title", Generic.Heading),
            ("> quoted", Generic.Emph),
        ],
    )
    def test_whole_line_tokens(self, line, token):
        """Each structural line is a single token"""
        assert (token, line) in tokens(line + "\n")

    def test_list_markers(self):
        """Ordered and unordered markers"""
        result = tokens("1. one\n  - two\n")
        assert (Number, "1. ") in result
        assert (Keyword.Pseudo, "- ") in result

    def test_code_block(self):
        """Fenced block is one token"""
        source = "```python\nx = 1\n*y*\n```\n"
        assert (String.Backtick, "```python\nx = 1\n*y*\n```") in tokens(source)

    def test_image(self):
        """Image url and options"""
        result = tokens("![logo](logo.png)<w50|center>\n")
        assert (Name.Builtin, "logo.png") in result
        assert (Name.Attribute, "<w50|center>") in result


class TestInlineTokens:
    """Test inline constructs"""

    def test_toggles(self):
        """Style toggles are operators"""
        result = tokens("*bold* /it/\n")
        assert [value for token, value in result if token is Operator] == ["*", "*", "/", "/"]

    def test_inline_code(self):
        """Backtick span"""
        assert (String.Backtick, "`x`") in tokens("a `x` b\n")

    def test_links(self):
        """Both hyperlink forms"""
        result = tokens("<https://a.org> [A](https://b.org)\n")
        assert (Name.Attribute, "https://a.org") in result
        assert (Name.Attribute, "https://b.org") in result

    def test_escape(self):
        """Backslash escape"""
        assert (String.Escape, "\\*") in tokens("\\*\n")

    def test_bare_heading_marker_is_not_heading(self):
        """A heading marker with no title after it is plain text"""
        result = tokens("# \n## \n")
        assert all(token is not Generic.Heading for token, _ in result)

    def test_heading_mid_line_is_text(self):
        """'#' only heads a line at line start"""
        result = tokens("a # b\n")
        assert all(token is not Generic.Heading for token, _ in result)

    def test_no_error_tokens(self):
        """Arbitrary markup lexes without Error tokens"""
        source = "# T\n^ ` [ < \\\n![x](y\n1.x\n"
        assert all(token is not Token.Error for token, _ in tokens(source))
