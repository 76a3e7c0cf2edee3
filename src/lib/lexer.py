"""
Custom Pygments lexer for slidemark syntax highlighting

Provides syntax highlighting for slidemark source text, e.g. when a deck's
own markup is shown inside a code block or in an editor preview.

Token types:
- Keyword.Declaration: Page marks (---)
- Keyword: Transition marks (---t, ---t3, t---)
- Punctuation: Separators (----, ----v) and markup delimiters
- Generic.Heading: Headings (# .. #####)
- Number / Keyword.Pseudo: Ordered / unordered list markers
- Generic.Emph: Quotes
- String.Backtick: Inline code and fenced code blocks
- Name.Attribute / Name.Builtin: Hyperlinks / images
- String.Escape: Backslash escapes
- Operator: Inline style toggles (* / $ ~ _)
"""

from pygments.lexer import RegexLexer, bygroups
from pygments.token import (
    Text,
    Punctuation,
    Name,
    String,
    Keyword,
    Generic,
    Number,
    Operator,
)


class SlidemarkLexer(RegexLexer):
    """
    Lexer for slidemark markup

    Line-start constructs are matched with `^` anchors (RegexLexer uses
    re.MULTILINE by default); everything else is inline.

    Example:
        ---t2
        ## Title
        1. *bold* item

    Tokens:
        ---t2 → Keyword
        ## Title → Generic.Heading
        1.  → Number
        * → Operator
    """

    name = 'Slidemark'
    aliases = ['slidemark', 'smk']
    filenames = ['*.smk']

    tokens = {
        'root': [
            # Fenced code block (opening fence through closing fence line)
            (r'^```[^\n]*\n(?:[^\n]*\n)*?```$', String.Backtick),

            # Page, transition, transition end, separators
            (r'^---$', Keyword.Declaration),
            (r'^---t[^\n]*$', Keyword),
            (r'^t---$', Keyword),
            (r'^----v?$', Punctuation),

            # Headings
            (r'^#+ [^\n]+', Generic.Heading),

            # Image with optional options block
            (r'^(!\[)([^\]\n]*)(\]\()([^)\n]*)(\))((?:<[^>\n]*>)?)',
             bygroups(Punctuation, String, Punctuation, Name.Builtin, Punctuation, Name.Attribute)),

            # List markers and quotes
            (r'^( *)([0-9]+\. )', bygroups(Text, Number)),
            (r'^( *)(- )', bygroups(Text, Keyword.Pseudo)),
            (r'^> [^\n]*', Generic.Emph),

            # Inline code, hyperlinks, escapes
            (r'`[^`\n]*`', String.Backtick),
            (r'(<)([^>\n]*)(>)', bygroups(Punctuation, Name.Attribute, Punctuation)),
            (r'(\[)([^\]\n]*)(\]\()([^)\n]*)(\))',
             bygroups(Punctuation, String, Punctuation, Name.Attribute, Punctuation)),
            (r'\\.', String.Escape),

            # Style toggles
            (r'[*/$~_]', Operator),

            # Everything else is text
            (r'[^*`~_/$^\\<\[\n]+', Text),
            (r'\n', Text),
            (r'.', Text),
        ],
    }


def get_lexer() -> SlidemarkLexer:
    """
    Get the SlidemarkLexer instance

    Returns:
        SlidemarkLexer instance ready for use with Pygments
    """
    return SlidemarkLexer()
