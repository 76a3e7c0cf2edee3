"""
Tokenizer for slidemark markup

Turns slidemark source text into a flat stream of marks (see models.marks).

The tokenizer is a pull-based iterator over a single source string. Each pull
advances a cursor and returns the next mark:

1. Bootstrap: an initial Page, then an initial Transition(0) for every page
2. Newlines: a single newline is a soft break (no mark), a blank line is NewLine
3. Block productions, tried only at the start of a line:
   page, transition, transition end, code block, heading, image,
   ordered list, quote, separator, unordered list
4. Inline productions: style toggles, inline code, hyperlinks, escapes, text

Nothing in here raises on malformed markup. A construct that fails to match
falls through to the next production, and the final text scan always consumes
at least one character, so unmatched special characters come out as text.

Example:
    >>> from slidemark.lib.tokenizer import Tokenizer
    >>> marks = list(Tokenizer("# Title\\n*bold* plain"))
    >>> [type(mark).__name__ for mark in marks]
    ['Page', 'Transition', 'Text', 'Text', 'Text']
    >>> marks[3].content, marks[3].style.bold
    ('bold', True)
"""

import re
from typing import List, Optional

from ..config import AppSettings, appsettings
from ..models.marks import (
    AlignHorizontal,
    CodeBlock,
    Heading,
    Image,
    IndentLevel,
    Mark,
    NewLine,
    OrderedListing,
    Page,
    Separator,
    SeparatorDirection,
    StyleImage,
    StyleText,
    Text,
    Transition,
    TransitionEnd,
    UnorderedListing,
)
from ..models.state import TokenizerState
from .log import LOG, state_connectToLogger


# Characters that end a plain text run
SPECIAL_PATTERN = re.compile(r"[*`~_/$^\\<\[\n]")

HEADING_PATTERN = re.compile(r"(#+) ")
ORDERED_ITEM_PATTERN = re.compile(r"[0-9]+\. ")
DIGITS_PATTERN = re.compile(r"[0-9]+")
# float() tolerates these, image sizes do not
SIZE_REJECT_PATTERN = re.compile(r"[\s_]")

# Inline toggle character -> StyleText flag it flips
STYLE_TOGGLES = {
    "*": "bold",
    "/": "italics",
    "$": "small",
    "~": "strikethrough",
    "_": "underline",
}

IMAGE_ALIGNMENTS = {align.value: align for align in AlignHorizontal}


class Tokenizer:
    r"""
    Iterator of marks over slidemark source text

    Handles:
    - Pages (---), transitions (---t, ---t3) and transition ends (t---)
    - Fenced code blocks, headings, images with options, quotes, separators
    - Ordered lists with per-indent numbering, unordered lists
    - Inline style toggles (* / $ ~ _), `code`, <url>, [title](url), \ escapes

    A Tokenizer is single-use: once exhausted it yields nothing more.
    """

    def __init__(self, source: str, settings: Optional[AppSettings] = None):
        """
        Initialize tokenizer with source text

        Args:
            source: Full slidemark document text
            settings: Optional AppSettings; the module singleton is used if omitted

        Raises:
            TypeError: If source is not a str

        Attributes:
            settings: Settings governing indentation and heading limits
            state: TokenizerState (cursor plus per-line/per-document memory)
        """
        if not isinstance(source, str):
            raise TypeError(f"source must be str, not {type(source).__name__}")

        self.settings = settings if settings is not None else appsettings
        self.state = TokenizerState(source=source, verbosity=self.settings.verbosity)
        state_connectToLogger(self.state)
        LOG(f"Tokenizing {len(source)} characters", level=1)

    def __iter__(self) -> "Tokenizer":
        return self

    def __next__(self) -> Mark:
        mark = self.mark_next()
        if mark is None:
            raise StopIteration
        if self.state.verbosity >= 3:
            LOG(f"Mark at offset {self.state.position}: {mark!r}", level=3)
        return mark

    def mark_next(self) -> Optional[Mark]:
        """
        Produce the next mark, or None at end of input

        Returns:
            Next Mark in document order, None once the source is consumed
        """
        state = self.state
        source = state.source

        if not state.emitted_first_page:
            state.emitted_first_page = True
            return Page()

        if state.transition_counter == 0:
            state.transition_counter = 1
            return Transition(0)

        while not state.exhausted():
            if source.startswith("\n", state.position):
                state.position += 1
                state.style = StyleText()
                state.is_line_start = True
                if state.exhausted() or source.startswith("\n", state.position):
                    if not state.exhausted():
                        state.position += 1
                    state.lists_reset()
                    return NewLine()

            if state.is_line_start:
                mark = self.block_scan()
                if mark is not None:
                    return mark

            char = source[state.position]
            if char in STYLE_TOGGLES:
                flag = STYLE_TOGGLES[char]
                setattr(state.style, flag, not getattr(state.style, flag))
                state.position += 1
                state.is_line_start = False
                continue

            for scan in (self.code_scan, self.hyperlink_scan, self.escape_scan):
                mark = scan()
                if mark is not None:
                    state.is_line_start = False
                    return mark

            return self.text_scan()

        return None

    def block_scan(self) -> Optional[Mark]:
        """
        Try the line-start productions in priority order

        Returns:
            First matching block mark, or None if the line is inline content
        """
        for scan in (
            self.page_scan,
            self.transition_scan,
            self.transitionEnd_scan,
            self.codeBlock_scan,
            self.heading_scan,
            self.image_scan,
            self.orderedList_scan,
            self.quote_scan,
            self.separator_scan,
            self.unorderedList_scan,
        ):
            mark = scan()
            if mark is not None:
                return mark
        return None

    def line_end(self) -> int:
        """Offset of the newline ending the current line (or end of source)"""
        end = self.state.source.find("\n", self.state.position)
        return len(self.state.source) if end == -1 else end

    def indent_measure(self, line: str) -> IndentLevel:
        """
        Indent level of a line from its leading spaces

        Args:
            line: Current line, without its newline

        Returns:
            IndentLevel (leading spaces / indent_width, saturating)

        Example:
            "    1. item" with indent_width=2 -> IndentLevel.I2
        """
        spaces = len(line) - len(line.lstrip(" "))
        return IndentLevel.from_int(self.settings.indentLevel_fromSpaces(spaces))

    def line_consume(self, end: int) -> None:
        self.state.position = end
        self.state.is_line_start = False

    def page_scan(self) -> Optional[Mark]:
        """`---` on its own line starts a new page"""
        state = self.state
        if not state.source.startswith("---\n", state.position):
            return None
        state.position += 4
        state.transition_counter = 0
        LOG(f"Page break at offset {state.position}", level=2)
        return Page()

    def transition_scan(self) -> Optional[Mark]:
        """
        `---t` or `---t<order>` opens a transition group

        An explicit order is used only when everything after the `t` up to
        the end of the line is digits; otherwise the running counter is used.
        Either way the counter continues from order + 1.
        """
        state = self.state
        if not state.source.startswith("---t", state.position):
            return None

        end = self.line_end()
        suffix = state.source[state.position + 4:end]
        if DIGITS_PATTERN.fullmatch(suffix):
            order = int(suffix)
        else:
            order = state.transition_counter
        state.transition_counter = order + 1

        self.line_consume(end)
        LOG(f"Transition {order} opened", level=2)
        return Transition(order)

    def transitionEnd_scan(self) -> Optional[Mark]:
        """`t---` on its own line closes the open transition"""
        state = self.state
        if not state.source.startswith("t---\n", state.position):
            return None
        state.position += 5
        return TransitionEnd()

    def codeBlock_scan(self) -> Optional[Mark]:
        """
        Fenced code block

        The text after the opening fence is the language tag (None when
        empty). The body runs up to the next line consisting of exactly three
        backticks. Without such a line the fence is not a code block.

        Example:
            "```python\\nprint(1)\\n```" -> CodeBlock("print(1)", "python")
        """
        state = self.state
        source = state.source
        if not source.startswith("```", state.position):
            return None

        first_line_end = source.find("\n", state.position)
        if first_line_end == -1:
            return None

        close = first_line_end
        while True:
            close = source.find("\n```", close)
            if close == -1:
                return None
            fence_end = close + 4
            if fence_end == len(source) or source[fence_end] == "\n":
                break
            close += 1

        language = source[state.position + 3:first_line_end] or None
        code = source[first_line_end + 1:close]
        self.line_consume(fence_end)
        return CodeBlock(code, language)

    def heading_scan(self) -> Optional[Mark]:
        """`#` .. `#####` followed by a space; extra `#` saturate at H5"""
        state = self.state
        end = self.line_end()
        line = state.source[state.position:end]

        match = HEADING_PATTERN.match(line)
        # a bare "# " stays literal text
        if match is None or len(line) <= 2:
            return None

        level = min(len(match.group(1)), self.settings.max_heading_level)
        self.line_consume(end)
        return Text(line[match.end():], StyleText().with_heading(Heading.from_int(level)))

    def image_scan(self) -> Optional[Mark]:
        """
        `![title](url)` with optional `<option|option|...>` right after it

        An options block without its closing `>` is left in the stream.
        """
        state = self.state
        if not state.source.startswith("![", state.position):
            return None

        end = self.line_end()
        line = state.source[state.position:end]

        bracket_end = line.find("]")
        if bracket_end == -1 or not line.startswith("(", bracket_end + 1):
            return None
        parens_end = line.find(")", bracket_end + 2)
        if parens_end == -1:
            return None

        title = line[2:bracket_end]
        url = line[bracket_end + 2:parens_end]
        image_end = parens_end + 1
        style = StyleImage()

        if line.startswith("<", parens_end + 1):
            angle_end = line.find(">", parens_end + 2)
            if angle_end != -1:
                style = self.imageOptions_parse(line[parens_end + 2:angle_end])
                image_end = angle_end + 1

        self.line_consume(state.position + image_end)
        return Image(url, title, style)

    def imageOptions_parse(self, options: str) -> StyleImage:
        """
        Build a StyleImage from `|`-separated image options

        Args:
            options: Text between `<` and `>` (e.g., "center|w50|https://x.org")

        Returns:
            StyleImage with alignment, size and hyperlink applied in order

        Example:
            "left|h30" -> StyleImage(align_h=LEFT, height=30.0)
            "wide"     -> StyleImage(hyperlink="wide")  (not a number after 'w')
            "w 50"     -> StyleImage(hyperlink="w 50")  (no spaces or underscores)
        """
        style = StyleImage()
        for option in options.split("|"):
            if option in IMAGE_ALIGNMENTS:
                style = style.with_align_h(IMAGE_ALIGNMENTS[option])
            elif option[:1] in ("w", "h") and not SIZE_REJECT_PATTERN.search(option):
                try:
                    size = float(option[1:])
                except ValueError:
                    style = style.with_hyperlink(option)
                    continue
                if option[0] == "w":
                    style = style.with_width(size)
                else:
                    style = style.with_height(size)
            else:
                style = style.with_hyperlink(option)
        return style

    def orderedList_scan(self) -> Optional[Mark]:
        """
        `N. item`, indented by indent_width spaces per level

        The number written in the source is ignored. Items are numbered
        consecutively per indent level while the list stays active; an item
        deeper than the previous one restarts at 1.
        """
        state = self.state
        end = self.line_end()
        line = state.source[state.position:end]

        indent = self.indent_measure(line)
        match = ORDERED_ITEM_PATTERN.match(line, indent * self.settings.indent_width)
        if match is None:
            return None

        if state.is_ordered and state.ordered_list_current_indent_level >= indent:
            ordinal = state.ordinals[indent] + 1
        else:
            ordinal = 1
        state.ordinals[indent] = ordinal
        state.ordered_list_current_indent_level = indent
        state.is_ordered = True

        self.line_consume(end)
        return Text(line[match.end():], StyleText().with_listing(OrderedListing(ordinal, indent)))

    def quote_scan(self) -> Optional[Mark]:
        """`> quoted text`"""
        state = self.state
        if not state.source.startswith("> ", state.position):
            return None
        end = self.line_end()
        text = state.source[state.position + 2:end]
        self.line_consume(end)
        return Text(text, StyleText().with_quote())

    def separator_scan(self) -> Optional[Mark]:
        """`----` (horizontal) or `----v` (vertical) as the whole line"""
        state = self.state
        end = self.line_end()
        line = state.source[state.position:end]

        if line == "----":
            direction = SeparatorDirection.HORIZONTAL
        elif line == "----v":
            direction = SeparatorDirection.VERTICAL
        else:
            return None

        state.position = min(end + 1, len(state.source))
        return Separator(direction)

    def unorderedList_scan(self) -> Optional[Mark]:
        """`- item`, indented by indent_width spaces per level"""
        state = self.state
        end = self.line_end()
        line = state.source[state.position:end]

        indent = self.indent_measure(line)
        marker = indent * self.settings.indent_width
        if not line.startswith("- ", marker):
            return None

        state.is_unordered = True
        self.line_consume(end)
        return Text(line[marker + 2:], StyleText().with_listing(UnorderedListing(indent)))

    def code_scan(self) -> Optional[Mark]:
        """
        Inline `code` closed on the same line

        The run gets a fresh code style; the ambient toggles do not apply.
        """
        state = self.state
        if not state.source.startswith("`", state.position):
            return None
        close = state.source.find("`", state.position + 1, self.line_end())
        if close == -1:
            return None
        text = state.source[state.position + 1:close]
        state.position = close + 1
        return Text(text, StyleText().with_code())

    def hyperlink_scan(self) -> Optional[Mark]:
        """`<url>` or `[title](url)`, closed on the same line"""
        state = self.state
        source = state.source
        start = state.position
        end = self.line_end()

        if source.startswith("<", start):
            angle_end = source.find(">", start + 1, end)
            if angle_end != -1:
                url = source[start + 1:angle_end]
                state.position = angle_end + 1
                return Text(url, StyleText().with_hyperlink(url))

        if source.startswith("[", start):
            bracket_end = source.find("]", start + 1, end)
            if bracket_end != -1 and source.startswith("(", bracket_end + 1, end):
                parens_end = source.find(")", bracket_end + 2, end)
                if parens_end != -1:
                    title = source[start + 1:bracket_end]
                    url = source[bracket_end + 2:parens_end]
                    state.position = parens_end + 1
                    return Text(title, StyleText().with_hyperlink(url))

        return None

    def escape_scan(self) -> Optional[Mark]:
        r"""`\c` emits `c` verbatim with the default style"""
        state = self.state
        if not state.source.startswith("\\", state.position):
            return None
        if state.position + 1 >= len(state.source):
            return None
        text = state.source[state.position + 1]
        state.position += 2
        return Text(text, StyleText())

    def text_scan(self) -> Mark:
        """
        Plain text run up to the next special character

        The run is at least one character long, so a special character that
        no production accepted is emitted as literal text.
        """
        state = self.state
        match = SPECIAL_PATTERN.search(state.source, state.position)
        if match is None:
            end = len(state.source)
        else:
            end = max(match.start(), state.position + 1)

        text = state.source[state.position:end]
        state.position = end
        state.is_line_start = False
        return Text(text, state.style.copy())


def tokenize(source: str, settings: Optional[AppSettings] = None) -> List[Mark]:
    """
    Tokenize a whole document into a list of marks

    Args:
        source: Full slidemark document text
        settings: Optional AppSettings override

    Returns:
        All marks of the document in order
    """
    return list(Tokenizer(source, settings=settings))
