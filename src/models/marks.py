"""
Mark data model

Defines the tokens ("marks") produced by the Tokenizer and the style records
attached to them. Marks are plain value types: the Tokenizer creates them once
and only the page grouper appends into Page/Transition children.

Mark variants:
    CodeBlock, Image, NewLine, Transition, TransitionEnd, Page, Separator, Text
"""

from dataclasses import dataclass, field, replace
from enum import Enum, IntEnum
from typing import List, Optional, Union


class AlignHorizontal(Enum):
    """
    Horizontal alignment of an element (used by Image only)
    """
    AUTO = "auto"
    LEFT = "left"
    RIGHT = "right"
    CENTER = "center"


class Heading(IntEnum):
    """
    Heading level of a text run (NONE for body text)
    """
    NONE = 0
    H1 = 1
    H2 = 2
    H3 = 3
    H4 = 4
    H5 = 5

    @classmethod
    def from_int(cls, n: int) -> "Heading":
        """Saturating conversion: n <= 0 is NONE, n >= 5 is H5"""
        return cls(min(max(n, 0), cls.H5))


class IndentLevel(IntEnum):
    """
    Quantized nesting depth of a list item, derived from leading spaces
    """
    NONE = 0
    I1 = 1
    I2 = 2
    I3 = 3
    I4 = 4
    I5 = 5

    @classmethod
    def from_int(cls, n: int) -> "IndentLevel":
        """Saturating conversion: n <= 0 is NONE, n >= 5 is I5"""
        return cls(min(max(n, 0), cls.I5))


class SeparatorDirection(Enum):
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


@dataclass(frozen=True)
class OrderedListing:
    """
    Text run is an item of an ordered list

    Attributes:
        ordinal: Number assigned by the tokenizer (1-based, per indent level)
        indent: Nesting depth of the item
    """
    ordinal: int
    indent: IndentLevel


@dataclass(frozen=True)
class UnorderedListing:
    """
    Text run is an item of an unordered list

    Attributes:
        indent: Nesting depth of the item
    """
    indent: IndentLevel


Listing = Union[OrderedListing, UnorderedListing]


@dataclass
class StyleText:
    """
    Formatting of a single text run

    All boolean flags combine independently. The tokenizer keeps one live
    instance as its style accumulator and copies it into every plain Text mark.

    Attributes:
        bold, code, italics, quote, small, strikethrough, underline: Flags
        heading: Heading level (Heading.NONE for body text)
        hyperlink: Link target, empty string when the run is not a link
        listing: OrderedListing/UnorderedListing, or None outside lists

    Example:
        >>> style = StyleText().with_bold().with_hyperlink("https://example.org")
        >>> style.bold, style.italics, style.hyperlink
        (True, False, 'https://example.org')
    """
    bold: bool = False
    code: bool = False
    heading: Heading = Heading.NONE
    hyperlink: str = ""
    italics: bool = False
    listing: Optional[Listing] = None
    quote: bool = False
    small: bool = False
    strikethrough: bool = False
    underline: bool = False

    def copy(self) -> "StyleText":
        return replace(self)

    def with_bold(self) -> "StyleText":
        return replace(self, bold=True)

    def with_code(self) -> "StyleText":
        return replace(self, code=True)

    def with_heading(self, heading: Heading) -> "StyleText":
        return replace(self, heading=heading)

    def with_hyperlink(self, hyperlink: str) -> "StyleText":
        return replace(self, hyperlink=hyperlink)

    def with_italics(self) -> "StyleText":
        return replace(self, italics=True)

    def with_listing(self, listing: Optional[Listing]) -> "StyleText":
        return replace(self, listing=listing)

    def with_quote(self) -> "StyleText":
        return replace(self, quote=True)

    def with_small(self) -> "StyleText":
        return replace(self, small=True)

    def with_strikethrough(self) -> "StyleText":
        return replace(self, strikethrough=True)

    def with_underline(self) -> "StyleText":
        return replace(self, underline=True)


@dataclass
class StyleImage:
    """
    Presentation options of an image, set through `![title](url)<options>`

    Attributes:
        align_h: Horizontal alignment (auto, left, right, center)
        hyperlink: Link target of the image, empty string for none
        width: Explicit width, None keeps the natural width
        height: Explicit height, None keeps the natural height
    """
    align_h: AlignHorizontal = AlignHorizontal.AUTO
    hyperlink: str = ""
    width: Optional[float] = None
    height: Optional[float] = None

    def with_align_h(self, align_h: AlignHorizontal) -> "StyleImage":
        return replace(self, align_h=align_h)

    def with_height(self, height: float) -> "StyleImage":
        return replace(self, height=height)

    def with_hyperlink(self, hyperlink: str) -> "StyleImage":
        return replace(self, hyperlink=hyperlink)

    def with_width(self, width: float) -> "StyleImage":
        return replace(self, width=width)


@dataclass
class CodeBlock:
    """
    Fenced code block:

        ```language
        code
        ```
    """
    code: str
    language: Optional[str] = None


@dataclass
class Image:
    """
    Image element: `![title](url)<options>`

    Options are separated by `|`: `auto`, `left`, `right`, `center`,
    `w<number>`, `h<number>`; anything else is taken as the hyperlink.
    """
    url: str
    title: str
    style: StyleImage = field(default_factory=StyleImage)


@dataclass
class NewLine:
    """Explicit paragraph break (blank line in the source)"""


@dataclass
class Transition:
    """
    Group of marks revealed together after one interaction

    Started by `---t` (or `---t<order>`) and ended by the next transition
    mark, the next page mark, or a `t---` transition end. The order is a
    display hint; several transitions may share it.

    Attributes:
        order: Reveal index (0 = visible from the start)
        children: Marks of the group, filled in by the page grouper
    """
    order: int
    children: List["Mark"] = field(default_factory=list)


@dataclass
class TransitionEnd:
    """Marks where the currently open transition ends (`t---`)"""


@dataclass
class Page:
    """
    Top-level document section (`---`)

    Transitions from different pages never share a rendered view.

    Attributes:
        children: Transitions of the page, filled in by the page grouper
    """
    children: List["Mark"] = field(default_factory=list)


@dataclass
class Separator:
    """Horizontal (`----`) or vertical (`----v`) separator"""
    direction: SeparatorDirection


@dataclass
class Text:
    """
    Run of text sharing one StyleText

    Attributes:
        content: Literal text of the run
        style: Formatting of the run
    """
    content: str
    style: StyleText = field(default_factory=StyleText)


Mark = Union[CodeBlock, Image, NewLine, Transition, TransitionEnd, Page, Separator, Text]
