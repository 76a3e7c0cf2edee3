"""
Models package for slidemark

Contains the mark data model, the tokenizer state and the grouper result type.
"""

from .marks import (
    AlignHorizontal,
    CodeBlock,
    Heading,
    Image,
    IndentLevel,
    Listing,
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
from .pages import PageRecord
from .state import TokenizerState

__all__ = [
    "AlignHorizontal",
    "CodeBlock",
    "Heading",
    "Image",
    "IndentLevel",
    "Listing",
    "Mark",
    "NewLine",
    "OrderedListing",
    "Page",
    "PageRecord",
    "Separator",
    "SeparatorDirection",
    "StyleImage",
    "StyleText",
    "Text",
    "TokenizerState",
    "Transition",
    "TransitionEnd",
    "UnorderedListing",
]
