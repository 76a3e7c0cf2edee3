"""
Tokenizer state model

Defines TokenizerState, the mutable state bus carried by a Tokenizer between
pulls: the cursor into the source text plus the per-line and per-document
memory (style accumulator, list numbering, transition counter).
"""

from dataclasses import dataclass, field
from typing import List

from .marks import IndentLevel, StyleText


def ordinals_make() -> List[int]:
    """One 'last assigned ordinal' slot per IndentLevel, all zero"""
    return [0] * len(IndentLevel)


@dataclass
class TokenizerState:
    """
    Central state container for one tokenization run.

    The source string is never modified; `position` only moves forward.

    Attributes:
        source: Full document text
        position: Offset of the first unconsumed character
        verbosity: Logging verbosity for LOG() calls made while tokenizing
        emitted_first_page: Initial Page mark has been produced
        style: Style accumulator toggled by inline markers
        is_line_start: Cursor sits at the start of a line
        is_ordered: An ordered list is active
        is_unordered: An unordered list is active
        ordinals: Last ordinal assigned per indent level (index = IndentLevel)
        ordered_list_current_indent_level: Indent of the last ordered item
        transition_counter: Next auto-assigned transition order; 0 means no
                            transition has been opened on the current page
    """

    source: str = field(default="")
    position: int = field(default=0)
    verbosity: int = field(default=0)

    emitted_first_page: bool = field(default=False)
    style: StyleText = field(default_factory=StyleText)
    is_line_start: bool = field(default=True)
    is_ordered: bool = field(default=False)
    is_unordered: bool = field(default=False)
    ordinals: List[int] = field(default_factory=ordinals_make)
    ordered_list_current_indent_level: IndentLevel = field(default=IndentLevel.NONE)
    transition_counter: int = field(default=0)

    def exhausted(self) -> bool:
        return self.position >= len(self.source)

    def lists_reset(self) -> None:
        """
        Forget all list context (called at blank-line boundaries).
        """
        self.is_ordered = False
        self.is_unordered = False
        self.ordered_list_current_indent_level = IndentLevel.NONE
        self.ordinals = ordinals_make()
