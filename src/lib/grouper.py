"""
Page grouper

Folds the flat mark stream of a Tokenizer into pages of transitions:

    Page, Transition(0), Text, Transition(1), Text, Page, ...
        ->
    [PageRecord(Page([Transition(0, [Text]), Transition(1, [Text])]), 1, 0),
     PageRecord(Page([...]), ...)]

Single pass, no reordering: pages, transitions and marks keep the order in
which they were produced.
"""

from typing import Iterable, List, Optional

from ..config import AppSettings
from ..models.marks import Mark, Page, Transition, TransitionEnd
from ..models.pages import PageRecord
from .log import LOG
from .tokenizer import Tokenizer


def into_pages(marks: Iterable[Mark]) -> List[PageRecord]:
    """
    Group a mark sequence into pages and transitions

    Rules:
        - Page starts a new record and becomes the current page
        - Transition is appended to the current page; raises the page's
          max_transition_order when its order is higher
        - TransitionEnd appends a fresh Transition(0), so that following marks
          are visible from the start again; the TransitionEnd itself is dropped
        - Any other mark goes into the most recently appended transition of
          the current page, synthesizing Transition(0) if there is none
        - Marks arriving before any Page get an implicit empty Page

    Page and Transition marks are stored as fresh copies, so the input
    sequence is left untouched and can be grouped again.

    Args:
        marks: Marks in document order (a Tokenizer or any iterable)

    Returns:
        List of PageRecord(page, max_transition_order, last_transition_index)

    Example:
        >>> pages = into_pages(Tokenizer("intro\\n---t\\nstep"))
        >>> [t.order for t in pages[0].page.children]
        [0, 1]
    """
    pages: List[PageRecord] = []

    for mark in marks:
        if isinstance(mark, Page):
            pages.append(PageRecord(Page()))
            continue

        if not pages:
            pages.append(PageRecord(Page()))
        record = pages[-1]
        transitions = record.page.children

        if isinstance(mark, Transition):
            transitions.append(Transition(mark.order))
            if mark.order > record.max_transition_order:
                pages[-1] = record._replace(max_transition_order=mark.order)
            continue

        if isinstance(mark, TransitionEnd):
            transitions.append(Transition(0))
            continue

        if not transitions:
            transitions.append(Transition(0))
        transitions[-1].children.append(mark)

    LOG(f"Grouped marks into {len(pages)} page(s)", level=2)
    for index, record in enumerate(pages):
        LOG(
            f"Page {index}: {len(record.page.children)} transition(s), "
            f"max order {record.max_transition_order}",
            level=2,
        )
    return pages


def pages_fromSource(source: str, settings: Optional[AppSettings] = None) -> List[PageRecord]:
    """
    Tokenize and group a document in one call

    Args:
        source: Full slidemark document text
        settings: Optional AppSettings override for the tokenizer

    Returns:
        List of PageRecord, see into_pages()
    """
    return into_pages(Tokenizer(source, settings=settings))
