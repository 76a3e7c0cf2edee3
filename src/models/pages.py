"""
Page grouper data models

Result record returned by lib.grouper.into_pages().
"""

from typing import NamedTuple

from .marks import Page


class PageRecord(NamedTuple):
    """
    One page of a grouped document

    Unpacks like a plain 3-tuple: `page, max_order, last_index = record`.

    Attributes:
        page: Page mark whose children are its Transition groups
        max_transition_order: Highest Transition.order seen on the page
        last_transition_index: Reserved; always 0 (never written by the grouper)

    Example:
        For source "Hello\\n---\\n---t2\\nWorld":
        [
            PageRecord(page=Page([Transition(0, [Text("Hello")])]), 0, 0),
            PageRecord(page=Page([Transition(0), Transition(2, [Text("World")])]), 2, 0),
        ]
    """
    page: Page
    max_transition_order: int = 0
    last_transition_index: int = 0
