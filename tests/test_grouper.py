"""
Grouper tests - folding the mark stream into pages and transitions

Tests page records, transition ordering, transition ends, implicit pages and
the no-drop/no-duplicate guarantee.
"""

import pytest

from slidemark.lib.grouper import into_pages, pages_fromSource
from slidemark.lib.tokenizer import Tokenizer, tokenize
from slidemark.models.marks import (
    CodeBlock,
    NewLine,
    Page,
    StyleText,
    Text,
    Transition,
    TransitionEnd,
)
from slidemark.models.pages import PageRecord


STRUCTURAL = (Page, Transition, TransitionEnd)


class TestPageRecords:
    """Test the shape of grouper output"""

    def test_empty_source(self):
        """Empty document is one page with one empty transition"""
        assert pages_fromSource("") == [PageRecord(Page([Transition(0)]), 0, 0)]

    def test_empty_mark_sequence(self):
        """No marks, no pages"""
        assert into_pages([]) == []

    def test_record_unpacks_like_tuple(self):
        """PageRecord is a 3-tuple"""
        page, max_order, last_index = pages_fromSource("hello")[0]
        assert isinstance(page, Page)
        assert max_order == 0
        assert last_index == 0

    def test_last_transition_index_never_written(self):
        """Reserved field stays 0"""
        records = pages_fromSource("a\n---t3\nb\n---\n---t\nc")
        assert [record.last_transition_index for record in records] == [0, 0]

    def test_accepts_tokenizer(self):
        """A Tokenizer can be grouped directly"""
        source = "a\n---\nb"
        assert into_pages(Tokenizer(source)) == into_pages(tokenize(source))


class TestTransitions:
    """Test how marks are distributed over transitions"""

    def test_marks_go_to_latest_transition(self):
        """Each transition collects the marks that follow it"""
        record = pages_fromSource("a\n---t\nb\n---t3\nc")[0]
        assert record.page.children == [
            Transition(0, [Text("a")]),
            Transition(1, [Text("b")]),
            Transition(3, [Text("c")]),
        ]
        assert record.max_transition_order == 3

    def test_max_order_not_lowered(self):
        """Later lower orders do not reduce the maximum"""
        record = pages_fromSource("---t5\nx\n---t2\ny")[0]
        assert record.max_transition_order == 5
        assert [t.order for t in record.page.children] == [0, 5, 2]

    def test_transition_end_opens_order_zero_group(self):
        """Marks after t--- are grouped in a fresh Transition(0)"""
        record = pages_fromSource("---t\nrevealed\nt---\nalways")[0]
        assert record.page.children == [
            Transition(0),
            Transition(1, [Text("revealed")]),
            Transition(0, [Text("always")]),
        ]
        assert record.max_transition_order == 1

    def test_transition_end_is_not_stored(self):
        """TransitionEnd only acts as a boundary"""
        record = pages_fromSource("a\nt---\n")[0]
        for transition in record.page.children:
            assert not any(isinstance(mark, TransitionEnd) for mark in transition.children)

    def test_non_text_marks_are_grouped(self):
        """Code blocks and NewLines land in transitions too"""
        record = pages_fromSource("a\n\n```\ncode\n```")[0]
        assert record.page.children == [
            Transition(0, [Text("a"), NewLine(), CodeBlock("code", None)]),
        ]


class TestPages:
    """Test page splitting"""

    def test_two_pages(self):
        """--- splits the document"""
        records = pages_fromSource("# One\n---\n# Two")
        assert len(records) == 2
        first, second = (record.page.children for record in records)
        assert first[0].children[0].content == "One"
        assert second[0].children[0].content == "Two"

    def test_implicit_page(self):
        """Marks before any Page get an implicit page"""
        assert into_pages([Text("x")]) == [PageRecord(Page([Transition(0, [Text("x")])]), 0, 0)]

    def test_implicit_transition(self):
        """Marks on a page without transitions get Transition(0)"""
        records = into_pages([Page(), Text("x")])
        assert records[0].page.children == [Transition(0, [Text("x")])]

    def test_transition_before_any_page(self):
        """Transition arriving first also creates the implicit page"""
        records = into_pages([Transition(4), Text("x")])
        assert records == [PageRecord(Page([Transition(4, [Text("x")])]), 4, 0)]


class TestNoMarkLost:
    """Test that grouping neither drops nor duplicates content marks"""

    @pytest.mark.parametrize(
        "source",
        [
            "",
            "plain",
            "# Title\n*bold* and /italic/\n\n1. one\n2. two\n---t\n- item\n> quote",
            "a\n---\nb\n---t2\nc\nt---\nd\n---\n![img](x.png)<w10>\n----\n```py\nx\n```\n",
            "t---\nt---\nafter\n---t\n---t\n",
        ],
    )
    def test_content_mark_count_preserved(self, source):
        """Non-structural marks in == marks attached across all transitions"""
        flat = [mark for mark in tokenize(source) if not isinstance(mark, STRUCTURAL)]
        grouped = [
            mark
            for record in pages_fromSource(source)
            for transition in record.page.children
            for mark in transition.children
        ]
        assert grouped == flat

    def test_page_children_are_transitions(self):
        """Pages only ever hold transitions"""
        source = "a\nt---\nb\n---t\nc\n---\nd"
        for record in pages_fromSource(source):
            assert all(isinstance(child, Transition) for child in record.page.children)

    def test_styles_survive_grouping(self):
        """Grouping does not touch the marks themselves"""
        record = pages_fromSource("*b*")[0]
        assert record.page.children[0].children == [Text("b", StyleText(bold=True))]

    def test_grouping_twice_gives_same_pages(self):
        """The input sequence is not modified, so it can be grouped again"""
        marks = tokenize("a\n---t\nb")
        first = into_pages(marks)
        second = into_pages(marks)
        assert first == second
        assert marks[:2] == [Page(), Transition(0)]
        assert Transition(1) in marks

    def test_input_structural_marks_not_shared(self):
        """Stored pages and transitions are copies of the input marks"""
        page, transition = Page(), Transition(2)
        record = into_pages([page, transition, Text("x")])[0]
        assert record.page is not page
        assert record.page.children[0] is not transition
        assert page.children == []
        assert transition.children == []
