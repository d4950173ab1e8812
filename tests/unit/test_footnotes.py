#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_footnotes.py
"""Unit tests for footnote numbering and definition collection."""

import logging

import pytest

from orgleanpub.ast import Document, FootnoteDefinition, FootnoteReference, Paragraph, Text
from orgleanpub.footnotes import FootnoteEntry, FootnoteIndex


def _definition(identifier, text):
    return FootnoteDefinition(identifier=identifier, content=[Paragraph(content=[Text(content=text)])])


@pytest.mark.unit
class TestFootnoteNumbering:
    """Tests for numbers assigned at first reference."""

    def test_anonymous_references_numbered_in_document_order(self):
        first = FootnoteReference(definition=[Text(content="one")])
        second = FootnoteReference(definition=[Text(content="two")])
        doc = Document(children=[Paragraph(content=[first]), Paragraph(content=[second])])

        index = FootnoteIndex.from_document(doc)

        assert index.number_for(first) == 1
        assert index.number_for(second) == 2
        assert index.label_for(first) == "1"
        assert index.label_for(second) == "2"

    def test_repeated_label_keeps_first_number(self):
        first = FootnoteReference(identifier="a")
        other = FootnoteReference(identifier="b")
        again = FootnoteReference(identifier="a")
        doc = Document(
            children=[
                Paragraph(content=[first, other, again]),
                _definition("a", "A"),
                _definition("b", "B"),
            ]
        )

        index = FootnoteIndex.from_document(doc)

        assert index.number_for(again) == 1
        assert index.number_for(other) == 2
        assert len(index) == 2

    def test_labelled_reference_renders_its_label(self):
        reference = FootnoteReference(identifier="note")
        doc = Document(children=[Paragraph(content=[reference]), _definition("note", "x")])
        index = FootnoteIndex.from_document(doc)
        assert index.label_for(reference) == "note"

    def test_nested_reference_numbered_after_its_parent(self):
        nested = FootnoteReference(identifier="inner")
        outer = FootnoteReference(identifier="outer")
        later = FootnoteReference(definition=[Text(content="later")])
        doc = Document(
            children=[
                Paragraph(content=[outer, later]),
                FootnoteDefinition(identifier="outer", content=[Paragraph(content=[Text(content="see "), nested])]),
                _definition("inner", "inner text"),
            ]
        )

        index = FootnoteIndex.from_document(doc)

        assert index.number_for(outer) == 1
        assert index.number_for(nested) == 2
        assert index.number_for(later) == 3
        assert [entry.marker for entry in index] == ["outer", "inner", "3"]

    def test_foreign_reference_raises_key_error(self):
        index = FootnoteIndex.from_document(Document())
        with pytest.raises(KeyError):
            index.number_for(FootnoteReference())


@pytest.mark.unit
class TestFootnoteEntries:
    """Tests for the collected definitions."""

    def test_no_footnotes(self):
        index = FootnoteIndex.from_document(Document(children=[Paragraph(content=[Text(content="plain")])]))
        assert len(index) == 0
        assert index.entries == ()

    def test_entries_follow_reference_order_not_definition_order(self):
        doc = Document(
            children=[
                _definition("b", "B"),
                _definition("a", "A"),
                Paragraph(content=[FootnoteReference(identifier="a"), FootnoteReference(identifier="b")]),
            ]
        )

        index = FootnoteIndex.from_document(doc)

        assert [entry.label for entry in index] == ["a", "b"]
        assert [entry.number for entry in index] == [1, 2]

    def test_unreferenced_definition_is_appended(self):
        doc = Document(
            children=[
                Paragraph(content=[FootnoteReference(identifier="used")]),
                _definition("spare", "S"),
                _definition("used", "U"),
            ]
        )

        index = FootnoteIndex.from_document(doc)

        assert [entry.marker for entry in index] == ["used", "spare"]

    def test_inline_labelled_definition_is_collected(self):
        reference = FootnoteReference(identifier="inl", definition=[Text(content="inline body")])
        index = FootnoteIndex.from_document(Document(children=[Paragraph(content=[reference])]))

        (entry,) = index.entries
        assert entry == FootnoteEntry(number=1, label="inl", content=(Text(content="inline body"),))

    def test_undefined_reference_is_numbered_and_logged(self, caplog):
        missing = FootnoteReference(identifier="missing")
        anonymous = FootnoteReference(definition=[Text(content="x")])
        doc = Document(children=[Paragraph(content=[missing, anonymous])])

        with caplog.at_level(logging.WARNING, logger="orgleanpub.footnotes"):
            index = FootnoteIndex.from_document(doc)

        assert index.number_for(missing) == 1
        assert index.number_for(anonymous) == 2
        assert [entry.marker for entry in index] == ["2"]
        assert "missing" in caplog.text


@pytest.mark.unit
class TestCaptionFootnotes:
    """Tests for footnotes referenced from paragraph captions."""

    def test_anonymous_caption_footnote_numbered_after_content(self):
        in_content = FootnoteReference(definition=[Text(content="body note")])
        in_caption = FootnoteReference(definition=[Text(content="caption note")])
        doc = Document(
            children=[Paragraph(content=[Text(content="x"), in_content], caption=[Text(content="Fig"), in_caption])]
        )

        index = FootnoteIndex.from_document(doc)

        assert index.number_for(in_content) == 1
        assert index.number_for(in_caption) == 2
        assert [entry.content for entry in index] == [(Text(content="body note"),), (Text(content="caption note"),)]

    def test_inline_labelled_definition_in_caption_is_collected(self):
        reference = FootnoteReference(identifier="c", definition=[Text(content="src")])
        doc = Document(children=[Paragraph(content=[Text(content="x")], caption=[reference])])

        index = FootnoteIndex.from_document(doc)

        assert index.entries == (FootnoteEntry(number=1, label="c", content=(Text(content="src"),)),)
