#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/ast/test_nodes.py
"""Unit tests for AST node classes and tree helpers."""

import dataclasses
import logging

import pytest

from orgleanpub.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Link,
    List,
    ListItem,
    LiteralBlock,
    Paragraph,
    Table,
    TableCell,
    TableRow,
    Text,
    build_parent_map,
    extract_text,
    get_node_children,
    get_tree_children,
    is_inline,
    iter_nodes,
)


@pytest.mark.unit
class TestNodeConstruction:
    """Tests for node validation and defaults."""

    @pytest.mark.parametrize("level", [1, 3, 6])
    def test_heading_valid_levels(self, level):
        heading = Heading(level=level, content=[Text(content="Title")])
        assert heading.level == level
        assert heading.identifier is None

    @pytest.mark.parametrize("level", [0, 7, -1])
    def test_heading_invalid_level(self, level):
        with pytest.raises(ValueError, match="Heading level must be 1-6"):
            Heading(level=level)

    def test_literal_block_kinds(self):
        assert LiteralBlock(content="x").kind == "example"
        assert LiteralBlock(content="x", kind="fixed-width").kind == "fixed-width"

    def test_literal_block_invalid_kind(self):
        with pytest.raises(ValueError, match="Literal block kind"):
            LiteralBlock(content="x", kind="src")

    def test_nodes_are_frozen(self):
        text = Text(content="a")
        with pytest.raises(dataclasses.FrozenInstanceError):
            text.content = "b"

    def test_code_block_defaults(self):
        block = CodeBlock(content="x = 1\n")
        assert block.language is None
        assert block.metadata == {}


@pytest.mark.unit
class TestLinkUrl:
    """Tests for Link.url."""

    def test_custom_id_url(self):
        assert Link(path="intro", link_type="custom-id").url == "#intro"

    def test_id_url(self):
        assert Link(path="abc-123", link_type="id").url == "#abc-123"

    def test_external_url(self):
        assert Link(path="//example.com", link_type="https").url == "https://example.com"

    def test_file_url_is_path(self):
        assert Link(path="images/cat.png", link_type="file").url == "images/cat.png"

    def test_fuzzy_is_default(self):
        link = Link(path="Some Heading")
        assert link.link_type == "fuzzy"
        assert link.url == "Some Heading"


@pytest.mark.unit
class TestTreeHelpers:
    """Tests for get_node_children, is_inline and the traversal helpers."""

    def test_table_children_put_header_first(self):
        header = TableRow(cells=[TableCell(content=[Text(content="h")])], is_header=True)
        row = TableRow(cells=[TableCell(content=[Text(content="r")])])
        table = Table(rows=[row], header=header)
        assert get_node_children(table) == [header, row]

    def test_inline_footnote_definition_is_not_a_child(self):
        reference = FootnoteReference(definition=[Text(content="note")])
        assert get_node_children(reference) == []

    def test_leaf_nodes_have_no_children(self):
        assert get_node_children(Text(content="a")) == []
        assert get_node_children(CodeBlock(content="a")) == []

    def test_is_inline(self):
        assert is_inline(Text(content="a"))
        assert is_inline(Link(path="x"))
        assert is_inline(FootnoteReference(identifier="x"))
        assert not is_inline(Paragraph())
        assert not is_inline(Heading(level=1))

    def test_iter_nodes_is_pre_order(self):
        first = Text(content="a")
        second = Text(content="b")
        emphasis = Emphasis(content=[second])
        paragraph = Paragraph(content=[first, emphasis])
        doc = Document(children=[paragraph])
        assert list(iter_nodes(doc)) == [doc, paragraph, first, emphasis, second]

    def test_iter_nodes_visits_inline_definitions(self):
        note = Text(content="note")
        reference = FootnoteReference(definition=[note])
        doc = Document(children=[Paragraph(content=[reference])])
        nodes = list(iter_nodes(doc))
        assert nodes.index(note) == nodes.index(reference) + 1

    def test_build_parent_map(self):
        text = Text(content="item")
        item = ListItem(children=[Paragraph(content=[text])])
        lst = List(ordered=False, items=[item])
        doc = Document(children=[BlockQuote(children=[lst])])
        parents = build_parent_map(doc)
        assert parents[id(item)] is lst
        assert parents[id(text)] is item.children[0]
        assert id(doc) not in parents

    def test_extract_text(self):
        heading = Heading(level=1, content=[Text(content="Hello "), Emphasis(content=[Text(content="world")])])
        assert extract_text(heading, joiner="") == "Hello world"

    def test_extract_text_skips_non_text_leaves(self):
        paragraph = Paragraph(content=[Text(content="a"), Code(content="b"), Text(content="c")])
        assert extract_text(paragraph) == "a c"

    def test_footnote_definition_children(self):
        body = Paragraph(content=[Text(content="note")])
        definition = FootnoteDefinition(identifier="fn", content=[body])
        assert get_node_children(definition) == [body]


@pytest.mark.unit
class TestTreeChildren:
    """Tests for get_tree_children and parent lookup of non-rendered children."""

    def test_caption_follows_paragraph_content(self):
        text = Text(content="body")
        caption = Text(content="Figure 1")
        paragraph = Paragraph(content=[text], caption=[caption])
        assert get_tree_children(paragraph) == [text, caption]
        assert get_node_children(paragraph) == [text]

    def test_inline_definition_follows_reference(self):
        note = Text(content="note")
        assert get_tree_children(FootnoteReference(definition=[note])) == [note]

    def test_caption_nodes_have_paragraph_parent(self):
        caption = Text(content="Figure 1")
        paragraph = Paragraph(content=[Text(content="body")], caption=[caption])
        parents = build_parent_map(Document(children=[paragraph]))
        assert parents[id(caption)] is paragraph

    def test_shared_node_keeps_first_parent(self, caplog):
        shared = Link(path="cat.png", link_type="file")
        first = Paragraph(content=[shared], caption=[Text(content="first")])
        second = Paragraph(content=[shared], caption=[Text(content="second")])

        with caplog.at_level(logging.WARNING, logger="orgleanpub.ast.utils"):
            parents = build_parent_map(Document(children=[first, second]))

        assert parents[id(shared)] is first
        assert "Link instance appears under both Paragraph and Paragraph" in caplog.text

    def test_repeated_child_of_same_parent_is_not_reported(self, caplog):
        item = ListItem(children=[Paragraph(content=[Text(content="x")])])
        lst = List(ordered=False, items=[item, item])

        with caplog.at_level(logging.WARNING, logger="orgleanpub.ast.utils"):
            parents = build_parent_map(Document(children=[lst]))

        assert parents[id(item)] is lst
        assert caplog.text == ""
