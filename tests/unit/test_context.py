#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_context.py
"""Unit tests for ExportContext."""

import dataclasses

import pytest

from orgleanpub.ast import Document, Emphasis, Link, List, ListItem, Paragraph, Text
from orgleanpub.context import ExportContext
from orgleanpub.options import LeanpubRendererOptions, MarkdownRendererOptions


def _context(doc, options=None):
    return ExportContext.build(
        doc,
        options or LeanpubRendererOptions(),
        transcode=lambda node: getattr(node, "content", "?") if isinstance(node, Text) else "<block>",
        fallback=lambda node, contents, context: "".join(contents),
    )


@pytest.mark.unit
class TestExportContext:
    """Tests for the document-wide lookups."""

    def test_context_is_read_only(self):
        context = _context(Document())
        with pytest.raises(dataclasses.FrozenInstanceError):
            context.options = MarkdownRendererOptions()
        with pytest.raises(TypeError):
            context.parents[0] = Document()

    def test_image_extensions_are_lower_cased(self):
        options = LeanpubRendererOptions(image_extensions=("PNG", "webp"))
        context = _context(Document(), options)
        assert context.image_extensions == frozenset({"png", "webp"})

    def test_markdown_options_use_default_image_extensions(self):
        context = _context(Document(), MarkdownRendererOptions())
        assert "png" in context.image_extensions

    def test_parent_of_and_enclosing_block(self):
        link = Link(path="a.png", link_type="file")
        emphasis = Emphasis(content=[link])
        paragraph = Paragraph(content=[emphasis])
        doc = Document(children=[paragraph])
        context = _context(doc)

        assert context.parent_of(link) is emphasis
        assert context.enclosing_block(link) is paragraph
        assert context.parent_of(doc) is None
        assert context.parent_of(Text(content="elsewhere")) is None

    def test_list_depth(self):
        inner_item = ListItem(children=[Paragraph(content=[Text(content="inner")])])
        inner = List(ordered=False, items=[inner_item])
        outer = List(ordered=False, items=[ListItem(children=[inner])])
        context = _context(Document(children=[outer]))

        assert context.list_depth(outer) == 0
        assert context.list_depth(inner) == 1
        assert context.list_depth(inner_item) == 2

    def test_render_nodes_concatenates_inline(self):
        context = _context(Document())
        assert context.render_nodes([Text(content="a"), Text(content="b")]) == "ab"

    def test_render_nodes_separates_blocks(self):
        context = _context(Document())
        assert context.render_nodes([Paragraph(), Paragraph()]) == "<block>\n\n<block>"

    def test_footnote_index_is_built(self):
        context = _context(Document())
        assert len(context.footnotes) == 0
