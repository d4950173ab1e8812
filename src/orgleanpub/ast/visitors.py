#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/ast/visitors.py
"""Visitor base class for bottom-up rendering of the AST.

Renderers fold the tree bottom-up: a node's children are rendered first and
the resulting fragments are handed to the node's ``visit_*`` method together
with the node. A visitor therefore never walks children itself; it only
combines what it is given.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

from orgleanpub.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    LiteralBlock,
    MathBlock,
    MathInline,
    Paragraph,
    RawBlock,
    RawInline,
    Strikethrough,
    Strong,
    Subscript,
    Superscript,
    Table,
    TableCell,
    TableRow,
    Text,
    ThematicBreak,
    Underline,
)

if TYPE_CHECKING:
    from orgleanpub.context import ExportContext


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Every ``visit_*`` method receives the node, the rendered fragments of
    its children (in the order given by
    :func:`orgleanpub.ast.nodes.get_node_children`) and the
    :class:`~orgleanpub.context.ExportContext` of the export, and returns the
    result for the node.

    Examples
    --------
    Upper-casing plain text on top of the generic Markdown renderer:

        >>> from orgleanpub.renderers.markdown import MarkdownRenderer
        >>> class ShoutingRenderer(MarkdownRenderer):
        ...     def visit_text(self, node, contents, context):
        ...         return node.content.upper()

    """

    @abstractmethod
    def visit_document(self, node: Document, contents: list[str], context: ExportContext) -> Any:
        """Visit a Document node."""

    @abstractmethod
    def visit_heading(self, node: Heading, contents: list[str], context: ExportContext) -> Any:
        """Visit a Heading node."""

    @abstractmethod
    def visit_paragraph(self, node: Paragraph, contents: list[str], context: ExportContext) -> Any:
        """Visit a Paragraph node."""

    @abstractmethod
    def visit_code_block(self, node: CodeBlock, contents: list[str], context: ExportContext) -> Any:
        """Visit a CodeBlock node."""

    @abstractmethod
    def visit_literal_block(self, node: LiteralBlock, contents: list[str], context: ExportContext) -> Any:
        """Visit a LiteralBlock node."""

    @abstractmethod
    def visit_block_quote(self, node: BlockQuote, contents: list[str], context: ExportContext) -> Any:
        """Visit a BlockQuote node."""

    @abstractmethod
    def visit_list(self, node: List, contents: list[str], context: ExportContext) -> Any:
        """Visit a List node."""

    @abstractmethod
    def visit_list_item(self, node: ListItem, contents: list[str], context: ExportContext) -> Any:
        """Visit a ListItem node."""

    @abstractmethod
    def visit_table(self, node: Table, contents: list[str], context: ExportContext) -> Any:
        """Visit a Table node."""

    @abstractmethod
    def visit_table_row(self, node: TableRow, contents: list[str], context: ExportContext) -> Any:
        """Visit a TableRow node."""

    @abstractmethod
    def visit_table_cell(self, node: TableCell, contents: list[str], context: ExportContext) -> Any:
        """Visit a TableCell node."""

    @abstractmethod
    def visit_thematic_break(self, node: ThematicBreak, contents: list[str], context: ExportContext) -> Any:
        """Visit a ThematicBreak node."""

    @abstractmethod
    def visit_raw_block(self, node: RawBlock, contents: list[str], context: ExportContext) -> Any:
        """Visit a RawBlock node."""

    @abstractmethod
    def visit_footnote_definition(self, node: FootnoteDefinition, contents: list[str], context: ExportContext) -> Any:
        """Visit a FootnoteDefinition node."""

    @abstractmethod
    def visit_math_block(self, node: MathBlock, contents: list[str], context: ExportContext) -> Any:
        """Visit a MathBlock node."""

    @abstractmethod
    def visit_text(self, node: Text, contents: list[str], context: ExportContext) -> Any:
        """Visit a Text node."""

    @abstractmethod
    def visit_emphasis(self, node: Emphasis, contents: list[str], context: ExportContext) -> Any:
        """Visit an Emphasis node."""

    @abstractmethod
    def visit_strong(self, node: Strong, contents: list[str], context: ExportContext) -> Any:
        """Visit a Strong node."""

    @abstractmethod
    def visit_code(self, node: Code, contents: list[str], context: ExportContext) -> Any:
        """Visit a Code node."""

    @abstractmethod
    def visit_link(self, node: Link, contents: list[str], context: ExportContext) -> Any:
        """Visit a Link node."""

    @abstractmethod
    def visit_image(self, node: Image, contents: list[str], context: ExportContext) -> Any:
        """Visit an Image node."""

    @abstractmethod
    def visit_line_break(self, node: LineBreak, contents: list[str], context: ExportContext) -> Any:
        """Visit a LineBreak node."""

    @abstractmethod
    def visit_strikethrough(self, node: Strikethrough, contents: list[str], context: ExportContext) -> Any:
        """Visit a Strikethrough node."""

    @abstractmethod
    def visit_underline(self, node: Underline, contents: list[str], context: ExportContext) -> Any:
        """Visit an Underline node."""

    @abstractmethod
    def visit_superscript(self, node: Superscript, contents: list[str], context: ExportContext) -> Any:
        """Visit a Superscript node."""

    @abstractmethod
    def visit_subscript(self, node: Subscript, contents: list[str], context: ExportContext) -> Any:
        """Visit a Subscript node."""

    @abstractmethod
    def visit_raw_inline(self, node: RawInline, contents: list[str], context: ExportContext) -> Any:
        """Visit a RawInline node."""

    @abstractmethod
    def visit_footnote_reference(self, node: FootnoteReference, contents: list[str], context: ExportContext) -> Any:
        """Visit a FootnoteReference node."""

    @abstractmethod
    def visit_math_inline(self, node: MathInline, contents: list[str], context: ExportContext) -> Any:
        """Visit a MathInline node."""
