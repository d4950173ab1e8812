#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/ast/nodes.py
"""AST node classes for document representation.

This module defines the node hierarchy a host document-parsing engine builds
before handing a tree to the Leanpub renderer. Each node class is one variant
of a tagged union: renderers dispatch on the node class, never on ad hoc
attributes.

Nodes are frozen dataclasses. Renderers read them and never modify them, so
one tree can be rendered any number of times, from any thread.

Node Hierarchy
--------------
Block-level nodes represent structural document elements:
    - Document, Heading, Paragraph, CodeBlock, LiteralBlock, BlockQuote
    - List, ListItem, Table, TableRow, TableCell
    - ThematicBreak, RawBlock, FootnoteDefinition, MathBlock

Inline nodes represent text formatting:
    - Text, Emphasis, Strong, Code
    - Link, Image, LineBreak
    - Strikethrough, Underline, Superscript, Subscript
    - RawInline, FootnoteReference, MathInline

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Literal, Optional

Alignment = Literal["left", "center", "right"]
LiteralKind = Literal["example", "fixed-width"]

_LITERAL_KINDS = ("example", "fixed-width")


class Node(ABC):
    """Base class for all AST nodes.

    All document nodes inherit from this base class and support the visitor
    pattern for rendering.

    Parameters
    ----------
    metadata : dict, default = empty dict
        Arbitrary metadata associated with this node

    """

    metadata: dict[str, Any]

    @abstractmethod
    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods
        contents : list of str
            Already rendered fragments of this node's children
        context : ExportContext
            Read-only export context shared by every node of one export

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Block-level Nodes
# ============================================================================


@dataclass(frozen=True)
class Document(Node):
    """Root document node containing all other nodes.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the document
    metadata : dict, default = empty dict
        Document-level metadata (title, author, etc.)

    """

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_document``."""
        return visitor.visit_document(self, contents, context)


@dataclass(frozen=True)
class Heading(Node):
    """Heading node (h1-h6).

    Parameters
    ----------
    level : int
        Heading level (1-6, where 1 is most important)
    content : list of Node, default = empty list
        Inline nodes representing heading text
    identifier : str or None, default = None
        Cross-reference id other parts of the document link to
    metadata : dict, default = empty dict
        Heading metadata

    """

    level: int
    content: list[Node] = field(default_factory=list)
    identifier: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate heading level is between 1 and 6."""
        if not 1 <= self.level <= 6:
            raise ValueError(f"Heading level must be 1-6, got {self.level}")

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_heading``."""
        return visitor.visit_heading(self, contents, context)


@dataclass(frozen=True)
class Paragraph(Node):
    """Paragraph node containing inline content.

    Parameters
    ----------
    content : list of Node, default = empty list
        Inline nodes representing paragraph content
    caption : list of Node or None, default = None
        Caption attached to the paragraph (e.g. ``#+CAPTION:`` in Org),
        used by images that are the paragraph's content
    metadata : dict, default = empty dict
        Paragraph metadata

    """

    content: list[Node] = field(default_factory=list)
    caption: Optional[list[Node]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_paragraph``."""
        return visitor.visit_paragraph(self, contents, context)


@dataclass(frozen=True)
class CodeBlock(Node):
    """Source code block with optional language.

    Parameters
    ----------
    content : str
        Raw code, possibly indented to match its position in the source
    language : str or None, default = None
        Language tag, passed through verbatim
    metadata : dict, default = empty dict
        Code block metadata

    """

    content: str
    language: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_code_block``."""
        return visitor.visit_code_block(self, contents, context)


@dataclass(frozen=True)
class LiteralBlock(Node):
    """Literal text block: an example block or a fixed-width area.

    Parameters
    ----------
    content : str
        Raw literal text, possibly indented
    kind : {"example", "fixed-width"}, default = "example"
        Which source construct produced the block
    metadata : dict, default = empty dict
        Block metadata

    """

    content: str
    kind: LiteralKind = "example"
    metadata: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate the literal block kind."""
        if self.kind not in _LITERAL_KINDS:
            raise ValueError(f"Literal block kind must be one of {_LITERAL_KINDS}, got {self.kind!r}")

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_literal_block``."""
        return visitor.visit_literal_block(self, contents, context)


@dataclass(frozen=True)
class BlockQuote(Node):
    """Block quote node containing other block elements."""

    children: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_block_quote``."""
        return visitor.visit_block_quote(self, contents, context)


@dataclass(frozen=True)
class List(Node):
    """List node (ordered or unordered).

    Parameters
    ----------
    ordered : bool
        True for ordered lists, False for unordered
    items : list of ListItem, default = empty list
        List items
    start : int, default = 1
        Starting number for ordered lists
    tight : bool, default = True
        Whether list is tight (no blank lines between items)
    metadata : dict, default = empty dict
        List metadata

    """

    ordered: bool
    items: list[ListItem] = field(default_factory=list)
    start: int = 1
    tight: bool = True
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_list``."""
        return visitor.visit_list(self, contents, context)


@dataclass(frozen=True)
class ListItem(Node):
    """List item node containing block content.

    Parameters
    ----------
    children : list of Node, default = empty list
        Block-level nodes in the list item
    task_status : {'checked', 'unchecked'} or None, default = None
        Checkbox state for task list items
    metadata : dict, default = empty dict
        List item metadata

    """

    children: list[Node] = field(default_factory=list)
    task_status: Optional[Literal["checked", "unchecked"]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_list_item``."""
        return visitor.visit_list_item(self, contents, context)


@dataclass(frozen=True)
class Table(Node):
    """Table node.

    Parameters
    ----------
    rows : list of TableRow, default = empty list
        Body rows
    header : TableRow or None, default = None
        Header row, rendered before the body rows
    alignments : list of Alignment or None, default = empty list
        Column alignments
    metadata : dict, default = empty dict
        Table metadata

    """

    rows: list[TableRow] = field(default_factory=list)
    header: Optional[TableRow] = None
    alignments: list[Alignment | None] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_table``."""
        return visitor.visit_table(self, contents, context)


@dataclass(frozen=True)
class TableRow(Node):
    """Table row node."""

    cells: list[TableCell] = field(default_factory=list)
    is_header: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_table_row``."""
        return visitor.visit_table_row(self, contents, context)


@dataclass(frozen=True)
class TableCell(Node):
    """Table cell node with inline content."""

    content: list[Node] = field(default_factory=list)
    alignment: Alignment | None = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_table_cell``."""
        return visitor.visit_table_cell(self, contents, context)


@dataclass(frozen=True)
class ThematicBreak(Node):
    """Thematic break (horizontal rule)."""

    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_thematic_break``."""
        return visitor.visit_thematic_break(self, contents, context)


@dataclass(frozen=True)
class RawBlock(Node):
    """Raw block of another format embedded in the document.

    Represents content meant for one export backend only, such as an Org
    ``#+BEGIN_EXPORT html`` block. The content is kept as-is.

    Parameters
    ----------
    content : str
        Raw markup
    format : str, default = "html"
        Backend the markup targets
    metadata : dict, default = empty dict
        Block metadata

    """

    content: str
    format: str = "html"
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_raw_block``."""
        return visitor.visit_raw_block(self, contents, context)


@dataclass(frozen=True)
class FootnoteDefinition(Node):
    """Footnote definition node (block).

    Parameters
    ----------
    identifier : str
        Footnote label matching a FootnoteReference
    content : list of Node, default = empty list
        Block-level content of the footnote
    metadata : dict, default = empty dict
        Footnote definition metadata

    """

    identifier: str
    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_definition``."""
        return visitor.visit_footnote_definition(self, contents, context)


@dataclass(frozen=True)
class MathBlock(Node):
    """Display math block holding LaTeX source."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_math_block``."""
        return visitor.visit_math_block(self, contents, context)


# ============================================================================
# Inline Nodes
# ============================================================================


@dataclass(frozen=True)
class Text(Node):
    """Plain text run."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_text``."""
        return visitor.visit_text(self, contents, context)


@dataclass(frozen=True)
class Emphasis(Node):
    """Emphasis (italic) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_emphasis``."""
        return visitor.visit_emphasis(self, contents, context)


@dataclass(frozen=True)
class Strong(Node):
    """Strong (bold) node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_strong``."""
        return visitor.visit_strong(self, contents, context)


@dataclass(frozen=True)
class Code(Node):
    """Inline code (verbatim) node."""

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_code``."""
        return visitor.visit_code(self, contents, context)


@dataclass(frozen=True)
class Link(Node):
    """Link node.

    Links keep the target split the way Org-mode splits it: a target type
    and a raw path with the type prefix removed. ``[[https://example.com]]``
    becomes ``Link(path="//example.com", link_type="https")`` and
    ``[[#intro]]`` becomes ``Link(path="intro", link_type="custom-id")``.

    Parameters
    ----------
    path : str
        Raw link path without the type prefix
    link_type : str, default = "fuzzy"
        Target type (``id``, ``custom-id``, ``http``, ``https``, ``ftp``,
        ``file``, ``fuzzy``, ...)
    content : list of Node, default = empty list
        Inline nodes of the link description; empty when the link has none
    title : str or None, default = None
        Optional link title
    metadata : dict, default = empty dict
        Link metadata

    """

    path: str
    link_type: str = "fuzzy"
    content: list[Node] = field(default_factory=list)
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    @property
    def url(self) -> str:
        """Return the link target as a single URL string."""
        if self.link_type in ("id", "custom-id"):
            return f"#{self.path}"
        if self.link_type in ("fuzzy", "file"):
            return self.path
        return f"{self.link_type}:{self.path}"

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_link``."""
        return visitor.visit_link(self, contents, context)


@dataclass(frozen=True)
class Image(Node):
    """Explicit image node.

    Parameters
    ----------
    url : str
        Image source
    alt_text : str, default = ''
        Alternative text description
    title : str or None, default = None
        Optional image title
    metadata : dict, default = empty dict
        Image metadata

    """

    url: str
    alt_text: str = ""
    title: Optional[str] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_image``."""
        return visitor.visit_image(self, contents, context)


@dataclass(frozen=True)
class LineBreak(Node):
    """Line break node; ``soft`` marks a newline from the source."""

    soft: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_line_break``."""
        return visitor.visit_line_break(self, contents, context)


@dataclass(frozen=True)
class Strikethrough(Node):
    """Strikethrough node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_strikethrough``."""
        return visitor.visit_strikethrough(self, contents, context)


@dataclass(frozen=True)
class Underline(Node):
    """Underline node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_underline``."""
        return visitor.visit_underline(self, contents, context)


@dataclass(frozen=True)
class Superscript(Node):
    """Superscript node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_superscript``."""
        return visitor.visit_superscript(self, contents, context)


@dataclass(frozen=True)
class Subscript(Node):
    """Subscript node."""

    content: list[Node] = field(default_factory=list)
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_subscript``."""
        return visitor.visit_subscript(self, contents, context)


@dataclass(frozen=True)
class RawInline(Node):
    """Inline raw markup for a single backend (e.g. an Org export snippet)."""

    content: str
    format: str = "html"
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_raw_inline``."""
        return visitor.visit_raw_inline(self, contents, context)


@dataclass(frozen=True)
class FootnoteReference(Node):
    """Footnote reference node (inline).

    Parameters
    ----------
    identifier : str or None, default = None
        Explicit footnote label. Anonymous footnotes have no label and are
        numbered by their position among all footnotes.
    definition : list of Node or None, default = None
        Inline definition, for footnotes defined at the reference itself
    metadata : dict, default = empty dict
        Footnote reference metadata

    """

    identifier: Optional[str] = None
    definition: Optional[list[Node]] = None
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_footnote_reference``."""
        return visitor.visit_footnote_reference(self, contents, context)


@dataclass(frozen=True)
class MathInline(Node):
    """Inline math fragment.

    Parameters
    ----------
    content : str
        Raw fragment value as the parser produced it, which may still
        carry delimiters such as ``\\[`` and ``\\]``
    metadata : dict, default = empty dict
        Math metadata

    """

    content: str
    metadata: dict[str, Any] = field(default_factory=dict)

    def accept(self, visitor: Any, contents: list[str], context: Any) -> Any:
        """Dispatch to ``visitor.visit_math_inline``."""
        return visitor.visit_math_inline(self, contents, context)


INLINE_NODE_TYPES: tuple[type[Node], ...] = (
    Text,
    Emphasis,
    Strong,
    Code,
    Link,
    Image,
    LineBreak,
    Strikethrough,
    Underline,
    Superscript,
    Subscript,
    RawInline,
    FootnoteReference,
    MathInline,
)


def is_inline(node: Node) -> bool:
    """Return True if ``node`` is an inline node."""
    return isinstance(node, INLINE_NODE_TYPES)


def get_node_children(node: Node) -> list[Node]:
    """Get the children a renderer renders before ``node`` itself.

    The order is document order. Inline footnote definitions are not
    children of their reference: they are rendered in the footnote section,
    not at the reference.

    Parameters
    ----------
    node : Node
        Node to get children from

    Returns
    -------
    list of Node
        Child nodes (empty list for leaf nodes)

    """
    if isinstance(node, (Document, BlockQuote, ListItem)):
        return list(node.children)
    if isinstance(node, List):
        return list(node.items)
    if isinstance(node, Table):
        rows: list[Node] = [node.header] if node.header is not None else []
        rows.extend(node.rows)
        return rows
    if isinstance(node, TableRow):
        return list(node.cells)
    if isinstance(
        node,
        (
            Heading,
            Paragraph,
            TableCell,
            FootnoteDefinition,
            Emphasis,
            Strong,
            Link,
            Strikethrough,
            Underline,
            Superscript,
            Subscript,
        ),
    ):
        return list(node.content)
    return []
