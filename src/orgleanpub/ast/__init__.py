#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/ast/__init__.py
"""Document tree (AST) consumed by the orgleanpub renderers.

A host parsing engine builds a :class:`Document` from these node classes and
hands it to a renderer. The package also exposes the visitor base class and
tree helpers.

Examples
--------
    >>> from orgleanpub.ast import Document, Heading, Text
    >>> doc = Document(children=[
    ...     Heading(level=1, content=[Text(content="Intro")], identifier="sec1")
    ... ])

"""

from orgleanpub.ast.nodes import (
    INLINE_NODE_TYPES,
    Alignment,
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
    Node,
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
    get_node_children,
    is_inline,
)
from orgleanpub.ast.utils import build_parent_map, extract_text, get_tree_children, iter_nodes
from orgleanpub.ast.visitors import NodeVisitor

__all__ = [
    "INLINE_NODE_TYPES",
    "Alignment",
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "FootnoteDefinition",
    "FootnoteReference",
    "Heading",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "LiteralBlock",
    "MathBlock",
    "MathInline",
    "Node",
    "NodeVisitor",
    "Paragraph",
    "RawBlock",
    "RawInline",
    "Strikethrough",
    "Strong",
    "Subscript",
    "Superscript",
    "Table",
    "TableCell",
    "TableRow",
    "Text",
    "ThematicBreak",
    "Underline",
    "build_parent_map",
    "extract_text",
    "get_node_children",
    "get_tree_children",
    "is_inline",
    "iter_nodes",
]
