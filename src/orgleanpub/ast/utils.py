#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
extract_text : Extract plain text from a node or list of nodes
get_tree_children : Get every child of a node, including captions and inline definitions
iter_nodes : Iterate over a subtree in document order
build_parent_map : Map every node of a tree to its parent

Examples
--------
Extract text from a heading:

    >>> from orgleanpub.ast import Heading, Text, Emphasis
    >>> from orgleanpub.ast.utils import extract_text
    >>>
    >>> heading = Heading(level=1, content=[
    ...     Text(content="Hello "),
    ...     Emphasis(content=[Text(content="world")])
    ... ])
    >>> extract_text(heading, joiner="")
    'Hello world'

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Union

from orgleanpub.ast.nodes import FootnoteReference, Paragraph, Text, get_node_children

if TYPE_CHECKING:
    from orgleanpub.ast.nodes import Node

logger = logging.getLogger(__name__)


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join text parts

    Returns
    -------
    str
        Concatenated text content from all Text nodes

    """
    if isinstance(node_or_nodes, list):
        parts = [extract_text(node, joiner=joiner) for node in node_or_nodes]
        return joiner.join(part for part in parts if part)

    if isinstance(node_or_nodes, Text):
        return node_or_nodes.content

    parts = [extract_text(child, joiner=joiner) for child in get_node_children(node_or_nodes)]
    return joiner.join(part for part in parts if part)


def get_tree_children(node: Node) -> list[Node]:
    """Get every child of ``node`` in document order, rendered or not.

    Extends :func:`~orgleanpub.ast.nodes.get_node_children` with the inline
    definition of a footnote reference and the caption of a paragraph
    (after its content).
    """
    children = get_node_children(node)
    if isinstance(node, FootnoteReference) and node.definition:
        children = children + list(node.definition)
    elif isinstance(node, Paragraph) and node.caption:
        children = children + list(node.caption)
    return children


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield ``root`` and all of its descendants in document order.

    Inline footnote definitions are visited right after their reference,
    paragraph captions right after the paragraph content.

    Parameters
    ----------
    root : Node
        Root of the subtree

    Yields
    ------
    Node
        Nodes in pre-order

    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(get_tree_children(node)))


def build_parent_map(root: Node) -> dict[int, Node]:
    """Map the ``id()`` of every descendant of ``root`` to its parent.

    Nodes are unhashable dataclasses, so the map is keyed by identity. The
    map is only valid while ``root`` is alive.

    A node instance must appear only once in the tree. When the same instance
    is placed under several parents, the first parent in document order is
    kept and a warning is logged.

    Parameters
    ----------
    root : Node
        Root of the tree

    Returns
    -------
    dict[int, Node]
        Parent lookup; ``root`` itself has no entry

    """
    parents: dict[int, Node] = {}
    for node in iter_nodes(root):
        for child in get_tree_children(node):
            known = parents.setdefault(id(child), node)
            if known is not node:
                logger.warning(
                    "%s instance appears under both %s and %s; using the first parent",
                    type(child).__name__,
                    type(known).__name__,
                    type(node).__name__,
                )
    return parents


__all__ = [
    "build_parent_map",
    "extract_text",
    "get_tree_children",
    "iter_nodes",
]
