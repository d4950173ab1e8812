#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/context.py
"""Read-only export context shared by every rendering rule.

One :class:`ExportContext` is built per export. It bundles the document-wide
data a rule may need (the whole tree, options, footnote numbering, parent
lookup) with the two callables rules use to render other nodes. Rules read
it and never modify it.

"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Iterable, Mapping, Optional

from orgleanpub.ast import Document, List, Node, build_parent_map, is_inline
from orgleanpub.constants import DEFAULT_IMAGE_EXTENSIONS
from orgleanpub.footnotes import FootnoteIndex
from orgleanpub.options.markdown import MarkdownRendererOptions

#: A rendering rule: ``(node, rendered_children, context) -> fragment``.
Rule = Callable[[Node, list[str], "ExportContext"], str]


@dataclass(frozen=True)
class ExportContext:
    """Document-wide, read-only state for one export.

    Parameters
    ----------
    document : Document
        The full document tree
    options : MarkdownRendererOptions
        Options of the active renderer
    footnotes : FootnoteIndex
        Footnote numbers and definitions, computed from ``document``
    parents : Mapping[int, Node]
        ``id()`` of a node to its parent node
    image_extensions : frozenset of str
        Lower-case file extensions recognized as inline images
    transcode : callable
        Renders any node (and its subtree) with the active rule table
    fallback : Rule
        The generic handler for node kinds without a rule

    """

    document: Document
    options: MarkdownRendererOptions
    footnotes: FootnoteIndex
    parents: Mapping[int, Node]
    image_extensions: frozenset[str]
    transcode: Callable[[Node], str]
    fallback: Rule

    @classmethod
    def build(
        cls,
        document: Document,
        options: MarkdownRendererOptions,
        transcode: Callable[[Node], str],
        fallback: Rule,
    ) -> ExportContext:
        """Compute the document-wide data and build the context.

        Parameters
        ----------
        document : Document
            Document being exported
        options : MarkdownRendererOptions
            Options of the active renderer
        transcode : callable
            Subtree renderer of the active renderer
        fallback : Rule
            Generic handler of the active renderer

        Returns
        -------
        ExportContext
            Context for this export

        """
        extensions = getattr(options, "image_extensions", DEFAULT_IMAGE_EXTENSIONS)
        return cls(
            document=document,
            options=options,
            footnotes=FootnoteIndex.from_document(document),
            parents=MappingProxyType(build_parent_map(document)),
            image_extensions=frozenset(extension.lower() for extension in extensions),
            transcode=transcode,
            fallback=fallback,
        )

    def parent_of(self, node: Node) -> Optional[Node]:
        """Return the parent of ``node``, or None for the root and foreign nodes."""
        return self.parents.get(id(node))

    def enclosing_block(self, node: Node) -> Optional[Node]:
        """Return the nearest block-level ancestor of ``node``."""
        parent = self.parent_of(node)
        while parent is not None and is_inline(parent):
            parent = self.parent_of(parent)
        return parent

    def list_depth(self, node: Node) -> int:
        """Return how many List nodes enclose ``node``."""
        depth = 0
        parent = self.parent_of(node)
        while parent is not None:
            if isinstance(parent, List):
                depth += 1
            parent = self.parent_of(parent)
        return depth

    def render_nodes(self, nodes: Iterable[Node]) -> str:
        """Render a sequence of sibling nodes with the active rule table.

        Inline siblings are concatenated; block siblings are separated by a
        blank line, skipping those that render empty.
        """
        nodes = list(nodes)
        fragments = [self.transcode(node) for node in nodes]
        if all(is_inline(node) for node in nodes):
            return "".join(fragments)
        return "\n\n".join(fragment for fragment in fragments if fragment)


__all__ = [
    "ExportContext",
    "Rule",
]
