#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/footnotes.py
"""Footnote numbering and definition collection.

Footnote state is never accumulated while rendering. It is recomputed from
the whole tree, once per export, by :meth:`FootnoteIndex.from_document`:

- Every distinct footnote gets a 1-based number at its first reference, in
  document order, paragraph captions counting after the paragraph content.
  Labelled footnotes are identified by label, anonymous ones by the
  reference node itself.
- When a footnote is referenced for the first time, references inside its
  definition are numbered next, before the walk continues.
- Definitions that are never referenced follow the referenced ones, in
  document order.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Hashable, Iterator, Mapping, Optional, Sequence

from orgleanpub.ast import Document, FootnoteDefinition, FootnoteReference, Node, get_tree_children, iter_nodes

logger = logging.getLogger(__name__)


def _footnote_key(reference: FootnoteReference) -> Hashable:
    if reference.identifier:
        return reference.identifier
    return ("anonymous", id(reference))


@dataclass(frozen=True)
class FootnoteEntry:
    """One footnote of the definitions section.

    Parameters
    ----------
    number : int
        1-based footnote number
    label : str or None
        Explicit label, None for anonymous footnotes
    content : tuple of Node
        Definition content (block nodes, or inline nodes for inline definitions)

    """

    number: int
    label: Optional[str]
    content: tuple[Node, ...]

    @property
    def marker(self) -> str:
        """Return the label, or the number for anonymous footnotes."""
        return self.label if self.label else str(self.number)


class FootnoteIndex:
    """Read-only lookup of footnote numbers and definitions for one document.

    Parameters
    ----------
    numbers : Mapping
        Footnote key to number
    entries : Sequence of FootnoteEntry
        Definitions in output order

    """

    def __init__(self, numbers: Mapping[Hashable, int], entries: Sequence[FootnoteEntry]):
        """Initialize the index from precomputed numbers and entries."""
        self._numbers = MappingProxyType(dict(numbers))
        self._entries = tuple(entries)

    @classmethod
    def from_document(cls, document: Document) -> FootnoteIndex:
        """Compute the footnote index of ``document``.

        Parameters
        ----------
        document : Document
            Document to index

        Returns
        -------
        FootnoteIndex
            Numbers for every footnote and the ordered definitions

        """
        definitions: dict[str, list[Node]] = {}
        for node in iter_nodes(document):
            if isinstance(node, FootnoteDefinition):
                definitions.setdefault(node.identifier, list(node.content))
            elif isinstance(node, FootnoteReference) and node.identifier and node.definition is not None:
                definitions.setdefault(node.identifier, list(node.definition))

        numbers: dict[Hashable, int] = {}
        entries: list[FootnoteEntry] = []

        def add(key: Hashable, label: Optional[str], content: Optional[list[Node]]) -> None:
            number = len(numbers) + 1
            numbers[key] = number
            if content is None:
                logger.warning("Footnote [%s] is referenced but never defined", label)
                return
            entries.append(FootnoteEntry(number=number, label=label, content=tuple(content)))
            walk(content)

        def walk(nodes: list[Node]) -> None:
            for node in nodes:
                if isinstance(node, FootnoteDefinition):
                    continue
                if isinstance(node, FootnoteReference):
                    key = _footnote_key(node)
                    if key in numbers:
                        continue
                    if node.identifier:
                        add(key, node.identifier, definitions.get(node.identifier))
                    else:
                        add(key, None, list(node.definition or []))
                    continue
                walk(get_tree_children(node))

        walk(list(document.children))

        for identifier, content in definitions.items():
            if identifier not in numbers:
                logger.debug("Footnote [%s] is defined but never referenced", identifier)
                add(identifier, identifier, content)

        return cls(numbers, entries)

    @property
    def entries(self) -> tuple[FootnoteEntry, ...]:
        """Footnote definitions in output order."""
        return self._entries

    def __iter__(self) -> Iterator[FootnoteEntry]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def number_for(self, reference: FootnoteReference) -> int:
        """Return the 1-based number of the footnote ``reference`` points to.

        Raises
        ------
        KeyError
            If the reference is not part of the indexed document

        """
        return self._numbers[_footnote_key(reference)]

    def label_for(self, reference: FootnoteReference) -> str:
        """Return the explicit label of ``reference``, else its footnote number."""
        if reference.identifier:
            return reference.identifier
        return str(self.number_for(reference))


__all__ = [
    "FootnoteEntry",
    "FootnoteIndex",
]
