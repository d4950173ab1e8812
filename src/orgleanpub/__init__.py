#  Copyright (c) 2025 Tom Villani, Ph.D.
"""orgleanpub - Export parsed Org documents to Leanpub Markdown.

The library takes a document tree built by a host parser and renders it to
the Markdown dialect of the Leanpub publishing platform. Leanpub-specific
syntax comes from a table of per-node rules; all other node kinds use a
generic Markdown renderer.

Examples
--------
    >>> from orgleanpub import to_leanpub
    >>> from orgleanpub.ast import Document, Link, Paragraph, Text
    >>> doc = Document(children=[
    ...     Paragraph(content=[Link(path="//example.com", link_type="https", content=[Text(content="site")])])
    ... ])
    >>> to_leanpub(doc)
    '[site](https://example.com)'

"""

from orgleanpub.api import export_async, export_to_file, output_path_for, to_leanpub
from orgleanpub.context import ExportContext, Rule
from orgleanpub.exceptions import (
    InvalidOptionsError,
    OrgLeanpubError,
    OutputWriteError,
    RenderingError,
    ValidationError,
)
from orgleanpub.footnotes import FootnoteEntry, FootnoteIndex
from orgleanpub.options import LeanpubRendererOptions, MarkdownRendererOptions
from orgleanpub.renderers import LEANPUB_RULES, LeanpubRenderer, MarkdownRenderer

__version__ = "0.1.0"

__all__ = [
    "ExportContext",
    "FootnoteEntry",
    "FootnoteIndex",
    "InvalidOptionsError",
    "LEANPUB_RULES",
    "LeanpubRenderer",
    "LeanpubRendererOptions",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "OrgLeanpubError",
    "OutputWriteError",
    "RenderingError",
    "Rule",
    "ValidationError",
    "__version__",
    "export_async",
    "export_to_file",
    "output_path_for",
    "to_leanpub",
]
