#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/renderers/leanpub.py
"""Leanpub Markdown rendering from AST.

Leanpub output is produced by a table of rules keyed by node class. Each
rule is a pure function ``(node, rendered_children, context) -> str``. Node
kinds without a rule are delegated to the generic
:class:`~orgleanpub.renderers.markdown.MarkdownRenderer`.

Tables and raw markup (``RawBlock``, ``RawInline``) are suppressed on
purpose: Leanpub does not support them and source markup must not leak into
the book.

"""

from __future__ import annotations

import logging
import os
from types import MappingProxyType
from typing import Mapping, Optional

from orgleanpub.ast.nodes import (
    CodeBlock,
    Document,
    FootnoteDefinition,
    FootnoteReference,
    Heading,
    Link,
    LiteralBlock,
    MathInline,
    Node,
    Paragraph,
    RawBlock,
    RawInline,
    Table,
    Text,
    get_node_children,
)
from orgleanpub.ast.utils import iter_nodes
from orgleanpub.constants import (
    CROSS_REFERENCE_LINK_TYPES,
    LEANPUB_ASIDE_PREFIX,
    LEANPUB_FENCE,
    LEANPUB_MATH_CLOSE,
    LEANPUB_MATH_OPEN,
)
from orgleanpub.context import ExportContext, Rule
from orgleanpub.exceptions import RenderingError
from orgleanpub.options.leanpub import LeanpubRendererOptions
from orgleanpub.renderers.base import BaseRenderer
from orgleanpub.renderers.markdown import MarkdownRenderer
from orgleanpub.utils.text import ensure_trailing_newline, indent_continuation, prefix_lines, remove_indentation

logger = logging.getLogger(__name__)


def _drop(node: Node, context: ExportContext, reason: str) -> str:
    """Render dropped content as nothing, or fail when configured to."""
    if context.options.fail_on_dropped_content:
        node_type = type(node).__name__
        raise RenderingError(f"Cannot render {node_type} as Leanpub Markdown: {reason}", node_type=node_type)
    logger.debug("Dropping %s: %s", type(node).__name__, reason)
    return ""


def _fenced(header: str, content: str) -> str:
    text = ensure_trailing_newline(remove_indentation(content))
    return f"{header}\n{LEANPUB_FENCE}\n{text}{LEANPUB_FENCE}"


# ----------------------------------------------------------------------
# Block rules
# ----------------------------------------------------------------------


def render_code_block(node: CodeBlock, contents: list[str], context: ExportContext) -> str:
    """Render source code as a ``{lang="..."}`` annotated fenced block.

    The language tag is emitted verbatim; a block without one gets an empty
    tag. Indentation common to all lines is removed.

    Examples
    --------
        >>> render_code_block(CodeBlock(content="  print(1)\\n", language="python"), [], None)
        '{lang="python"}\\n~~~~~~~~\\nprint(1)\\n~~~~~~~~'

    """
    return _fenced(f'{{lang="{node.language or ""}"}}', node.content)


def render_literal_block(node: LiteralBlock, contents: list[str], context: ExportContext) -> str:
    """Render example and fixed-width text as an aside without line numbers.

    The complete block, header and fences included, is prefixed line by line
    with ``A> ``.
    """
    return prefix_lines(_fenced("{linenos=off}", node.content), LEANPUB_ASIDE_PREFIX)


def render_heading(node: Heading, contents: list[str], context: ExportContext) -> str:
    """Put a ``{#id}`` anchor line before headings that carry an identifier."""
    heading = context.fallback(node, contents, context)
    if node.identifier:
        return f"{{#{node.identifier}}}\n{heading}"
    return heading


def omit_footnote_definition(node: FootnoteDefinition, contents: list[str], context: ExportContext) -> str:
    """Render nothing in place; definitions go to the footnote section."""
    return ""


def suppress(node: Node, contents: list[str], context: ExportContext) -> str:
    """Render a node kind Leanpub cannot represent as nothing."""
    return _drop(node, context, "not supported by Leanpub")


# ----------------------------------------------------------------------
# Inline rules
# ----------------------------------------------------------------------


def _is_inline_image(node: Link, context: ExportContext) -> bool:
    if node.link_type not in context.options.image_link_types:
        return False
    _, dot, extension = node.path.rpartition(".")
    return bool(dot) and extension.lower() in context.image_extensions


def _image_path(node: Link) -> str:
    if node.link_type != "file":
        return f"{node.link_type}:{node.path}"
    if os.path.isabs(node.path) or node.path.startswith("~"):
        return os.path.abspath(os.path.expanduser(node.path))
    return node.path


def _image_caption(node: Link, context: ExportContext) -> str:
    block = context.enclosing_block(node)
    if not isinstance(block, Paragraph) or not block.caption:
        return ""
    # An image inside the caption itself gets no caption
    if any(descendant is node for caption_node in block.caption for descendant in iter_nodes(caption_node)):
        return ""
    return context.render_nodes(block.caption)


def render_link(node: Link, contents: list[str], context: ExportContext) -> str:
    """Render a link by its target type.

    - ``id`` and ``custom-id`` links point to the heading anchor ``#path``
    - Links to image files become inline images captioned with the caption
      of the enclosing block
    - External links become ``[description](type:path)``, or an autolink
      when there is no description
    - Any other link is dropped (see ``unsupported_link_mode``)

    """
    description = "".join(contents)
    options = context.options

    if node.link_type in CROSS_REFERENCE_LINK_TYPES:
        return f"[{description or node.path}](#{node.path})"

    if _is_inline_image(node, context):
        return f"![{_image_caption(node, context)}]({_image_path(node)})"

    if node.link_type in options.external_link_schemes:
        target = f"{node.link_type}:{node.path}"
        if not description:
            return f"<{target}>"
        return f"[{description}]({target})"

    if options.unsupported_link_mode == "text":
        return description
    return _drop(node, context, f"unsupported link type {node.link_type!r}")


def render_footnote_reference(node: FootnoteReference, contents: list[str], context: ExportContext) -> str:
    """Render ``[^label]``, numbering footnotes without a label."""
    return f"[^{context.footnotes.label_for(node)}]"


def render_math_inline(node: MathInline, contents: list[str], context: ExportContext) -> str:
    r"""Wrap inline math in ``{$$}``/``{/$$}``, removing ``\[`` and ``\]``."""
    expression = node.content.replace("\\[", "").replace("\\]", "")
    return f"{LEANPUB_MATH_OPEN}{expression}{LEANPUB_MATH_CLOSE}"


def render_plain_text(node: Text, contents: list[str], context: ExportContext) -> str:
    """Emit text unescaped."""
    return node.content


#: Leanpub rules by node class. Classes not listed use the generic renderer.
LEANPUB_RULES: Mapping[type, Rule] = MappingProxyType(
    {
        CodeBlock: render_code_block,
        LiteralBlock: render_literal_block,
        Heading: render_heading,
        FootnoteDefinition: omit_footnote_definition,
        Table: suppress,
        RawBlock: suppress,
        Link: render_link,
        FootnoteReference: render_footnote_reference,
        MathInline: render_math_inline,
        RawInline: suppress,
        Text: render_plain_text,
    }
)


# ----------------------------------------------------------------------
# Footnote section
# ----------------------------------------------------------------------


def render_footnote_definitions(context: ExportContext) -> str:
    """Render every footnote definition, blank-line separated.

    Parameters
    ----------
    context : ExportContext
        Context of the export

    Returns
    -------
    str
        ``[^marker]: body`` per footnote in numbering order, or an empty
        string when the document defines no footnotes

    """
    definitions = []
    for entry in context.footnotes:
        body = indent_continuation(context.render_nodes(entry.content), 4)
        definitions.append(f"[^{entry.marker}]: {body}")
    return "\n\n".join(definitions)


def append_footnote_section(body: str, context: ExportContext) -> str:
    """Append the footnote definitions after ``body``, if there are any."""
    if not len(context.footnotes):
        return body
    return f"{body}\n\n{render_footnote_definitions(context)}"


class LeanpubRenderer(BaseRenderer):
    """Render AST nodes to Leanpub Markdown.

    Parameters
    ----------
    options : LeanpubRendererOptions or None, default = None
        Leanpub options; the inherited Markdown options configure the
        generic renderer used for node kinds without a rule
    rules : Mapping[type, Rule] or None, default = None
        Rules replacing or extending :data:`LEANPUB_RULES`

    Examples
    --------
        >>> from orgleanpub.ast import Document, Heading, Text
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Intro")], identifier="sec1")
        ... ])
        >>> LeanpubRenderer().render_to_string(doc)
        '{#sec1}\\n# Intro'

    """

    def __init__(
        self,
        options: LeanpubRendererOptions | None = None,
        rules: Optional[Mapping[type, Rule]] = None,
    ):
        """Initialize the Leanpub renderer with options and rules."""
        BaseRenderer._validate_options_type(options, LeanpubRendererOptions, "leanpub")
        options = options or LeanpubRendererOptions()
        super().__init__(options)
        self.options: LeanpubRendererOptions = options
        self.rules: Mapping[type, Rule] = MappingProxyType({**LEANPUB_RULES, **(rules or {})})
        self._generic = MarkdownRenderer(options)

    def rule_for(self, node: Node) -> Rule:
        """Return the rule for ``node``, or the generic renderer's handler."""
        for node_class in type(node).__mro__:
            rule = self.rules.get(node_class)
            if rule is not None:
                return rule
        logger.debug("No Leanpub rule for %s, using generic Markdown", type(node).__name__)
        return self._generic.convert

    def build_context(self, doc: Document) -> ExportContext:
        """Build the read-only context for exporting ``doc``."""
        context: ExportContext

        def transcode(node: Node) -> str:
            return self.transcode(node, context)

        context = ExportContext.build(doc, self.options, transcode=transcode, fallback=self._generic.convert)
        return context

    def transcode(self, node: Node, context: ExportContext) -> str:
        """Render ``node`` and its subtree, children first."""
        contents = [self.transcode(child, context) for child in get_node_children(node)]
        return self.rule_for(node)(node, contents, context)

    def render_to_string(self, doc: Document) -> str:
        """Render a document to Leanpub Markdown.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            The rendered body followed by the footnote definitions

        Raises
        ------
        RenderingError
            If ``fail_on_dropped_content`` is set and content has to be dropped

        """
        context = self.build_context(doc)
        return append_footnote_section(self.transcode(doc, context), context)


__all__ = [
    "LEANPUB_RULES",
    "LeanpubRenderer",
    "append_footnote_section",
    "omit_footnote_definition",
    "render_code_block",
    "render_footnote_definitions",
    "render_footnote_reference",
    "render_heading",
    "render_link",
    "render_literal_block",
    "render_math_inline",
    "render_plain_text",
    "suppress",
]
