#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/renderers/markdown.py
"""Generic Markdown rendering from AST.

This module provides the MarkdownRenderer class which converts AST nodes to
plain Markdown text. It renders every node kind and serves as the default
handler of the Leanpub renderer for the kinds the Leanpub rule table does
not override.

Every ``visit_*`` method has the rule signature
``(node, rendered_children, context) -> str``, so the renderer can be
plugged in as a fallback rule through :meth:`MarkdownRenderer.convert`.

"""

from __future__ import annotations

import logging
import re

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
)
from orgleanpub.ast.visitors import NodeVisitor
from orgleanpub.context import ExportContext
from orgleanpub.options.markdown import MarkdownRendererOptions
from orgleanpub.renderers.base import BaseRenderer
from orgleanpub.utils.text import ensure_trailing_newline, indent_continuation, prefix_lines

logger = logging.getLogger(__name__)

# Raw content in these formats is already valid Markdown output
_PASSTHROUGH_FORMATS = ("html", "markdown", "md")

_ALIGNMENT_MARKERS = {
    "left": ":---",
    "center": ":---:",
    "right": "---:",
    None: "---",
}


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render AST nodes to Markdown text.

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options

    Examples
    --------
    Basic usage:

        >>> from orgleanpub.ast import Document, Heading, Text
        >>> from orgleanpub.renderers.markdown import MarkdownRenderer
        >>> doc = Document(children=[
        ...     Heading(level=1, content=[Text(content="Title")])
        ... ])
        >>> MarkdownRenderer().render_to_string(doc)
        '# Title'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None):
        """Initialize the Markdown renderer with options."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options

    def render_to_string(self, doc: Document) -> str:
        """Render a document AST to a Markdown string.

        Parameters
        ----------
        doc : Document
            The document node to render

        Returns
        -------
        str
            Markdown text

        """
        context = self._build_context(doc)
        return self._cleanup_output(self._fold(doc, context))

    def _build_context(self, doc: Document) -> ExportContext:
        context: ExportContext

        def transcode(node: Node) -> str:
            return self._fold(node, context)

        context = ExportContext.build(doc, self.options, transcode=transcode, fallback=self.convert)
        return context

    def convert(self, node: Node, contents: list[str], context: ExportContext) -> str:
        """Render one node from its already rendered children.

        This is the rule-shaped entry point other renderers delegate to.

        Parameters
        ----------
        node : Node
            Node to render
        contents : list of str
            Rendered fragments of the node's children
        context : ExportContext
            Export context of the calling renderer

        Returns
        -------
        str
            Markdown fragment

        """
        return node.accept(self, contents, context)

    def _fold(self, node: Node, context: ExportContext) -> str:
        contents = [self._fold(child, context) for child in get_node_children(node)]
        return self.convert(node, contents, context)

    def _cleanup_output(self, text: str) -> str:
        """Normalize line endings, optionally collapse blank lines, strip the end."""
        text = text.replace("\r\n", "\n").replace("\r", "\n")
        if self.options.collapse_blank_lines:
            text = re.sub(r"\n{3,}", "\n\n", text)
        return text.rstrip()

    def _escape_markdown(self, text: str) -> str:
        """Escape special Markdown characters with context awareness.

        - Backslash, backticks, asterisks, braces and brackets are always escaped
        - ``#`` is escaped only at the start of the text
        - ``_`` is escaped only at word boundaries (``snake_case`` stays as is)

        """
        if not self.options.escape_special:
            return text

        always_escape = r"\`*{}[]"

        escaped_chars = []
        for i, char in enumerate(text):
            if char in always_escape:
                escaped_chars.append("\\" + char)
            elif char == "#" and i == 0:
                escaped_chars.append("\\#")
            elif char == "_":
                prev_alnum = i > 0 and text[i - 1].isalnum()
                next_alnum = i < len(text) - 1 and text[i + 1].isalnum()
                escaped_chars.append(char if prev_alnum and next_alnum else "\\_")
            else:
                escaped_chars.append(char)

        return "".join(escaped_chars)

    def _fence_for(self, content: str) -> str:
        """Return a code fence longer than any fence-character run in ``content``."""
        fence_char = self.options.code_fence_char
        longest_run = max((len(run) for run in re.findall(re.escape(fence_char) + "+", content)), default=0)
        return fence_char * max(self.options.code_fence_min, longest_run + 1)

    def _fenced(self, content: str, info: str) -> str:
        fence = self._fence_for(content)
        return f"{fence}{info}\n{ensure_trailing_newline(content)}{fence}"

    def _inline_format(self, mode: str, contents: list[str], html_tag: str, markdown_marker: str) -> str:
        text = "".join(contents)
        if mode == "ignore":
            return text
        if mode == "markdown":
            return f"{markdown_marker}{text}{markdown_marker}"
        return f"<{html_tag}>{text}</{html_tag}>"

    @staticmethod
    def _join_blocks(contents: list[str]) -> str:
        return "\n\n".join(fragment for fragment in contents if fragment)

    # ------------------------------------------------------------------
    # Block nodes
    # ------------------------------------------------------------------

    def visit_document(self, node: Document, contents: list[str], context: ExportContext) -> str:
        """Join top-level blocks with blank lines, skipping empty ones."""
        return self._join_blocks(contents)

    def visit_heading(self, node: Heading, contents: list[str], context: ExportContext) -> str:
        """Render an ATX heading, applying ``heading_level_offset``."""
        level = max(1, min(6, node.level + self.options.heading_level_offset))
        return f"{'#' * level} {''.join(contents)}"

    def visit_paragraph(self, node: Paragraph, contents: list[str], context: ExportContext) -> str:
        """Render a Paragraph node."""
        return "".join(contents)

    def visit_code_block(self, node: CodeBlock, contents: list[str], context: ExportContext) -> str:
        """Render a fenced code block with its language as info string."""
        return self._fenced(node.content, node.language or "")

    def visit_literal_block(self, node: LiteralBlock, contents: list[str], context: ExportContext) -> str:
        """Render a literal block as a fenced block without info string."""
        return self._fenced(node.content, "")

    def visit_block_quote(self, node: BlockQuote, contents: list[str], context: ExportContext) -> str:
        """Render a BlockQuote node."""
        return prefix_lines(self._join_blocks(contents), "> ")

    def visit_list(self, node: List, contents: list[str], context: ExportContext) -> str:
        """Render a List node.

        Item fragments arrive without markers; the marker is added here and
        continuation lines are indented to the marker width.
        """
        bullets = self.options.bullet_symbols
        bullet = bullets[context.list_depth(node) % len(bullets)]

        items = []
        for i, item in enumerate(contents):
            marker = f"{node.start + i}. " if node.ordered else f"{bullet} "
            items.append(marker + indent_continuation(item, len(marker)))

        separator = "\n" if node.tight else "\n\n"
        return separator.join(items)

    def visit_list_item(self, node: ListItem, contents: list[str], context: ExportContext) -> str:
        """Render a ListItem's content; the enclosing list adds the marker."""
        body = "\n".join(fragment for fragment in contents if fragment)
        if node.task_status is not None:
            checkbox = "[x]" if node.task_status == "checked" else "[ ]"
            body = f"{checkbox} {body}"
        return body

    def visit_table(self, node: Table, contents: list[str], context: ExportContext) -> str:
        """Render a pipe table; without a header row the first row is used."""
        if not contents:
            return ""
        header_row = node.header if node.header is not None else node.rows[0]
        num_cols = max(len(header_row.cells), 1)

        alignments = list(node.alignments) + [None] * (num_cols - len(node.alignments))
        separator = "| " + " | ".join(_ALIGNMENT_MARKERS[alignment] for alignment in alignments[:num_cols]) + " |"

        return "\n".join([contents[0], separator, *contents[1:]])

    def visit_table_row(self, node: TableRow, contents: list[str], context: ExportContext) -> str:
        """Render a TableRow node."""
        return "| " + " | ".join(contents) + " |"

    def visit_table_cell(self, node: TableCell, contents: list[str], context: ExportContext) -> str:
        """Render a TableCell node, escaping pipes."""
        return "".join(contents).replace("|", "\\|")

    def visit_thematic_break(self, node: ThematicBreak, contents: list[str], context: ExportContext) -> str:
        """Render a ThematicBreak node."""
        return "---"

    def visit_raw_block(self, node: RawBlock, contents: list[str], context: ExportContext) -> str:
        """Pass HTML/Markdown raw blocks through, drop other formats."""
        if node.format.lower() in _PASSTHROUGH_FORMATS:
            return node.content
        logger.debug("Dropping raw %s block", node.format)
        return ""

    def visit_footnote_definition(self, node: FootnoteDefinition, contents: list[str], context: ExportContext) -> str:
        """Render a footnote definition in place, indenting continuation lines."""
        return f"[^{node.identifier}]: " + indent_continuation(self._join_blocks(contents), 4)

    def visit_math_block(self, node: MathBlock, contents: list[str], context: ExportContext) -> str:
        """Render a MathBlock node between ``$$`` lines."""
        return f"$$\n{ensure_trailing_newline(node.content)}$$"

    # ------------------------------------------------------------------
    # Inline nodes
    # ------------------------------------------------------------------

    def visit_text(self, node: Text, contents: list[str], context: ExportContext) -> str:
        """Render a Text node with Markdown escaping."""
        return self._escape_markdown(node.content)

    def visit_emphasis(self, node: Emphasis, contents: list[str], context: ExportContext) -> str:
        """Render an Emphasis node."""
        symbol = self.options.emphasis_symbol
        return f"{symbol}{''.join(contents)}{symbol}"

    def visit_strong(self, node: Strong, contents: list[str], context: ExportContext) -> str:
        """Render a Strong node."""
        return f"**{''.join(contents)}**"

    def visit_code(self, node: Code, contents: list[str], context: ExportContext) -> str:
        """Render a Code node."""
        backticks = "``" if "`" in node.content else "`"
        return f"{backticks}{node.content}{backticks}"

    def visit_link(self, node: Link, contents: list[str], context: ExportContext) -> str:
        """Render a link inline, or as an autolink when it has no description."""
        text = "".join(contents)
        if not text:
            return f"<{node.url}>"
        if node.title:
            return f'[{text}]({node.url} "{node.title}")'
        return f"[{text}]({node.url})"

    def visit_image(self, node: Image, contents: list[str], context: ExportContext) -> str:
        """Render an Image node."""
        alt = node.alt_text.replace("[", "\\[").replace("]", "\\]")
        if node.title:
            return f'![{alt}]({node.url} "{node.title}")'
        return f"![{alt}]({node.url})"

    def visit_line_break(self, node: LineBreak, contents: list[str], context: ExportContext) -> str:
        """Render a LineBreak node."""
        return "\n" if node.soft else "  \n"

    def visit_strikethrough(self, node: Strikethrough, contents: list[str], context: ExportContext) -> str:
        """Render a Strikethrough node."""
        return f"~~{''.join(contents)}~~"

    def visit_underline(self, node: Underline, contents: list[str], context: ExportContext) -> str:
        """Render an Underline node according to ``underline_mode``."""
        return self._inline_format(self.options.underline_mode, contents, "u", "__")

    def visit_superscript(self, node: Superscript, contents: list[str], context: ExportContext) -> str:
        """Render a Superscript node according to ``superscript_mode``."""
        return self._inline_format(self.options.superscript_mode, contents, "sup", "^")

    def visit_subscript(self, node: Subscript, contents: list[str], context: ExportContext) -> str:
        """Render a Subscript node according to ``subscript_mode``."""
        return self._inline_format(self.options.subscript_mode, contents, "sub", "~")

    def visit_raw_inline(self, node: RawInline, contents: list[str], context: ExportContext) -> str:
        """Pass HTML/Markdown raw snippets through, drop other formats."""
        if node.format.lower() in _PASSTHROUGH_FORMATS:
            return node.content
        return ""

    def visit_footnote_reference(self, node: FootnoteReference, contents: list[str], context: ExportContext) -> str:
        """Render a FootnoteReference node."""
        return f"[^{context.footnotes.label_for(node)}]"

    def visit_math_inline(self, node: MathInline, contents: list[str], context: ExportContext) -> str:
        """Render a MathInline node between ``$`` delimiters."""
        return f"${node.content}$"
