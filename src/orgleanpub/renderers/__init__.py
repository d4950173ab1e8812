#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/orgleanpub/renderers/__init__.py
"""AST renderers for Markdown output.

- MarkdownRenderer: Render to generic Markdown
- LeanpubRenderer: Render to Leanpub Markdown through a rule table, using
  MarkdownRenderer for node kinds without a Leanpub rule

Examples
--------
    >>> from orgleanpub.ast import CodeBlock, Document
    >>> from orgleanpub.renderers import LeanpubRenderer
    >>> doc = Document(children=[CodeBlock(content="print(1)\\n", language="python")])
    >>> print(LeanpubRenderer().render_to_string(doc))
    {lang="python"}
    ~~~~~~~~
    print(1)
    ~~~~~~~~

"""

from orgleanpub.renderers.base import BaseRenderer
from orgleanpub.renderers.leanpub import LEANPUB_RULES, LeanpubRenderer
from orgleanpub.renderers.markdown import MarkdownRenderer

__all__ = [
    "BaseRenderer",
    "LEANPUB_RULES",
    "LeanpubRenderer",
    "MarkdownRenderer",
]
