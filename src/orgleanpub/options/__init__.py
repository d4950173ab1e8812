#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderer configuration options.

All options classes are frozen dataclasses. Use ``create_updated`` to derive
a modified copy:

    >>> from orgleanpub.options import LeanpubRendererOptions
    >>> options = LeanpubRendererOptions().create_updated(unsupported_link_mode="text")

"""

from orgleanpub.options.base import BaseRendererOptions, CloneFrozenMixin
from orgleanpub.options.leanpub import LeanpubRendererOptions
from orgleanpub.options.markdown import MarkdownRendererOptions

__all__ = [
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "LeanpubRendererOptions",
    "MarkdownRendererOptions",
]
