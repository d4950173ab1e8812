#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/constants.py
"""Default values and literal types shared by options and renderers."""

from __future__ import annotations

from typing import Literal

# Leanpub output grammar
LEANPUB_FENCE = "~~~~~~~~"
LEANPUB_ASIDE_PREFIX = "A> "
LEANPUB_MATH_OPEN = "{$$}"
LEANPUB_MATH_CLOSE = "{/$$}"
LEANPUB_MARKDOWN_EXTENSION = ".md"

# Link classification
CROSS_REFERENCE_LINK_TYPES = ("id", "custom-id")
DEFAULT_EXTERNAL_LINK_SCHEMES: tuple[str, ...] = ("http", "https", "ftp")
DEFAULT_IMAGE_LINK_TYPES: tuple[str, ...] = ("file", "http", "https")
DEFAULT_IMAGE_EXTENSIONS: tuple[str, ...] = ("jpeg", "jpg", "png", "gif", "svg")

UnsupportedLinkMode = Literal["drop", "text"]
DEFAULT_UNSUPPORTED_LINK_MODE: UnsupportedLinkMode = "drop"

# Generic Markdown converter
EmphasisSymbol = Literal["*", "_"]
CodeFenceChar = Literal["`", "~"]
InlineFormatMode = Literal["html", "markdown", "ignore"]

DEFAULT_ESCAPE_SPECIAL = True
DEFAULT_EMPHASIS_SYMBOL: EmphasisSymbol = "*"
DEFAULT_BULLET_SYMBOLS = "*-+"
DEFAULT_CODE_FENCE_CHAR: CodeFenceChar = "`"
DEFAULT_CODE_FENCE_MIN = 3
DEFAULT_INLINE_FORMAT_MODE: InlineFormatMode = "html"
DEFAULT_COLLAPSE_BLANK_LINES = True
DEFAULT_HEADING_LEVEL_OFFSET = 0

DEFAULT_FAIL_ON_DROPPED_CONTENT = False
