#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the generic Markdown renderer."""
# src/orgleanpub/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from orgleanpub.constants import (
    DEFAULT_BULLET_SYMBOLS,
    DEFAULT_CODE_FENCE_CHAR,
    DEFAULT_CODE_FENCE_MIN,
    DEFAULT_COLLAPSE_BLANK_LINES,
    DEFAULT_EMPHASIS_SYMBOL,
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_HEADING_LEVEL_OFFSET,
    DEFAULT_INLINE_FORMAT_MODE,
    CodeFenceChar,
    EmphasisSymbol,
    InlineFormatMode,
)
from orgleanpub.options.base import BaseRendererOptions

_INLINE_FORMAT_MODES = ("html", "markdown", "ignore")


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Options for the generic AST-to-Markdown renderer.

    Parameters
    ----------
    escape_special : bool, default True
        Whether to escape special Markdown characters in text content.
    emphasis_symbol : {"\*", "\_"}, default "\*"
        Symbol to use for emphasis/italic formatting.
    bullet_symbols : str, default "\*-+"
        Characters to cycle through for nested bullet lists.
    code_fence_char : {"`", "~"}, default "`"
        Character used for fenced code blocks.
    code_fence_min : int, default 3
        Minimum fence length; longer fences are used when the code contains
        runs of the fence character.
    underline_mode, superscript_mode, subscript_mode : {"html", "markdown", "ignore"}, default "html"
        How to render formatting plain Markdown has no syntax for:
        - "html": Use <u>, <sup> or <sub> tags
        - "markdown": Use __text__, ^text^ or ~text~ (non-standard)
        - "ignore": Strip the formatting
    collapse_blank_lines : bool, default True
        Collapse runs of three or more newlines in the final output.
    heading_level_offset : int, default 0
        Shift every heading level by this amount (clamped to 1-6).

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "cli_name": "no-escape-special",
            "importance": "core",
        },
    )
    emphasis_symbol: EmphasisSymbol = field(
        default=DEFAULT_EMPHASIS_SYMBOL,
        metadata={"help": "Symbol to use for emphasis/italic formatting", "choices": ["*", "_"]},
    )
    bullet_symbols: str = field(
        default=DEFAULT_BULLET_SYMBOLS,
        metadata={"help": "Characters to cycle through for nested bullet lists"},
    )
    code_fence_char: CodeFenceChar = field(
        default=DEFAULT_CODE_FENCE_CHAR,
        metadata={"help": "Character used for code fences", "choices": ["`", "~"]},
    )
    code_fence_min: int = field(
        default=DEFAULT_CODE_FENCE_MIN,
        metadata={"help": "Minimum code fence length", "type": int},
    )
    underline_mode: InlineFormatMode = field(
        default=DEFAULT_INLINE_FORMAT_MODE,
        metadata={"help": "How to render underlined text", "choices": list(_INLINE_FORMAT_MODES)},
    )
    superscript_mode: InlineFormatMode = field(
        default=DEFAULT_INLINE_FORMAT_MODE,
        metadata={"help": "How to render superscript text", "choices": list(_INLINE_FORMAT_MODES)},
    )
    subscript_mode: InlineFormatMode = field(
        default=DEFAULT_INLINE_FORMAT_MODE,
        metadata={"help": "How to render subscript text", "choices": list(_INLINE_FORMAT_MODES)},
    )
    collapse_blank_lines: bool = field(
        default=DEFAULT_COLLAPSE_BLANK_LINES,
        metadata={
            "help": "Collapse three or more consecutive newlines into a single blank line",
            "cli_name": "no-collapse-blank-lines",
        },
    )
    heading_level_offset: int = field(
        default=DEFAULT_HEADING_LEVEL_OFFSET,
        metadata={"help": "Shift all heading levels by this amount", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        if self.emphasis_symbol not in ("*", "_"):
            raise ValueError(f"emphasis_symbol must be '*' or '_', got {self.emphasis_symbol!r}")
        if not self.bullet_symbols:
            raise ValueError("bullet_symbols must contain at least one character")
        if self.code_fence_char not in ("`", "~"):
            raise ValueError(f"code_fence_char must be '`' or '~', got {self.code_fence_char!r}")
        if self.code_fence_min < 3:
            raise ValueError(f"code_fence_min must be at least 3, got {self.code_fence_min}")
        for name in ("underline_mode", "superscript_mode", "subscript_mode"):
            value = getattr(self, name)
            if value not in _INLINE_FORMAT_MODES:
                raise ValueError(f"{name} must be one of {_INLINE_FORMAT_MODES}, got {value!r}")
