#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Leanpub Markdown rendering."""
# src/orgleanpub/options/leanpub.py

from __future__ import annotations

from dataclasses import dataclass, field

from orgleanpub.constants import (
    DEFAULT_EXTERNAL_LINK_SCHEMES,
    DEFAULT_IMAGE_EXTENSIONS,
    DEFAULT_IMAGE_LINK_TYPES,
    DEFAULT_UNSUPPORTED_LINK_MODE,
    UnsupportedLinkMode,
)
from orgleanpub.options.markdown import MarkdownRendererOptions


@dataclass(frozen=True)
class LeanpubRendererOptions(MarkdownRendererOptions):
    """Options for the Leanpub renderer.

    The inherited Markdown options configure the generic renderer that
    handles every node kind the Leanpub rule table does not override.

    Parameters
    ----------
    image_extensions : tuple of str, default ("jpeg", "jpg", "png", "gif", "svg")
        File extensions (without dot, matched case-insensitively) that make
        a link an inline image.
    image_link_types : tuple of str, default ("file", "http", "https")
        Link types that may be inline images.
    external_link_schemes : tuple of str, default ("http", "https", "ftp")
        Link types rendered as external links.
    unsupported_link_mode : {"drop", "text"}, default "drop"
        What to emit for links of any other type:
        - "drop": Emit nothing, not even the description
        - "text": Emit the rendered description without a link

    """

    image_extensions: tuple[str, ...] = field(
        default=DEFAULT_IMAGE_EXTENSIONS,
        metadata={"help": "File extensions recognized as inline images", "importance": "core"},
    )
    image_link_types: tuple[str, ...] = field(
        default=DEFAULT_IMAGE_LINK_TYPES,
        metadata={"help": "Link types that may be rendered as inline images", "importance": "advanced"},
    )
    external_link_schemes: tuple[str, ...] = field(
        default=DEFAULT_EXTERNAL_LINK_SCHEMES,
        metadata={"help": "Link types rendered as external links", "importance": "advanced"},
    )
    unsupported_link_mode: UnsupportedLinkMode = field(
        default=DEFAULT_UNSUPPORTED_LINK_MODE,
        metadata={
            "help": "How to render links of unsupported types: drop them or keep their description",
            "choices": ["drop", "text"],
            "importance": "core",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()
        if self.unsupported_link_mode not in ("drop", "text"):
            raise ValueError(f"unsupported_link_mode must be 'drop' or 'text', got {self.unsupported_link_mode!r}")
        for extension in self.image_extensions:
            if not extension or extension.startswith("."):
                raise ValueError(f"image_extensions entries must be non-empty and have no leading dot: {extension!r}")
