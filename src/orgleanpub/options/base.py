"""Base classes for renderer options.

This module defines the foundation shared by the generic Markdown options and
the Leanpub options.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from orgleanpub.constants import DEFAULT_FAIL_ON_DROPPED_CONTENT


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    fail_on_dropped_content : bool, default=False
        Whether to raise RenderingError when content is dropped because the
        target format cannot express it (tables, raw blocks, unsupported
        links). If False (default), the content renders as an empty string
        and a debug record is logged.

    """

    fail_on_dropped_content: bool = field(
        default=DEFAULT_FAIL_ON_DROPPED_CONTENT,
        metadata={
            "help": "Raise RenderingError when content is dropped instead of rendering it as empty output",
            "importance": "advanced",
        },
    )
