#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/renderers/base.py
"""Base classes for AST renderers.

Every renderer folds the document bottom-up: the fragments of a node's
children are rendered first and passed, together with the node, to the code
that renders the node itself.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import IO, Union

from orgleanpub.ast import Document
from orgleanpub.exceptions import InvalidOptionsError
from orgleanpub.options.base import BaseRendererOptions
from orgleanpub.utils.io_utils import write_text


class BaseRenderer(ABC):
    """Abstract base class for all AST renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render_to_string(self, doc: Document) -> str:
        """Render the AST to a string.

        Parameters
        ----------
        doc : Document
            AST Document node to render

        Returns
        -------
        str
            Rendered document

        """

    def render(self, doc: Document, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Render the AST and write it to ``output``.

        Parameters
        ----------
        doc : Document
            AST Document node to render
        output : str, Path, IO[bytes], or IO[str]
            File path or open stream. Text is written as UTF-8.

        Raises
        ------
        RenderingError
            If rendering fails
        OSError
            If output cannot be written

        """
        self.write_text_output(self.render_to_string(doc), output)

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                renderer_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @staticmethod
    def write_text_output(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
        """Write text output to file or IO stream."""
        write_text(text, output)
