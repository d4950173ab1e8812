#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/api.py
"""Export entry points.

A host that has parsed an Org document into an :class:`~orgleanpub.ast.Document`
exports it to a string, to a ``.md`` file next to the source, or in the
background.

"""

from __future__ import annotations

import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from functools import partial
from pathlib import Path
from typing import Optional, Union

from orgleanpub.ast import Document
from orgleanpub.constants import LEANPUB_MARKDOWN_EXTENSION
from orgleanpub.exceptions import OutputWriteError
from orgleanpub.options.leanpub import LeanpubRendererOptions
from orgleanpub.renderers.leanpub import LeanpubRenderer
from orgleanpub.utils.io_utils import write_text

logger = logging.getLogger(__name__)


def to_leanpub(document: Document, options: Optional[LeanpubRendererOptions] = None) -> str:
    """Export a document tree to a Leanpub Markdown string.

    Parameters
    ----------
    document : Document
        Parsed document tree
    options : LeanpubRendererOptions or None, default = None
        Rendering options

    Returns
    -------
    str
        Leanpub Markdown

    """
    return LeanpubRenderer(options).render_to_string(document)


def output_path_for(source: Union[str, Path], extension: str = LEANPUB_MARKDOWN_EXTENSION) -> Path:
    """Derive the output file path by swapping the extension of ``source``.

        >>> output_path_for("book.org")
        PosixPath('book.md')

    """
    return Path(source).with_suffix(extension)


def export_to_file(
    document: Document,
    source: Union[str, Path],
    options: Optional[LeanpubRendererOptions] = None,
    output: Optional[Union[str, Path]] = None,
) -> Path:
    """Export a document tree to a UTF-8 Markdown file.

    Parameters
    ----------
    document : Document
        Parsed document tree
    source : str or Path
        Path of the source document; the output path is derived from it
    options : LeanpubRendererOptions or None, default = None
        Rendering options
    output : str, Path, or None, default = None
        Explicit output path, overriding the derived one

    Returns
    -------
    Path
        The written file

    Raises
    ------
    OutputWriteError
        If the file cannot be written

    """
    target = Path(output) if output is not None else output_path_for(source)
    text = to_leanpub(document, options)
    try:
        write_text(text, target)
    except OSError as e:
        raise OutputWriteError(
            f"Failed to write Leanpub output to {target}: {e}", output_path=str(target), original_error=e
        ) from e
    logger.debug("Wrote %d characters of Leanpub Markdown to %s", len(text), target)
    return target


def export_async(
    document: Document,
    options: Optional[LeanpubRendererOptions] = None,
    source: Optional[Union[str, Path]] = None,
    executor: Optional[Executor] = None,
) -> Future:
    """Run one whole-document export in the background.

    The export is all or nothing: cancelling the returned future before it
    starts skips it, and a failed export leaves no partial result.

    Parameters
    ----------
    document : Document
        Parsed document tree
    options : LeanpubRendererOptions or None, default = None
        Rendering options
    source : str, Path, or None, default = None
        When given, the result is written next to it (see :func:`export_to_file`)
    executor : Executor or None, default = None
        Executor to submit to. A private single-thread executor is used
        when omitted.

    Returns
    -------
    Future
        Resolves to the Markdown string, or to the written path when
        ``source`` is given

    """
    if source is None:
        task = partial(to_leanpub, document, options)
    else:
        task = partial(export_to_file, document, source, options)

    if executor is not None:
        return executor.submit(task)

    own_executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="orgleanpub-export")
    try:
        return own_executor.submit(task)
    finally:
        own_executor.shutdown(wait=False)


__all__ = [
    "export_async",
    "export_to_file",
    "output_path_for",
    "to_leanpub",
]
