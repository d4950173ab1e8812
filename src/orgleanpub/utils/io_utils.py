#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/utils/io_utils.py
"""I/O utilities for writing rendered text to its destination."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast


def _is_binary_stream(output: object) -> bool:
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def write_text(text: str, output: Union[str, Path, IO[bytes], IO[str]]) -> None:
    """Write text to a file path or an open stream as UTF-8.

    Parameters
    ----------
    text : str
        Text to write
    output : str, Path, IO[bytes], or IO[str]
        Output destination. Paths are written (and truncated) with UTF-8
        encoding; binary streams receive UTF-8 bytes; text streams receive
        the string unchanged.

    Raises
    ------
    OSError
        If the file cannot be written
    TypeError
        If output type is not supported

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_text("# Hello", buffer)
        >>> buffer.getvalue()
        b'# Hello'

    """
    if isinstance(output, (str, Path)):
        Path(output).write_text(text, encoding="utf-8")
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(text.encode("utf-8"))
    else:
        cast(IO[str], output).write(text)


__all__ = ["write_text"]
