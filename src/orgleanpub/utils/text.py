#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgleanpub/utils/text.py
"""Line-oriented text helpers used by block renderers."""

from __future__ import annotations

import textwrap


def _expand_leading_tabs(line: str) -> str:
    body = line.lstrip(" \t")
    return line[: len(line) - len(body)].expandtabs() + body


def remove_indentation(text: str) -> str:
    """Remove the indentation common to every non-blank line of ``text``.

    Tabs in the leading whitespace are expanded to 8-column stops first, so
    a tab and eight spaces count as the same indentation. Tabs after the
    first non-blank character are kept. Whitespace-only lines are ignored
    when computing the common indentation and come out empty.

    Parameters
    ----------
    text : str
        Possibly indented text

    Returns
    -------
    str
        Text aligned at column zero

    Examples
    --------
        >>> remove_indentation("    a\\n      b\\n")
        'a\\n  b\\n'
        >>> remove_indentation("\\tfoo\\n        bar\\n")
        'foo\\nbar\\n'

    """
    return textwrap.dedent("\n".join(_expand_leading_tabs(line) for line in text.split("\n")))


def ensure_trailing_newline(text: str) -> str:
    """Return ``text`` ending with a newline, leaving empty text empty."""
    if text and not text.endswith("\n"):
        return text + "\n"
    return text


def prefix_lines(text: str, prefix: str) -> str:
    """Prefix every line of ``text``, blank lines included.

    Parameters
    ----------
    text : str
        Text to prefix
    prefix : str
        String placed at the start of each line

    Returns
    -------
    str
        Prefixed text; the number of lines is unchanged

    Examples
    --------
        >>> prefix_lines("a\\n\\nb", "> ")
        '> a\\n> \\n> b'

    """
    return "\n".join(prefix + line for line in text.split("\n"))


def indent_continuation(text: str, width: int) -> str:
    """Indent every line of ``text`` except the first by ``width`` spaces.

    Blank lines stay empty.
    """
    lines = text.split("\n")
    padding = " " * width
    return "\n".join([lines[0]] + [padding + line if line else line for line in lines[1:]])


__all__ = [
    "ensure_trailing_newline",
    "indent_continuation",
    "prefix_lines",
    "remove_indentation",
]
