#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/utils/io_utils.py
"""I/O utilities for writing rendered markdown to its destination."""

from __future__ import annotations

import io
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

OutputDestination = Union[str, Path, IO[bytes], IO[str]]


def _is_binary_stream(output: object) -> bool:
    # Concrete types first, then io base classes, then the mode attribute of file objects
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


def write_content(content: str, output: OutputDestination, encoding: str = "utf-8") -> None:
    """Write rendered text to a file path or an open stream.

    Parameters
    ----------
    content : str
        Rendered text
    output : str, Path, IO[bytes] or IO[str]
        File path (overwritten), binary stream (``content`` is encoded) or text stream
    encoding : str, default "utf-8"
        Encoding used for paths and binary streams

    Raises
    ------
    TypeError
        If ``content`` is not text or ``output`` is not a supported destination

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("# Hello", buffer)
        >>> buffer.getvalue()
        b'# Hello'

    """
    if not isinstance(content, str):
        raise TypeError(f"Content must be str, got {type(content).__name__}")

    if isinstance(output, (str, Path)):
        Path(output).write_text(content, encoding=encoding)
        return

    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output).__name__}")

    if _is_binary_stream(output):
        cast(IO[bytes], output).write(content.encode(encoding))
    else:
        cast(IO[str], output).write(content)


__all__ = ["OutputDestination", "write_content"]
