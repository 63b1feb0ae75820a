"""Writing characters, strings, numbers and byte dumps to a text stream.

Every function writes to ``file`` when it is given and to the current
standard output otherwise.
"""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.conversion import itoa, itoa_base

_HEX = "0123456789abcdef"


def _stream(file: TextIO | None) -> TextIO:
    return sys.stdout if file is None else file


def put_char(c: str | int, file: TextIO | None = None) -> None:
    """Write one character, given as a string or an integer code."""
    if isinstance(c, int):
        c = chr(c)
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _stream(file).write(c)


def put_str(s: str, file: TextIO | None = None) -> None:
    """Write ``s`` as it is."""
    _stream(file).write(s)


def put_endl(s: str, file: TextIO | None = None) -> None:
    """Write ``s`` followed by a newline."""
    _stream(file).write(s + "\n")


def put_nbr(n: int, file: TextIO | None = None) -> None:
    """Write ``n`` in decimal."""
    _stream(file).write(itoa(n))


def put_nbr_base(n: int, base: str, file: TextIO | None = None) -> None:
    """Write ``n`` with the digits of ``base``; zero is written as ``base[0]``.

    Raises ValueError if ``base`` is not a valid base.
    """
    text = itoa_base(n, base)
    _stream(file).write(base[0] if n == 0 else text)


def put_mem(data: bytes | bytearray | memoryview, file: TextIO | None = None) -> None:
    """Write each byte as two lower-case hex digits, separated by spaces."""
    out = _stream(file)
    out.write(" ".join(_HEX[b >> 4] + _HEX[b & 0xF] for b in bytes(data)))