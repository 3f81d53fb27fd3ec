"""Write characters, lines, strings and numbers to a stream."""

from __future__ import annotations

import io
import operator
from typing import IO, Any, Optional, Union

from minitalk.chars import itoa

CharLike = Union[int, str]


def _write(stream: IO[Any], text: str) -> None:
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(text.encode("utf-8"))
    else:
        stream.write(text)


def putchar_fd(c: CharLike, stream: IO[Any]) -> None:
    """Write one character; an integer is taken as a byte code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
            stream.write(c.encode("utf-8"))
        else:
            stream.write(c)
        return
    code = operator.index(c) & 0xFF
    if isinstance(stream, (io.RawIOBase, io.BufferedIOBase)):
        stream.write(bytes([code]))
    else:
        stream.write(chr(code))


def putstr_fd(s: Optional[str], stream: IO[Any]) -> None:
    """Write ``s``; None writes nothing."""
    if s is None:
        return
    _write(stream, s)


def putendl_fd(s: Optional[str], stream: IO[Any]) -> None:
    """Write ``s`` followed by a newline; None writes nothing."""
    if s is None:
        return
    _write(stream, s)
    putchar_fd("\n", stream)


def putnbr_fd(number: int, stream: IO[Any]) -> None:
    """Write an integer in decimal."""
    _write(stream, itoa(number))