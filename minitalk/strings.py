"""Text helpers with C-string conventions: length, search, copy, compare, trim."""

from __future__ import annotations

import operator
from collections.abc import MutableSequence
from itertools import islice, zip_longest
from typing import Callable, Optional, Tuple, Union

CharLike = Union[int, str]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _non_negative(value: int, name: str) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative: {value}")
    return value


def strlen(s: str) -> int:
    """Return the length of ``s`` up to its first NUL character."""
    index = s.find("\0")
    return len(s) if index < 0 else index


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the first ``c`` in ``s``; a NUL matches the end."""
    index = (s + "\0").find(_char(c))
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Return the index of the last ``c`` in ``s``; a NUL matches the end."""
    index = (s + "\0").rfind(_char(c))
    return None if index < 0 else index


def strdup(s: str) -> str:
    """Return a copy of ``s`` up to its first NUL character."""
    return s[:strlen(s)]


def striteri(s: MutableSequence, func: Callable[[int, str], Optional[str]]) -> None:
    """Call ``func(index, char)`` on each item of ``s`` in place.

    A value other than None returned by ``func`` replaces the item.
    """
    if not isinstance(s, MutableSequence):
        raise TypeError("striteri needs a mutable sequence of characters")
    for index, ch in enumerate(list(s)):
        replacement = func(index, ch)
        if replacement is not None:
            s[index] = replacement


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Return a new string built from ``func(index, char)`` for each character."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length that was attempted.
    """
    size = _non_negative(size, "size")
    dest_len = len(dest)
    src_len = len(src)
    if size == 0 or size <= dest_len:
        return dest, size + src_len
    return dest + src[:size - dest_len - 1], dest_len + src_len


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters.

    Returns the copied text and the full length of ``src``.
    """
    size = _non_negative(size, "size")
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strncmp(first: str, second: str, limit: int) -> int:
    """Compare at most ``limit`` characters; stop at a NUL.

    Returns the difference of the first mismatching character codes, or 0.
    """
    limit = _non_negative(limit, "limit")
    pairs = zip_longest(first, second, fillvalue="\0")
    for a, b in islice(pairs, limit):
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            break
    return 0


def strnstr(haystack: str, needle: str, limit: int) -> Optional[int]:
    """Return where ``needle`` first lies wholly within ``haystack[:limit]``, or None.

    An empty needle is found at index 0.
    """
    limit = _non_negative(limit, "limit")
    if not needle:
        return 0
    if len(needle) > len(haystack):
        return None
    index = haystack[:limit].find(needle)
    return None if index < 0 else index


def strtrim(s: str, chars: str) -> str:
    """Remove characters found in ``chars`` from both ends of ``s``."""
    if not chars:
        return s
    return s.strip(chars)


def substr(s: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``s`` from ``start``.

    A start at or past the end gives an empty string.
    """
    start = _non_negative(start, "start")
    length = _non_negative(length, "length")
    if start >= len(s) or length == 0:
        return ""
    return s[start:start + length]