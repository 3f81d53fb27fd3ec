"""Split text into the words found between separator characters."""

from __future__ import annotations

from typing import List


def split(text: str, separator: str) -> List[str]:
    """Return the non-empty pieces of ``text`` between ``separator`` characters.

    The text ends at its first NUL character, as a C string would.
    """
    if not isinstance(separator, str) or len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    body = text.split("\0", 1)[0]
    return [word for word in body.split(separator) if word]