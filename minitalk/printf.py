"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Sequence

_LOWER_HEX = "0123456789abcdef"
_UPPER_HEX = "0123456789ABCDEF"
_UINT_MASK = (1 << 32) - 1
_SIZE_MASK = (1 << 64) - 1


class FormatError(ValueError):
    """Raised for a format string that cannot be rendered."""


def _check_base(base: str) -> None:
    if len(base) < 2:
        raise ValueError("base needs at least two digits")
    for ch in base:
        if ch < " " or ch == "\x7f" or ch in "+-":
            raise ValueError(f"invalid digit in base: {ch!r}")
    if len(set(base)) != len(base):
        raise ValueError("base has repeated digits")


def format_base(number: int, base: str) -> str:
    """Render a non-negative integer using the digits of ``base``."""
    _check_base(base)
    number = operator.index(number)
    if number < 0:
        raise ValueError("number must not be negative")
    radix = len(base)
    digits = []
    while number > 0:
        number, rest = divmod(number, radix)
        digits.append(base[rest])
    return "".join(reversed(digits)) or base[0]


def _to_int32(value: Any) -> int:
    value = operator.index(value) & _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise FormatError("%c expects a single character")
        return value
    return chr(operator.index(value) & 0xFF)


def _render_spec(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX" or not spec:
        raise FormatError(f"unknown conversion specifier: %{spec}")
    try:
        value = next(args)
    except StopIteration:
        raise FormatError(f"missing argument for %{spec}") from None
    if spec == "c":
        return _char(value)
    if spec == "s":
        return "(null)" if value is None else str(value)
    if spec == "p":
        address = 0 if value is None else operator.index(value) & _SIZE_MASK
        return "0x" + format_base(address, _LOWER_HEX)
    if spec in "di":
        return str(_to_int32(value))
    unsigned = operator.index(value) & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    return format_base(unsigned, _UPPER_HEX if spec == "X" else _LOWER_HEX)


def _pieces(fmt: str, args: Sequence[Any]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch == "%":
            yield _render_spec(next(chars, ""), remaining)
        else:
            yield ch


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled in from ``args``."""
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output and return its length.

    Text before a bad conversion is written before the error is raised.
    """
    count = 0
    out = sys.stdout
    for piece in _pieces(fmt, args):
        out.write(piece)
        count += len(piece)
    out.flush()
    return count