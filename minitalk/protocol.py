"""Bit-level wire protocol: each byte travels as eight signals, least significant bit first."""

from __future__ import annotations

import signal
from dataclasses import dataclass
from typing import Dict, Iterator, Optional, Tuple, Union

BITS_PER_CHAR = 8

BIT_0_SIGNAL = signal.SIGUSR1
BIT_1_SIGNAL = signal.SIGUSR2
MESSAGE_RECEIVED_SIGNAL = signal.SIGUSR2

_BIT_BY_SIGNAL: Dict[signal.Signals, int] = {BIT_0_SIGNAL: 0, BIT_1_SIGNAL: 1}


def signal_for_bit(bit: int) -> signal.Signals:
    """Return the signal that carries ``bit``."""
    if bit not in (0, 1):
        raise ValueError(f"bit must be 0 or 1, not {bit!r}")
    return BIT_1_SIGNAL if bit else BIT_0_SIGNAL


def bit_for_signal(signum: int) -> int:
    """Return the bit a received signal stands for; anything but the one-signal is 0."""
    try:
        received = signal.Signals(signum)
    except ValueError:
        return 0
    return _BIT_BY_SIGNAL.get(received, 0)


def encode_byte(value: int) -> Tuple[int, ...]:
    """Split a byte into its bits, least significant first."""
    if not 0 <= value <= 0xFF:
        raise ValueError(f"byte value out of range: {value!r}")
    return tuple((value >> shift) & 1 for shift in range(BITS_PER_CHAR))


def encode_message(data: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of a message followed by the terminating zero byte.

    The message ends at its first zero byte, as a C string would.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    body = bytes(data).split(b"\0", 1)[0]
    for byte in body:
        yield from encode_byte(byte)
    yield from encode_byte(0)


@dataclass
class CharDecoder:
    """Collect incoming bits into bytes."""

    value: int = 0
    bit_index: int = 0

    def feed(self, bit: int) -> Optional[int]:
        """Add one bit; return the finished byte once eight bits have arrived."""
        self.value |= (bit & 1) << self.bit_index
        self.bit_index += 1
        if self.bit_index < BITS_PER_CHAR:
            return None
        finished = self.value
        self.value = 0
        self.bit_index = 0
        return finished