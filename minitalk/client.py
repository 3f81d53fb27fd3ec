"""Send a message to a server one bit per signal."""

from __future__ import annotations

import os
import signal
import sys
import time
from typing import List, Optional, Union

from minitalk.chars import atoi
from minitalk.printf import printf
from minitalk.protocol import MESSAGE_RECEIVED_SIGNAL, encode_byte, signal_for_bit

DEFAULT_DELAY = 0.0003
MAX_PID = 99999


def parse_pid(text: str) -> int:
    """Read a server process id; raise ValueError when it is out of range."""
    pid = atoi(text)
    if pid <= 0 or pid > MAX_PID:
        raise ValueError("PID is out of valid range.")
    return pid


def _byte_value(value: Union[int, str, bytes]) -> int:
    if isinstance(value, (str, bytes)):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return ord(value)
    return value


def send_char(pid: int, value: Union[int, str, bytes], delay: float = DEFAULT_DELAY) -> None:
    """Send one byte as eight signals, least significant bit first."""
    for bit in encode_byte(_byte_value(value)):
        os.kill(pid, signal_for_bit(bit))
        time.sleep(delay)


def _on_acknowledge(signum: int, frame: object) -> None:
    if signum == MESSAGE_RECEIVED_SIGNAL:
        printf("Server has received the message successfully.\n")


def send_message(pid: int, data: Union[str, bytes], delay: float = DEFAULT_DELAY) -> None:
    """Send a message and its terminating zero byte.

    The acknowledgement handler is installed just before the terminator is sent.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    body = bytes(data).split(b"\0", 1)[0]
    for byte in body:
        send_char(pid, byte, delay)
    signal.signal(MESSAGE_RECEIVED_SIGNAL, _on_acknowledge)
    send_char(pid, 0, delay)


def main(argv: Optional[List[str]] = None) -> int:
    """Send the message given on the command line to the given server."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 2:
        printf("Error! Usage: <program name> <PID> <message>\n")
        return 1
    try:
        pid = parse_pid(args[0])
    except ValueError:
        printf("Error! PID is out of valid range.\n")
        return 2
    send_message(pid, args[1])
    return 0


if __name__ == "__main__":
    sys.exit(main())