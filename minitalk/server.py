"""Receive messages sent one bit per signal and print them."""

from __future__ import annotations

import os
import signal
import sys
from typing import IO, Any, Callable, List, Optional

from minitalk.fdio import putchar_fd
from minitalk.printf import printf
from minitalk.protocol import (
    BIT_0_SIGNAL,
    BIT_1_SIGNAL,
    MESSAGE_RECEIVED_SIGNAL,
    CharDecoder,
    bit_for_signal,
)


def _acknowledge(pid: int) -> None:
    os.kill(pid, MESSAGE_RECEIVED_SIGNAL)


class Server:
    """Decode incoming bit signals into characters written to ``output``.

    When a terminating zero byte arrives, a newline is written and
    ``notify`` is called with the sender's process id.
    """

    def __init__(
        self,
        output: Optional[IO[Any]] = None,
        notify: Optional[Callable[[int], Any]] = None,
    ) -> None:
        self.output = output if output is not None else sys.stdout.buffer
        self.notify = notify if notify is not None else _acknowledge
        self.decoder = CharDecoder()

    def receive_signal(self, signum: int, sender_pid: int) -> Optional[int]:
        """Take one signal; return the byte it completed, if any."""
        byte = self.decoder.feed(bit_for_signal(signum))
        if byte is None:
            return None
        if byte == 0:
            putchar_fd("\n", self.output)
            self._flush()
            self.notify(sender_pid)
        else:
            putchar_fd(byte, self.output)
            self._flush()
        return byte

    def _flush(self) -> None:
        flush = getattr(self.output, "flush", None)
        if flush is not None:
            flush()

    def run(self) -> None:
        """Wait for bit signals forever, handling each as it arrives."""
        signals = {BIT_0_SIGNAL, BIT_1_SIGNAL}
        signal.pthread_sigmask(signal.SIG_BLOCK, signals)
        try:
            while True:
                info = signal.sigwaitinfo(signals)
                self.receive_signal(info.si_signo, info.si_pid)
        finally:
            signal.pthread_sigmask(signal.SIG_UNBLOCK, signals)


def main(argv: Optional[List[str]] = None) -> int:
    """Print this process id and serve messages until interrupted."""
    args = sys.argv[1:] if argv is None else list(argv)
    if args:
        printf("Error! Program received arguments.\n")
        return 1
    printf("Server PID: %d\n", os.getpid())
    try:
        Server().run()
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    sys.exit(main())