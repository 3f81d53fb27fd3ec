# minitalk

A small client and server that pass a text message from one process to
another using only two signals. Each byte goes out as eight signals, least
significant bit first: `SIGUSR1` carries a 0 bit and `SIGUSR2` a 1 bit. The
message ends with a zero byte. When the server reads that byte it writes a
newline and sends `SIGUSR2` back to the sender.

## Requirements

Python 3.10 or later on a POSIX system. The server waits for signals with
`signal.sigwaitinfo`, which Python does not offer on every platform (macOS,
for one, lacks it), so the server runs on Linux and similar systems.

## Installation

```
pip install .
```

## Usage

Start the server. It takes no arguments and prints its process id:

```
$ minitalk-server
Server PID: 4242
```

Given any arguments, it prints `Error! Program received arguments.` and exits
with status 1. It runs until interrupted with Ctrl-C.

From another terminal, send a message to that process id:

```
$ minitalk-client 4242 "hello there"
```

The server writes `hello there` followed by a newline. The client sends a
signal every 0.3 ms. Just before sending the terminating zero byte it installs
a handler for the server's `SIGUSR2`. If that signal arrives before the client
exits, the client prints `Server has received the message successfully.`

The client takes exactly two arguments, the process id and the message. With
any other number it prints a usage line and exits with status 1. If the
process id does not read as a number from 1 to 99999, it prints
`Error! PID is out of valid range.` and exits with status 2. A message ends at
its first zero byte and is sent as UTF-8.

The same commands are available as `python -m minitalk.server` and
`python -m minitalk.client`.

## Library

- `minitalk.protocol`: `signal_for_bit`, `bit_for_signal`, `encode_byte`,
  `encode_message` (the bits of a message and its terminating zero byte) and
  `CharDecoder`, whose `feed` method takes bits and returns each completed byte.
- `minitalk.server`: `Server(output=None, notify=None)`. Its `receive_signal`
  method decodes one signal. When a zero byte completes, it writes a newline
  and calls `notify` with the sender's process id. By default it writes to
  standard output and signals the sender back. `run` waits for signals
  forever.
- `minitalk.client`: `parse_pid`, `send_char` and `send_message`, each
  sender taking an optional `delay` in seconds between signals.
- `minitalk.printf`: `format_string` and `printf`, a small printf with the
  `%c %s %p %d %i %u %x %X %%` conversions, and `format_base` to render a
  number in any digit set. An unknown conversion or a missing argument raises
  `FormatError`.
- `minitalk.chars`: character tests (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), `to_lower`, `to_upper`, and a C-style `atoi` and
  `itoa`.
- `minitalk.strings`: C-string helpers such as `strlen`, `strchr`,
  `strrchr`, `strlcpy`, `strlcat`, `strncmp`, `strnstr`, `strtrim` and
  `substr`.
- `minitalk.memory`: byte-buffer helpers `memset`, `bzero`, `calloc`,
  `memchr`, `memcmp`, `memcpy` and `memmove`.
- `minitalk.lists`: `Node` and `LinkedList`, a singly linked list.
- `minitalk.words`: `split`, which returns the non-empty pieces between
  separators.
- `minitalk.fdio`: `putchar_fd`, `putstr_fd`, `putendl_fd` and `putnbr_fd`,
  which write to a text or binary stream.

```python
from minitalk.protocol import CharDecoder, encode_message

decoder = CharDecoder()
received = [b for b in (decoder.feed(bit) for bit in encode_message(b"hi")) if b is not None]
# received == [104, 105, 0]
```

## Tests

```
pip install ".[test]"
pytest
```