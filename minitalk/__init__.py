"""Pass text between processes one bit at a time over SIGUSR1 and SIGUSR2, with small text, memory and list helpers."""

__version__ = "1.0.0"
__all__ = [
    "chars",
    "client",
    "fdio",
    "lists",
    "memory",
    "printf",
    "protocol",
    "server",
    "strings",
    "words",
]