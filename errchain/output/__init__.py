"""Output abstraction layer."""

from .console import ConsoleProtocol, MockConsole, RichConsole
from .errors import SinkWriteError, print_full_error, write_full_error

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "RichConsole",
    "SinkWriteError",
    "print_full_error",
    "write_full_error",
]
