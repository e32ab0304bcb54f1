"""Console output abstraction.

Error presentation helpers print through ConsoleProtocol so that they do not
depend on a specific terminal library. RichConsole is the production backend;
MockConsole records output for tests.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
]


class ConsoleProtocol(Protocol):
    """Protocol for error output.

    Messages are plain text. Implementations must print them literally, even
    when they contain characters their backend treats as markup.
    """

    def error(self, message: str) -> None:
        """Print an error line.

        Args:
            message: The text to print after the "error:" prefix
        """
        ...


class RichConsole:
    """Console implementation using Rich.

    Error messages routinely contain brackets (``KeyError: ['id']``), so every
    message is escaped before being wrapped in Rich markup.
    """

    def __init__(self, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console
        from rich.markup import escape

        self._console = Console(stderr=stderr, highlight=False)
        self._escape = escape

    def error(self, message: str) -> None:
        self._console.print(f"[red bold]error:[/red bold] {self._escape(message)}")


def _empty_outputs() -> list[str]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    messages: list[str] = field(default_factory=_empty_outputs)

    def error(self, message: str) -> None:
        self.messages.append(f"error: {message}")

    @property
    def text(self) -> str:
        """All output as a single newline-separated string."""
        return "\n".join(self.messages)
