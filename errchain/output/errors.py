"""Error presentation helpers.

Print full error chains to a console or a raw text stream.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from errchain.core.chain import ErrorNode, TextSink, write_full
from errchain.core.display import to_string_full
from errchain.core.result import Err, Ok, Result

if TYPE_CHECKING:
    from errchain.output.console import ConsoleProtocol

__all__ = ["SinkWriteError", "print_full_error", "write_full_error"]


@dataclass(frozen=True, slots=True)
class SinkWriteError:
    """The stream failed while a chain was being written.

    Some of the chain may already have been written.

    Attributes:
        cause: The exception raised by the stream, unchanged.
    """

    cause: OSError

    @property
    def message(self) -> str:
        return f"failed to write error: {to_string_full(self.cause)}"


def print_full_error(
    error: ErrorNode | BaseException,
    console: ConsoleProtocol,
    context: str | None = None,
) -> None:
    """Print error and its causes as a single console error line.

    Args:
        error: Root of the chain.
        console: Where to print.
        context: Optional text printed before the chain, e.g. "the app crashed".
    """
    text = to_string_full(error)
    if context:
        text = f"{context}: {text}"
    console.error(text)


def write_full_error(
    error: ErrorNode | BaseException, stream: TextSink
) -> Result[None, SinkWriteError]:
    """Write error and its causes to stream, followed by a newline.

    Only OSError is turned into a Result. Writing to an already closed stream
    raises ValueError, which propagates like any other exception, as do
    errors raised by the nodes themselves.

    Returns:
        Ok(None) on success, Err(SinkWriteError) if the stream raised OSError.
    """
    try:
        write_full(error, stream)
        stream.write("\n")
    except OSError as e:
        return Err(SinkWriteError(cause=e))
    return Ok(None)
