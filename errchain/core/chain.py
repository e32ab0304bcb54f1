"""Single-line rendering of error cause chains.

An error chain is a root error followed by the sequence of errors that caused
it. This module renders a chain on one line, messages separated with ": ".
At most MESSAGE_LIMIT messages are printed; if causes remain after that, a
single ": ..." is printed and the walk stops.

There is no cycle detection: a chain that loops back on itself is cut by the
message limit like any other long chain.

Usage:
    try:
        upload()
    except UploadError as e:
        sys.stderr.write(render_full(e) + "\\n")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, cast, runtime_checkable

__all__ = [
    "MESSAGE_LIMIT",
    "SEPARATOR",
    "TRUNCATION_MARKER",
    "COUNTER_MAX",
    "ErrorNode",
    "TextSink",
    "ExceptionNode",
    "as_node",
    "saturating_increment",
    "write_full",
    "render_full",
]

# Maximum number of messages printed for a single chain, root included.
# Part of the output contract: changing it changes rendered text.
MESSAGE_LIMIT = 1024

SEPARATOR = ": "
TRUNCATION_MARKER = "..."

# Largest value the printed counter can hold
COUNTER_MAX = 0xFFFF


@runtime_checkable
class ErrorNode(Protocol):
    """Protocol for a link in an error chain.

    Implementations only describe themselves; the formatter never stores or
    mutates nodes.
    """

    def message(self) -> str:
        """Return the human-readable message of this error only."""
        ...

    def cause(self) -> ErrorNode | BaseException | None:
        """Return the direct cause of this error, or None."""
        ...


class TextSink(Protocol):
    """Anything text can be written to (io.StringIO, sys.stderr, files)."""

    def write(self, s: str, /) -> object: ...


@dataclass(frozen=True, slots=True)
class ExceptionNode:
    """Adapts a Python exception to the ErrorNode protocol.

    The cause is the explicit ``__cause__`` (``raise ... from e``). When there
    is none, the implicit ``__context__`` is used unless it was suppressed
    with ``raise ... from None``, which matches what the traceback printer
    shows.

    Attributes:
        exc: The wrapped exception.
    """

    exc: BaseException

    def message(self) -> str:
        return str(self.exc)

    def cause(self) -> BaseException | None:
        if self.exc.__cause__ is not None:
            return self.exc.__cause__
        if self.exc.__suppress_context__:
            return None
        return self.exc.__context__


def as_node(error: object) -> ErrorNode:
    """Return error as an ErrorNode.

    Exceptions that implement message() and cause() themselves are used as
    they are; other exceptions go through ExceptionNode.

    Args:
        error: An exception or an object implementing ErrorNode.

    Returns:
        The adapted node.

    Raises:
        TypeError: If error is neither an exception nor an ErrorNode.
    """
    if _implements_node(error):
        return cast(ErrorNode, error)
    if isinstance(error, BaseException):
        return ExceptionNode(error)
    raise TypeError(f"not an error node: {type(error).__name__}")


def _implements_node(obj: object) -> bool:
    # isinstance() against the protocol only checks that the names exist
    return callable(getattr(obj, "message", None)) and callable(getattr(obj, "cause", None))


def saturating_increment(count: int, maximum: int = COUNTER_MAX) -> int:
    """Increment count by one, clamping at maximum instead of growing past it."""
    if count >= maximum:
        return maximum
    return count + 1


def write_full(error: ErrorNode | BaseException, sink: TextSink) -> None:
    """Write the full chain of error to sink.

    Exceptions raised by sink.write (or by a node) propagate unchanged and
    stop the walk; whatever was written before stays written.

    Args:
        error: Root of the chain.
        sink: Destination of the rendered text.
    """
    node = as_node(error)
    sink.write(node.message())
    printed = 1
    current = node.cause()
    while current is not None:
        if printed >= MESSAGE_LIMIT:
            sink.write(SEPARATOR + TRUNCATION_MARKER)
            return
        node = as_node(current)
        sink.write(SEPARATOR)
        sink.write(node.message())
        printed = saturating_increment(printed)
        current = node.cause()


class _Collector:
    def __init__(self) -> None:
        self.parts: list[str] = []

    def write(self, s: str, /) -> int:
        self.parts.append(s)
        return len(s)


def render_full(error: ErrorNode | BaseException) -> str:
    """Return the full chain of error as a single line."""
    collector = _Collector()
    write_full(error, collector)
    return "".join(collector.parts)
