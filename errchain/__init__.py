"""Render an error and its chain of causes on a single line.

    >>> try:
    ...     try:
    ...         raise PermissionError("permission denied")
    ...     except PermissionError as e:
    ...         raise RuntimeError("upload failed") from e
    ... except RuntimeError as e:
    ...     print(f"the app crashed: {display_full(e)}")
    the app crashed: upload failed: permission denied

Messages are separated with ": ". Up to MESSAGE_LIMIT (1024) messages are
printed per chain, after which a single ": ..." ends the line. The output
format is stable.
"""

from .core.chain import (
    MESSAGE_LIMIT,
    SEPARATOR,
    TRUNCATION_MARKER,
    ErrorNode,
    ExceptionNode,
    TextSink,
    as_node,
    render_full,
    write_full,
)
from .core.display import FullError, FullErrorMixin, display_full, to_string_full

__version__ = "1.0.0"

__all__ = [
    "MESSAGE_LIMIT",
    "SEPARATOR",
    "TRUNCATION_MARKER",
    "ErrorNode",
    "ExceptionNode",
    "TextSink",
    "as_node",
    "render_full",
    "write_full",
    "FullError",
    "FullErrorMixin",
    "display_full",
    "to_string_full",
]
