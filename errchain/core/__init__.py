"""Core chain rendering, with no output dependencies."""

from .chain import (
    COUNTER_MAX,
    MESSAGE_LIMIT,
    SEPARATOR,
    TRUNCATION_MARKER,
    ErrorNode,
    ExceptionNode,
    TextSink,
    as_node,
    render_full,
    saturating_increment,
    write_full,
)
from .display import FullError, FullErrorMixin, display_full, to_string_full
from .result import Err, Ok, Result

__all__ = [
    # chain
    "COUNTER_MAX",
    "MESSAGE_LIMIT",
    "SEPARATOR",
    "TRUNCATION_MARKER",
    "ErrorNode",
    "ExceptionNode",
    "TextSink",
    "as_node",
    "render_full",
    "saturating_increment",
    "write_full",
    # display
    "FullError",
    "FullErrorMixin",
    "display_full",
    "to_string_full",
    # result
    "Err",
    "Ok",
    "Result",
]
