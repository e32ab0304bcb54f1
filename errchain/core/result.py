"""Result type for reporting failures without raising.

The rendering core lets sink failures propagate as exceptions. Presentation
helpers in errchain.output catch them at the boundary and hand back a Result
instead, so callers printing an error while already handling one do not have
to nest try/except blocks.

Usage:
    match write_full_error(err, sys.stderr):
        case Ok():
            pass
        case Err(error):
            fallback(error.cause)
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result.

    Attributes:
        value: The success value.
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result.

    Attributes:
        error: The error value.
    """

    error: E


type Result[T, E] = Ok[T] | Err[E]
