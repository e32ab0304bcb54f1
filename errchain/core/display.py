"""Formatting wrapper and convenience accessors for full error chains.

FullError wraps an error and renders its whole chain whenever it is turned
into text, so it can be used anywhere a string is formatted:

    print(f"the app crashed: {FullError(err)}")
    # the app crashed: upload failed: permission denied

Project exceptions can inherit FullErrorMixin to get the same thing as
methods (err.display_full(), err.to_string_full()). Built-in exceptions use
the module-level display_full() and to_string_full() functions.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, final

from .chain import ErrorNode, TextSink, render_full, write_full

__all__ = [
    "FullError",
    "FullErrorMixin",
    "display_full",
    "to_string_full",
]


@dataclass(frozen=True, slots=True)
class FullError:
    """Formatting wrapper to display an error including its causes.

    Attributes:
        error: The root error, an exception or an ErrorNode.
    """

    error: ErrorNode | BaseException

    def __str__(self) -> str:
        return render_full(self.error)

    def __format__(self, format_spec: str) -> str:
        return format(render_full(self.error), format_spec)

    def write_to(self, sink: TextSink) -> None:
        """Stream the rendered chain into sink.

        Args:
            sink: Destination; write failures propagate unchanged.
        """
        write_full(self.error, sink)


def display_full(error: ErrorNode | BaseException) -> FullError:
    """Wrap error in a FullError."""
    return FullError(error)


def to_string_full(error: ErrorNode | BaseException) -> str:
    """Shorthand for str(display_full(error))."""
    return str(display_full(error))


_SEALED = ("display_full", "to_string_full")


class FullErrorMixin:
    """Adds full-chain accessors to an exception class.

    The accessors are sealed: a subclass redefining display_full or
    to_string_full is rejected when the class is created.

    Example:
        class UploadError(FullErrorMixin, Exception):
            pass

        try:
            ...
        except UploadError as e:
            console.error(e.to_string_full())
    """

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        # Anything resolved before the mixin in the MRO shadows its methods
        ahead = cls.__mro__[: cls.__mro__.index(FullErrorMixin)]
        overridden = [name for name in _SEALED if any(name in k.__dict__ for k in ahead)]
        if overridden:
            raise TypeError(
                f"{cls.__name__} cannot override sealed method(s): {', '.join(overridden)}"
            )

    @final
    def display_full(self) -> FullError:
        """Return this error wrapped in a FullError."""
        return FullError(self)  # type: ignore[arg-type]

    @final
    def to_string_full(self) -> str:
        """Shorthand for str(self.display_full())."""
        return str(self.display_full())
