"""Errors raised by the number generator core.

Every error is local and recoverable. The core raises them and leaves the
translation into user-facing messages to the front end (see ``app.py`` and
``cli.py``).
"""
from __future__ import annotations

from typing import Optional


class GeneratorError(Exception):
    """Base class for everything the generator core raises."""

    kind = "generator_error"


class InvalidBounds(GeneratorError, ValueError):
    """The lower bound exceeds the upper bound, or a bound is out of range."""

    kind = "invalid_bounds"

    def __init__(self, lower: int, upper: int, reason: Optional[str] = None):
        super().__init__(reason or f"lower bound {lower} is greater than upper bound {upper}")
        self.lower = lower
        self.upper = upper


class TooManyNumbers(GeneratorError, ValueError):
    """More unique numbers were requested than the universe holds."""

    kind = "too_many_numbers"

    def __init__(self, requested: int, available: int):
        super().__init__(
            f"cannot draw {requested} unique numbers from {available} candidates"
        )
        self.requested = requested
        self.available = available


class EmptyList(GeneratorError, ValueError):
    """Custom list mode is active but the list holds no candidates."""

    kind = "empty_list"

    def __init__(self):
        super().__init__("custom list mode requires at least one candidate")


class InvalidInputFormat(GeneratorError, ValueError):
    """A token of the custom list text is not an integer."""

    kind = "invalid_input_format"

    def __init__(self, token: str):
        super().__init__(f"not an integer: {token[:40]!r}")
        self.token = token


class DataFormatError(GeneratorError, ValueError):
    """A numbers file holds a line that is not an integer."""

    kind = "data_format_error"

    def __init__(self, path: str, line_number: int | None, reason: str):
        where = f"{path}:{line_number}" if line_number is not None else path
        super().__init__(f"{where}: {reason}")
        self.path = path
        self.line_number = line_number


class IoError(GeneratorError):
    """Reading or writing a numbers file failed.

    The originating ``OSError`` is chained as ``__cause__``.
    """

    kind = "io_error"

    def __init__(self, path: str, cause: OSError):
        super().__init__(f"{path}: {cause.strerror or cause}")
        self.path = path
        self.cause = cause
