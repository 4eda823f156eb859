"""Generation parameters, the custom list grammar and validation.

``validate`` is the single place where the configuration invariants live.
The engine calls it from every mutator and before every generation.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from generator_errors import EmptyList, InvalidBounds, InvalidInputFormat, TooManyNumbers

DEFAULT_LOWER_BOUND = 0
DEFAULT_UPPER_BOUND = 1024
DEFAULT_NUM_TO_GENERATE = 1

_SEPARATORS = re.compile(r"[,;\s]+")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Values are 64-bit signed integers.
INT_MIN = -(2 ** 63)
INT_MAX = 2 ** 63 - 1
_MAX_DIGITS = len(str(INT_MAX))


class Mode(str, Enum):
    RANGE = "range"
    CUSTOM_LIST = "custom_list"


@dataclass(frozen=True)
class GeneratorConfig:
    lower_bound: int = DEFAULT_LOWER_BOUND
    upper_bound: int = DEFAULT_UPPER_BOUND
    num_to_generate: int = DEFAULT_NUM_TO_GENERATE
    allow_duplicates: bool = False
    mode: Mode = Mode.RANGE
    custom_list: Tuple[int, ...] = ()
    # Raw text as typed; may hold fragments that failed to parse.
    custom_list_input: str = ""

    def __post_init__(self):
        object.__setattr__(self, "mode", Mode(self.mode))
        object.__setattr__(self, "custom_list", tuple(self.custom_list))

    @property
    def range_size(self) -> int:
        return self.upper_bound - self.lower_bound + 1


def universe_size(config: GeneratorConfig) -> int:
    """Number of distinct values the active mode can draw from."""
    if config.mode is Mode.CUSTOM_LIST:
        return len(config.custom_list)
    return config.range_size


def validate(config: GeneratorConfig) -> None:
    """Raise the matching ``GeneratorError`` if ``config`` cannot generate.

    Raises:
        InvalidBounds: range mode with ``lower_bound > upper_bound`` or a
            bound outside ``[INT_MIN, INT_MAX]``.
        EmptyList: custom list mode without candidates.
        TooManyNumbers: duplicates forbidden and ``num_to_generate``
            exceeds the universe size.
    """
    if config.mode is Mode.RANGE:
        if config.lower_bound > config.upper_bound:
            raise InvalidBounds(config.lower_bound, config.upper_bound)
        if config.lower_bound < INT_MIN or config.upper_bound > INT_MAX:
            raise InvalidBounds(
                config.lower_bound,
                config.upper_bound,
                f"bounds must lie within [{INT_MIN}, {INT_MAX}]",
            )
    elif not config.custom_list:
        raise EmptyList()

    if not config.allow_duplicates:
        available = universe_size(config)
        if config.num_to_generate > available:
            raise TooManyNumbers(config.num_to_generate, available)


def parse_integer(text: str) -> Optional[int]:
    """Return ``text`` as an integer, or None if it is not one in 64-bit range."""
    if not INTEGER_PATTERN.fullmatch(text):
        return None
    if len(text.lstrip("+-").lstrip("0")) > _MAX_DIGITS:
        return None
    value = int(text)
    if value < INT_MIN or value > INT_MAX:
        return None
    return value


def parse_custom_list(text: str) -> Tuple[int, ...]:
    """Parse candidate values separated by commas, semicolons or whitespace.

    Repeated values keep their first occurrence only. Blank text gives an
    empty tuple; emptiness is a validation concern, not a parse error.

    >>> parse_custom_list("1, 2;3  -4,,2")
    (1, 2, 3, -4)
    """
    values: List[int] = []
    for token in _SEPARATORS.split(text):
        if not token:
            continue
        value = parse_integer(token)
        if value is None:
            raise InvalidInputFormat(token)
        values.append(value)
    return tuple(dict.fromkeys(values))
