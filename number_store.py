"""Newline-delimited integer files.

One base-10 signed integer per line, UTF-8, no header. Blank lines are
ignored on read.
"""
from __future__ import annotations

import os
from typing import List, Sequence, Union

from generator_config import INT_MAX, INT_MIN, parse_integer
from generator_errors import DataFormatError, IoError

PathLike = Union[str, os.PathLike]


def write_numbers(path: PathLike, numbers: Sequence[int]) -> None:
    """Write ``numbers`` to ``path``, replacing any existing file.

    Raises:
        IoError: If the file cannot be written.
    """
    content = "\n".join(str(n) for n in numbers)
    try:
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
    except OSError as exc:
        raise IoError(os.fspath(path), exc) from exc


def read_numbers(path: PathLike) -> List[int]:
    """Read the integers stored at ``path``.

    Raises:
        IoError: If the file cannot be opened or read.
        DataFormatError: If a non-blank line is not a 64-bit integer, or the
            file is not valid UTF-8.
    """
    name = os.fspath(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            text = f.read()
    except UnicodeDecodeError as exc:
        raise DataFormatError(name, None, "file is not valid UTF-8") from exc
    except OSError as exc:
        raise IoError(name, exc) from exc

    numbers: List[int] = []
    for line_number, line in enumerate(text.splitlines(), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        value = parse_integer(stripped)
        if value is None:
            raise DataFormatError(
                name, line_number, f"not an integer in [{INT_MIN}, {INT_MAX}]: {stripped[:40]!r}"
            )
        numbers.append(value)
    return numbers
