"""Measure a file's length by reading it in fixed-size chunks."""

from functools import partial
from os import PathLike
from typing import Union


def file_len(path: Union[str, PathLike], bufsize: int) -> int:
    """Return the number of bytes in ``path``, read ``bufsize`` bytes at a time."""
    if bufsize < 1:
        raise ValueError(f"buffer size must be positive, got {bufsize}")
    with open(path, "rb") as handle:
        return sum(len(chunk) for chunk in iter(partial(handle.read, bufsize), b""))