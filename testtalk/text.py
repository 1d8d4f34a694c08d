"""Character counting for UTF-8 encoded files."""

from os import PathLike
from pathlib import Path
from typing import Union


def count_characters(file_name: Union[str, PathLike]) -> int:
    """Return the number of UTF-8 characters in the file.

    Each byte that is not part of a valid UTF-8 sequence counts as one character.
    """
    data = Path(file_name).read_bytes()
    return len(data.decode("utf-8", errors="surrogateescape"))