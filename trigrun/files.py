"""Plain text file helpers for level data."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Sequence, Union

PathLike = Union[str, os.PathLike]


def write_file(file_name: PathLike, contents: Union[str, Sequence[str]]) -> None:
    """Write ``contents`` to ``file_name``, replacing what was there.

    Given a sequence of lines, each line is written in turn with its own
    newline and replaces the previous one, so only the last line remains;
    an empty sequence leaves the file untouched.
    """
    if isinstance(contents, str):
        Path(file_name).write_text(contents)
        return
    if contents:
        Path(file_name).write_text(contents[-1] + "\n")


def read_file(file_name: PathLike) -> list[str]:
    """Return the non-empty lines of ``file_name``, without line endings."""
    with open(file_name) as handle:
        return [line for line in handle.read().split("\n") if line]


def make_dir(dir_name: PathLike) -> None:
    """Create a single directory; raises if it already exists."""
    os.mkdir(dir_name)