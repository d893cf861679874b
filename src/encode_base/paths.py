"""Output destination types and path resolution."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Final

OUTPUT_FILENAME: Final = "encoded_file.txt"


@dataclass(frozen=True)
class Overwrite:
    """Write the result back over the source file."""


@dataclass(frozen=True)
class Directory:
    """Write the result as ``OUTPUT_FILENAME`` inside ``path``."""

    path: Path


type Destination = Overwrite | Directory

OVERWRITE: Final = Overwrite()


def resolve_output_path(source_path: Path, destination: Destination) -> Path:
    """Compute where the converted file is written.

    Pure path arithmetic: nothing is checked or created on disk, so a missing
    directory only shows up later when the file is written.

    Parameters
    ----------
    source_path : Path
        File being converted.
    destination : Overwrite | Directory
        Overwrite policy or target directory.

    Returns
    -------
    Path
        ``source_path`` for :class:`Overwrite`, otherwise
        ``destination.path / OUTPUT_FILENAME``.
    """
    if isinstance(destination, Overwrite):
        return source_path
    return destination.path / OUTPUT_FILENAME
