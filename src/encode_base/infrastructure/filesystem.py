"""Local filesystem adapter implementation."""

from __future__ import annotations

from pathlib import Path


class LocalFileSystem:
    """Read and write whole files on the local disk."""

    def read(self, path: Path) -> bytes:
        """Read ``path`` fully into memory.

        Parameters
        ----------
        path : Path
            Source file path.

        Returns
        -------
        bytes
            File content.
        """
        with path.open("rb") as handle:
            return handle.read()

    def write(self, path: Path, data: bytes) -> None:
        """Create or truncate ``path`` and write ``data``.

        The parent directory is not created; a missing directory surfaces
        as ``FileNotFoundError``.
        """
        with path.open("wb") as handle:
            handle.write(data)
