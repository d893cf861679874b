"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class SourceReader(Protocol):
    """Load the full content of a source file."""

    def read(self, path: Path) -> bytes:
        """Return all bytes of ``path``; raise ``OSError`` on failure."""


class TargetWriter(Protocol):
    """Persist converted bytes."""

    def write(self, path: Path, data: bytes) -> None:
        """Create or truncate ``path`` and write ``data``; raise ``OSError`` on failure."""
