"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from encode_base.catalog import EncodingSelector


@dataclass(frozen=True)
class ConversionResult:
    """Structured outcome of a successful write."""

    output_path: Path
    source_path: Path
    target: EncodingSelector
    bytes_written: int
    replaced_malformed: bool = False
    substituted: bool = False

    @property
    def lossy(self) -> bool:
        """Whether the written file is not a faithful conversion of the source."""
        return self.replaced_malformed or self.substituted
