"""Immutable conversion request."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from encode_base.catalog import DEFAULT_SELECTOR, EncodingSelector
from encode_base.errors import InvalidRequestError
from encode_base.paths import Destination, Directory, resolve_output_path


@dataclass(frozen=True)
class ConversionRequest:
    """One file conversion, built fresh for every call.

    Parameters
    ----------
    source_path : Path
        File to read. Assumed to hold UTF-8 text.
    destination : Overwrite | Directory
        Where the converted bytes go.
    target : EncodingSelector, default=EncodingSelector.UTF8
        Encoding of the written file.

    Raises
    ------
    InvalidRequestError
        If a :class:`Directory` destination would resolve onto the source.
    """

    source_path: Path
    destination: Destination
    target: EncodingSelector = field(default=DEFAULT_SELECTOR)

    def __post_init__(self) -> None:
        if not isinstance(self.destination, Directory):
            return
        output_path = resolve_output_path(self.source_path, self.destination)
        if os.path.abspath(output_path) == os.path.abspath(self.source_path):
            raise InvalidRequestError(
                f"output file '{output_path}' is the source file; "
                "use overwrite mode to replace it"
            )
