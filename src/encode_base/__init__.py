"""Top-level API for converting UTF-8 text files to other encodings."""

from __future__ import annotations

from pathlib import Path

from encode_base.catalog import EncodingSelector
from encode_base.errors import (
    ConversionError,
    EncodeBaseError,
    InvalidRequestError,
    ReadError,
    UnknownEncodingError,
    WriteError,
)
from encode_base.types import UnmappablePolicy

__version__ = "0.1.0"


def convert_file(
    source_path: Path,
    *,
    target: str | EncodingSelector = EncodingSelector.UTF8,
    output_dir: Path | None = None,
    overwrite: bool = False,
    unmappable: UnmappablePolicy = "replace",
) -> Path:
    """Convert a UTF-8 text file to another encoding.

    Parameters
    ----------
    source_path : Path
        File to convert. Its bytes are decoded as UTF-8; malformed sequences
        become U+FFFD.
    target : str | EncodingSelector, default=EncodingSelector.UTF8
        Target encoding, as a selector or a name such as ``"EUC-KR"``.
    output_dir : Path | None, default=None
        Directory receiving ``encoded_file.txt``. Required unless
        ``overwrite`` is set.
    overwrite : bool, default=False
        Replace the source file in place.
    unmappable : {"replace", "xmlcharref"}, default="replace"
        How to substitute characters the target cannot encode.

    Returns
    -------
    Path
        Path of the written file.

    Raises
    ------
    InvalidRequestError
        If the arguments are inconsistent or the encoding is unknown.
    ReadError
        If the source cannot be read.
    WriteError
        If the output cannot be written.
    """
    from .api import convert_file as _impl

    return _impl(
        source_path,
        target=target,
        output_dir=output_dir,
        overwrite=overwrite,
        unmappable=unmappable,
    )


__all__ = [
    "ConversionError",
    "EncodeBaseError",
    "EncodingSelector",
    "InvalidRequestError",
    "ReadError",
    "UnknownEncodingError",
    "WriteError",
    "convert_file",
]
