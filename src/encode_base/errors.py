"""Exception hierarchy for encoding conversion."""

from __future__ import annotations

from pathlib import Path


class EncodeBaseError(Exception):
    """Base class for all errors raised by ``encode_base``.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when this error is reported.
    """

    exit_code: int = 1


class InvalidRequestError(EncodeBaseError):
    """Conversion input failed validation before any I/O happened."""

    exit_code = 2


class UnknownEncodingError(InvalidRequestError):
    """Encoding name or label is not one of the supported selectors."""


class ConversionError(EncodeBaseError):
    """Conversion pipeline failed."""


class ReadError(ConversionError):
    """Source file could not be opened or read."""

    exit_code = 3

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot read source file '{path}': {reason}")
        self.path = path


class WriteError(ConversionError):
    """Destination file could not be created or written."""

    exit_code = 4

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"cannot write output file '{path}': {reason}")
        self.path = path
