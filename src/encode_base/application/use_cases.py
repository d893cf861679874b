"""Application use-cases orchestrating conversion workflows."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from encode_base.application.options import TranscodeOptions
from encode_base.application.ports import SourceReader, TargetWriter
from encode_base.application.requests import ConversionRequest
from encode_base.application.results import ConversionResult
from encode_base.catalog import EncodingSelector
from encode_base.errors import InvalidRequestError, ReadError, WriteError
from encode_base.infrastructure.filesystem import LocalFileSystem
from encode_base.paths import OVERWRITE, Directory, resolve_output_path
from encode_base.schemas import ConvertFileConfig
from encode_base.transcoder import transcode_detailed
from encode_base.types import UNMAPPABLE_POLICIES, UnmappablePolicy

logger = logging.getLogger(__name__)


def _describe(exc: OSError | ValueError) -> str:
    return getattr(exc, "strerror", None) or str(exc)


def convert(
    request: ConversionRequest,
    *,
    options: TranscodeOptions | None = None,
    reader: SourceReader | None = None,
    writer: TargetWriter | None = None,
) -> ConversionResult:
    """Use-case: read, transcode and write one file.

    Parameters
    ----------
    request : ConversionRequest
        Source, destination and target encoding.
    options : TranscodeOptions | None, default=None
        Substitution policy; defaults to ``TranscodeOptions()``.
    reader, writer : optional
        Filesystem ports; both default to :class:`LocalFileSystem`.

    Returns
    -------
    ConversionResult
        Path written plus lossiness flags.

    Raises
    ------
    ReadError
        If the source cannot be read. Nothing is written in that case.
    WriteError
        If the output cannot be created or written. A partially written
        file is left as is.
    """
    options = options or TranscodeOptions()
    filesystem = LocalFileSystem()
    reader = reader or filesystem
    writer = writer or filesystem

    logger.debug("reading %s", request.source_path)
    try:
        payload = reader.read(request.source_path)
    except (OSError, ValueError) as exc:
        logger.debug("read failed for %s: %s", request.source_path, exc)
        raise ReadError(request.source_path, _describe(exc)) from exc

    encoded = transcode_detailed(
        payload, request.target, unmappable=options.unmappable
    )
    output_path = resolve_output_path(request.source_path, request.destination)

    logger.debug(
        "writing %d bytes of %s to %s",
        len(encoded.data),
        request.target.label,
        output_path,
    )
    try:
        writer.write(output_path, encoded.data)
    except (OSError, ValueError) as exc:
        logger.debug("write failed for %s: %s", output_path, exc)
        raise WriteError(output_path, _describe(exc)) from exc

    if encoded.replaced_malformed:
        logger.warning(
            "%s is not valid UTF-8; malformed bytes were replaced",
            request.source_path,
        )
    if encoded.substituted:
        logger.warning(
            "some characters cannot be represented in %s and were substituted",
            request.target.label,
        )
    logger.info("converted %s -> %s (%s)", request.source_path, output_path, request.target)
    return ConversionResult(
        output_path=output_path,
        source_path=request.source_path,
        target=request.target,
        bytes_written=len(encoded.data),
        replaced_malformed=encoded.replaced_malformed,
        substituted=encoded.substituted,
    )


def build_conversion_request(
    *,
    source_path: Path,
    target: str | EncodingSelector = EncodingSelector.UTF8,
    output_dir: Path | None = None,
    overwrite: bool = False,
) -> ConversionRequest:
    """Validate loose caller input into an immutable request.

    Raises
    ------
    InvalidRequestError
        If the input is inconsistent or names an unknown encoding.
    """
    try:
        config = ConvertFileConfig(
            source_path=source_path,
            target=target,
            output_dir=output_dir,
            overwrite=overwrite,
        )
    except ValidationError as exc:
        raise InvalidRequestError(f"Invalid conversion parameters: {exc}") from exc

    destination = OVERWRITE if config.overwrite else Directory(config.output_dir)
    return ConversionRequest(
        source_path=config.source_path,
        destination=destination,
        target=config.target,
    )


def build_transcode_options(*, unmappable: UnmappablePolicy = "replace") -> TranscodeOptions:
    """Build typed option object from command/API params."""
    if unmappable not in UNMAPPABLE_POLICIES:
        raise InvalidRequestError(
            f"unmappable must be 'replace' or 'xmlcharref', not '{unmappable}'"
        )
    return TranscodeOptions(unmappable=unmappable)
