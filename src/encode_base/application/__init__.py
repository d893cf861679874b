"""Application-layer use-cases and option objects."""

from __future__ import annotations

from pathlib import Path

from encode_base.application.options import TranscodeOptions
from encode_base.application.ports import SourceReader, TargetWriter
from encode_base.application.requests import ConversionRequest
from encode_base.application.results import ConversionResult
from encode_base.catalog import EncodingSelector
from encode_base.types import UnmappablePolicy


def build_transcode_options(*, unmappable: UnmappablePolicy = "replace") -> TranscodeOptions:
    """Build typed transcode options via lazy use-case import."""
    from encode_base.application.use_cases import build_transcode_options as _impl

    return _impl(unmappable=unmappable)


def build_conversion_request(
    *,
    source_path: Path,
    target: str | EncodingSelector = EncodingSelector.UTF8,
    output_dir: Path | None = None,
    overwrite: bool = False,
) -> ConversionRequest:
    """Validate caller input into a request via lazy use-case import."""
    from encode_base.application.use_cases import build_conversion_request as _impl

    return _impl(
        source_path=source_path,
        target=target,
        output_dir=output_dir,
        overwrite=overwrite,
    )


def convert(
    request: ConversionRequest,
    *,
    options: TranscodeOptions | None = None,
    reader: SourceReader | None = None,
    writer: TargetWriter | None = None,
) -> ConversionResult:
    """Run the conversion pipeline via lazy use-case import."""
    from encode_base.application.use_cases import convert as _impl

    return _impl(request, options=options, reader=reader, writer=writer)


__all__ = [
    "ConversionRequest",
    "ConversionResult",
    "SourceReader",
    "TargetWriter",
    "TranscodeOptions",
    "build_conversion_request",
    "build_transcode_options",
    "convert",
]
