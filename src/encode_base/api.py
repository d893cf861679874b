"""Public file-based conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from encode_base.application.use_cases import build_conversion_request
from encode_base.application.use_cases import build_transcode_options
from encode_base.application.use_cases import convert
from encode_base.application.results import ConversionResult
from encode_base.catalog import EncodingSelector
from encode_base.types import UnmappablePolicy


def convert_file_detailed(
    source_path: Path,
    *,
    target: str | EncodingSelector = EncodingSelector.UTF8,
    output_dir: Optional[Path] = None,
    overwrite: bool = False,
    unmappable: UnmappablePolicy = "replace",
) -> ConversionResult:
    """Convert a UTF-8 file and return the full conversion result."""
    request = build_conversion_request(
        source_path=Path(source_path),
        target=target,
        output_dir=Path(output_dir) if output_dir is not None else None,
        overwrite=overwrite,
    )
    options = build_transcode_options(unmappable=unmappable)
    return convert(request, options=options)


def convert_file(
    source_path: Path,
    *,
    target: str | EncodingSelector = EncodingSelector.UTF8,
    output_dir: Optional[Path] = None,
    overwrite: bool = False,
    unmappable: UnmappablePolicy = "replace",
) -> Path:
    """Convert a UTF-8 file and return the path that was written."""
    result = convert_file_detailed(
        source_path,
        target=target,
        output_dir=output_dir,
        overwrite=overwrite,
        unmappable=unmappable,
    )
    return result.output_path
