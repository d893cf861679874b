"""UTF-8 to target-encoding transcoding."""

from __future__ import annotations

from dataclasses import dataclass

from encode_base.catalog import SOURCE_CODEC, EncodingSelector, codec_for
from encode_base.types import UnmappablePolicy

_ERROR_HANDLERS: dict[UnmappablePolicy, str] = {
    "replace": "replace",
    "xmlcharref": "xmlcharrefreplace",
}


@dataclass(frozen=True)
class TranscodeResult:
    """Encoded payload plus flags describing lossy steps.

    Attributes
    ----------
    data : bytes
        Bytes in the target encoding.
    replaced_malformed : bool
        Source contained invalid UTF-8 that was replaced with U+FFFD.
    substituted : bool
        Some characters had no representation in the target encoding.
    """

    data: bytes
    replaced_malformed: bool = False
    substituted: bool = False

    @property
    def lossy(self) -> bool:
        """Whether the output differs from a faithful conversion."""
        return self.replaced_malformed or self.substituted


def decode_source(data: bytes) -> tuple[str, bool]:
    """Decode UTF-8 bytes, replacing malformed sequences.

    Returns
    -------
    tuple[str, bool]
        Decoded text and whether any replacement happened.
    """
    try:
        return data.decode(SOURCE_CODEC), False
    except UnicodeDecodeError:
        return data.decode(SOURCE_CODEC, errors="replace"), True


def encode_target(
    text: str,
    target: EncodingSelector,
    unmappable: UnmappablePolicy = "replace",
) -> tuple[bytes, bool]:
    """Encode text into ``target``, substituting unrepresentable characters.

    Returns
    -------
    tuple[bytes, bool]
        Encoded bytes and whether any substitution happened.
    """
    spec = codec_for(target)
    try:
        return spec.encode(text), False
    except UnicodeEncodeError:
        return spec.encode(text, errors=_ERROR_HANDLERS[unmappable]), True


def transcode_detailed(
    data: bytes,
    target: EncodingSelector,
    *,
    unmappable: UnmappablePolicy = "replace",
) -> TranscodeResult:
    """Transcode UTF-8 ``data`` into ``target`` and report lossy steps."""
    text, replaced = decode_source(data)
    encoded, substituted = encode_target(text, target, unmappable)
    return TranscodeResult(
        data=encoded,
        replaced_malformed=replaced,
        substituted=substituted,
    )


def transcode(data: bytes, target: EncodingSelector) -> bytes:
    """Transcode UTF-8 ``data`` into ``target`` with default substitution."""
    return transcode_detailed(data, target).data
