"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass

from encode_base.types import UnmappablePolicy


@dataclass(frozen=True)
class TranscodeOptions:
    """Substitution behaviour for characters the target cannot encode."""

    unmappable: UnmappablePolicy = "replace"
