"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from encode_base.catalog import DEFAULT_SELECTOR, EncodingSelector, parse_selector


class ConvertFileConfig(BaseModel):
    """Validated input for a single-file conversion."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    source_path: Path
    target: EncodingSelector = DEFAULT_SELECTOR
    output_dir: Path | None = None
    overwrite: bool = False

    @field_validator("target", mode="before")
    @classmethod
    def _parse_target(cls, value: object) -> EncodingSelector:
        if isinstance(value, EncodingSelector):
            return value
        if not isinstance(value, str):
            raise ValueError("target must be an encoding name.")
        # UnknownEncodingError is not a ValueError and propagates unchanged.
        return parse_selector(value)

    @field_validator("source_path", "output_dir")
    @classmethod
    def _reject_nul(cls, value: Path | None) -> Path | None:
        if value is not None and "\0" in str(value):
            raise ValueError("paths cannot contain NUL characters.")
        return value

    @model_validator(mode="after")
    def _check_destination(self) -> ConvertFileConfig:
        if self.overwrite and self.output_dir is not None:
            raise ValueError("output_dir cannot be combined with overwrite.")
        if not self.overwrite and self.output_dir is None:
            raise ValueError("output_dir is required unless overwrite is set.")
        return self
