"""Shared type aliases for conversion modules."""

from __future__ import annotations

from typing import Literal

type UnmappablePolicy = Literal["replace", "xmlcharref"]

UNMAPPABLE_POLICIES: tuple[UnmappablePolicy, ...] = ("replace", "xmlcharref")
