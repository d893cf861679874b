"""Shared pytest configuration, marker assignment and file fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        parts = set(Path(str(item.fspath)).parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_source(tmp_path: Path) -> Callable[..., Path]:
    """Write a source file under ``tmp_path`` from text or raw bytes."""

    def _make(content: str | bytes, name: str = "source.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, str):
            path.write_bytes(content.encode("utf-8"))
        else:
            path.write_bytes(content)
        return path

    return _make


@pytest.fixture
def out_dir(tmp_path: Path) -> Path:
    """Existing, empty output directory."""
    path = tmp_path / "out"
    path.mkdir()
    return path
