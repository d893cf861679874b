"""Unit tests for output path resolution."""

from __future__ import annotations

import string
from pathlib import Path

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from encode_base.paths import OUTPUT_FILENAME, OVERWRITE, Directory, Overwrite, resolve_output_path

_segments = st.text(alphabet=string.ascii_letters + string.digits + "._- ", min_size=1, max_size=12)
paths = st.builds(
    lambda anchor, parts: Path(anchor, *parts),
    st.sampled_from(["", "/", "/data"]),
    st.lists(_segments, min_size=1, max_size=5),
)


@pytest.mark.property
@settings(deadline=None)
@given(source=paths)
def test_overwrite_resolves_to_source(source: Path) -> None:
    """Overwrite mode writes back to the source path."""
    assert resolve_output_path(source, OVERWRITE) == source
    assert resolve_output_path(source, Overwrite()) == source


@pytest.mark.property
@settings(deadline=None)
@given(source=paths, directory=paths)
def test_directory_uses_fixed_filename(source: Path, directory: Path) -> None:
    """The file name ignores the source name and extension."""
    assert resolve_output_path(source, Directory(directory)) == directory / "encoded_file.txt"


def test_resolver_does_not_touch_disk(tmp_path: Path) -> None:
    """Missing directories are not created or checked."""
    missing = tmp_path / "missing"
    assert resolve_output_path(tmp_path / "a.txt", Directory(missing)) == missing / OUTPUT_FILENAME
    assert not missing.exists()
