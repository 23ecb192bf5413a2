"""Common test fixtures."""

from pathlib import Path

import pytest

from commentor.analyzer.symbols import SourceLocation
from commentor.settings import Settings


@pytest.fixture
def location() -> SourceLocation:
    """A placeholder location for symbols built by hand."""
    return SourceLocation(path="Sample.cs", start_line=0, start_column=0, end_line=0, end_column=1)


@pytest.fixture
def default_settings() -> Settings:
    """Settings with defaults only, independent of the developer's environment."""
    return Settings(_env_file=None)


@pytest.fixture
def write_cs(tmp_path: Path):
    """Write a C# file under tmp_path and return its path."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write
