"""
Pytest configuration and fixtures for langcheck tests.
"""

import json
import tempfile
from pathlib import Path
from typing import Any, Generator, Union

import pytest

from langcheck.config import CheckerSettings


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def lang_dir(temp_dir: Path) -> Path:
    """Empty language directory."""
    path = temp_dir / "lang"
    path.mkdir()
    return path


@pytest.fixture
def create_lang_file(lang_dir: Path):
    """Helper to create language files.

    Dicts are written as JSON, strings are written verbatim.
    """
    def _create_file(filename: str, content: Union[str, Any]) -> Path:
        file_path = lang_dir / filename
        if isinstance(content, str):
            file_path.write_text(content, encoding="utf-8")
        else:
            file_path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return file_path
    return _create_file


@pytest.fixture
def make_settings(lang_dir: Path):
    """Settings pointing at the test language directory."""
    def _make(**kwargs) -> CheckerSettings:
        kwargs.setdefault("lang_dir", lang_dir)
        return CheckerSettings(**kwargs)
    return _make
