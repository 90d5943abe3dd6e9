"""Shared pytest fixtures."""

from __future__ import annotations

import shutil
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from collections.abc import Generator

    from cuekit.config import Config


VALID_CUE = """\
REM GENRE "Heavy Metal"
REM DATE 1986
PERFORMER "Sample Album Artist"
TITLE "Sample Album Title"
FILE "sample.flac" WAVE
  TRACK 01 AUDIO
    TITLE "First Song"
    INDEX 01 00:01:00
  TRACK 02 AUDIO
    TITLE "Second Song"
    INDEX 01 01:00:00
"""


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files."""
    path = Path(tempfile.mkdtemp())
    try:
        yield path
    finally:
        shutil.rmtree(path, ignore_errors=True)


@pytest.fixture
def sample_config(temp_dir: Path) -> Path:
    """Create a sample config file."""
    config_path = temp_dir / "config.toml"
    config_path.write_text("""[display]
colored_output = false

[check]
recursive = true
suffixes = [".cue", ".CUE"]
""")
    return config_path


@pytest.fixture
def write_cue(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing cue sheet text to a file under tmp_path."""

    def _write(content: str, name: str = "test.cue", encoding: str = "utf-8") -> Path:
        cue_file = tmp_path / name
        cue_file.parent.mkdir(parents=True, exist_ok=True)
        cue_file.write_text(content, encoding=encoding)
        return cue_file

    return _write


@pytest.fixture
def valid_cue_text() -> str:
    """A complete, valid two-track cue sheet."""
    return VALID_CUE


@pytest.fixture
def mock_config() -> Config:
    """Create a Config object for testing."""
    from cuekit.config import Config

    return Config(colored_output=False, recursive=False)
