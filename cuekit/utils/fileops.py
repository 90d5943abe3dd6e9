"""Secure file operations for configuration files."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def secure_mkdir(path: Path) -> None:
    """Create a config directory with 0o700 permissions (owner-only access).

    Parent directories are created as needed. An existing directory is
    left with its permissions unchanged unless it was just created.
    """
    existed = path.exists()
    path.mkdir(parents=True, exist_ok=True)
    if not existed:
        path.chmod(0o700)


def secure_atomic_write(path: Path, content: str) -> None:
    """Write *content* to *path* atomically with 0o600 permissions.

    The write goes to a temporary file in the same directory followed by
    a rename, so readers never see a half-written config.
    """
    secure_mkdir(path.parent)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=".tmp-", suffix=".toml")
    try:
        with open(fd, "w", encoding="utf-8") as f:
            os.fchmod(f.fileno(), 0o600)
            f.write(content)
        Path(tmp_path).replace(path)
    except BaseException:
        Path(tmp_path).unlink(missing_ok=True)
        raise
