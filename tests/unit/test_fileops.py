"""Unit tests for secure file operation helpers."""

from __future__ import annotations

import os
import stat
from pathlib import Path

from cuekit.utils.fileops import secure_atomic_write, secure_mkdir


class TestSecureMkdir:
    def test_creates_directory(self, tmp_path: Path) -> None:
        target = tmp_path / "subdir"
        secure_mkdir(target)
        assert target.is_dir()

    def test_sets_700_permissions(self, tmp_path: Path) -> None:
        target = tmp_path / "secure"
        secure_mkdir(target)
        mode = stat.S_IMODE(target.stat().st_mode)
        assert mode == 0o700

    def test_leaves_existing_directory_alone(self, tmp_path: Path) -> None:
        target = tmp_path / "shared"
        target.mkdir()
        target.chmod(0o755)
        secure_mkdir(target)
        mode = stat.S_IMODE(target.stat().st_mode)
        assert mode == 0o755

    def test_idempotent(self, tmp_path: Path) -> None:
        target = tmp_path / "idem"
        secure_mkdir(target)
        secure_mkdir(target)
        assert target.is_dir()


class TestSecureAtomicWrite:
    def test_writes_content(self, tmp_path: Path) -> None:
        target = tmp_path / "config.toml"
        secure_atomic_write(target, "[display]\n")
        assert target.read_text() == "[display]\n"

    def test_sets_600_permissions(self, tmp_path: Path) -> None:
        target = tmp_path / "config.toml"
        secure_atomic_write(target, "x = 1\n")
        mode = stat.S_IMODE(target.stat().st_mode)
        assert mode == 0o600

    def test_no_temp_files_left(self, tmp_path: Path) -> None:
        target = tmp_path / "config.toml"
        secure_atomic_write(target, "first")
        secure_atomic_write(target, "second")
        assert target.read_text() == "second"
        assert [p.name for p in tmp_path.iterdir()] == ["config.toml"]

    def test_atomic_no_partial_on_error(self, tmp_path: Path) -> None:
        target = tmp_path / "atomic.toml"
        secure_atomic_write(target, "original")

        class WriteError(Exception):
            pass

        def failing_fchmod(fd: int, mode: int) -> None:
            raise WriteError("simulated failure")

        original_fchmod = os.fchmod
        try:
            os.fchmod = failing_fchmod  # type: ignore[assignment]
            try:
                secure_atomic_write(target, "should not appear")
            except WriteError:
                pass
        finally:
            os.fchmod = original_fchmod

        assert target.read_text() == "original"
        assert [p.name for p in tmp_path.iterdir()] == ["atomic.toml"]
