"""Unit tests for the cue check and cue show CLI commands."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from cuekit.commands.cue import EXIT_INVALID, EXIT_NOTHING_FOUND, EXIT_SUCCESS, cli
from cuekit.commands.cue.check import collect_cue_files

BASIC_CUE = """\
PERFORMER "Test Artist"
TITLE "Test Album"
FILE "album.flac" WAVE
  TRACK 01 AUDIO
    TITLE "Track One"
    INDEX 01 00:00:00
  TRACK 02 AUDIO
    TITLE "Track Two"
    INDEX 01 01:00:00
"""

DUPLICATE_FILE_CUE = """\
FILE "album.flac" WAVE
FILE "album.flac" WAVE
"""


def test_cue_group_help() -> None:
    """Verify the cue command group is registered and shows help."""
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "CUE sheet commands" in result.output
    assert "check" in result.output
    assert "show" in result.output


def test_check_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--help"])
    assert result.exit_code == 0
    assert "--recursive" in result.output
    assert "--failures-only" in result.output


# --- cue check ---


def test_check_valid_directory(tmp_path: Path) -> None:
    albums = tmp_path / "albums"
    albums.mkdir()
    (albums / "album.cue").write_text(BASIC_CUE)
    (albums / "album.flac").touch()
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(albums)])
    assert result.exit_code == EXIT_SUCCESS
    assert "OK" in result.output
    assert "album.cue" in result.output
    assert "(2 tracks)" in result.output
    assert "1 ok, 0 failed" in result.output


def test_check_invalid_file(tmp_path: Path) -> None:
    bad = tmp_path / "bad.cue"
    bad.write_text(DUPLICATE_FILE_CUE)
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(bad)])
    assert result.exit_code == EXIT_INVALID
    assert "FAILED" in result.output
    assert "line 2:" in result.output
    assert "field already set: WAVE" in result.output
    assert "0 ok, 1 failed" in result.output


def test_check_mixed_results(tmp_path: Path) -> None:
    (tmp_path / "a.cue").write_text(BASIC_CUE)
    (tmp_path / "b.cue").write_text("UNSUPPORTED foo bar\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(tmp_path / "a.cue"), str(tmp_path / "b.cue")])
    assert result.exit_code == EXIT_INVALID
    assert "unexpected command: UNSUPPORTED" in result.output
    assert "1 ok, 1 failed" in result.output


def test_check_failures_only(tmp_path: Path) -> None:
    (tmp_path / "a.cue").write_text(BASIC_CUE)
    runner = CliRunner()
    result = runner.invoke(cli, ["check", "--failures-only", str(tmp_path / "a.cue")])
    assert result.exit_code == EXIT_SUCCESS
    assert "(2 tracks)" not in result.output


def test_check_nothing_found(tmp_path: Path) -> None:
    empty = tmp_path / "empty"
    empty.mkdir()
    runner = CliRunner()
    result = runner.invoke(cli, ["check", str(empty)])
    assert result.exit_code == EXIT_NOTHING_FOUND
    assert "No cue sheets found" in result.output


def test_check_recursive(tmp_path: Path) -> None:
    music = tmp_path / "music"
    (music / "artist" / "album").mkdir(parents=True)
    (music / "artist" / "album" / "album.cue").write_text(BASIC_CUE)
    runner = CliRunner()

    flat = runner.invoke(cli, ["check", str(music)])
    assert flat.exit_code == EXIT_NOTHING_FOUND

    deep = runner.invoke(cli, ["check", "-r", str(music)])
    assert deep.exit_code == EXIT_SUCCESS
    assert "1 ok, 0 failed" in deep.output


def test_collect_cue_files(tmp_path: Path) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "b.cue").touch()
    (tmp_path / "A.CUE").touch()
    (tmp_path / "notes.txt").touch()
    (tmp_path / "sub" / "c.cue").touch()
    explicit = tmp_path / "notes.txt"

    flat = collect_cue_files((tmp_path, explicit), recursive=False, suffixes=[".cue"])
    assert [p.name for p in flat] == ["A.CUE", "b.cue", "notes.txt"]

    deep = collect_cue_files((tmp_path, tmp_path / "b.cue"), recursive=True, suffixes=[".cue"])
    assert [p.name for p in deep] == ["A.CUE", "b.cue", "c.cue"]


# --- cue show ---


def test_show_valid_sheet(tmp_path: Path) -> None:
    cue_file = tmp_path / "album.cue"
    cue_file.write_text(BASIC_CUE)
    runner = CliRunner()
    result = runner.invoke(cli, ["show", str(cue_file)])
    assert result.exit_code == 0
    assert "Test Artist" in result.output
    assert "Test Album" in result.output
    assert "album.flac" in result.output
    assert "Track One" in result.output
    assert "01:00:00" in result.output
    assert "2646000" in result.output  # 60 s * 44100


def test_show_invalid_sheet(tmp_path: Path) -> None:
    cue_file = tmp_path / "album.cue"
    cue_file.write_text('FILE "album.flac" WAVE\n')
    runner = CliRunner()
    result = runner.invoke(cli, ["show", str(cue_file)])
    assert result.exit_code == EXIT_INVALID
    assert "missing tracks" in result.output
