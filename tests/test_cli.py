import os
from pathlib import Path

import pytest

from pave.cli import build_parser, main
from pave.paths import get_bin_dir


@pytest.fixture
def home(tmp_path, monkeypatch):
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    for variable in ("HOME", "USERPROFILE"):
        monkeypatch.setenv(variable, str(home_dir))
    monkeypatch.setenv("XDG_DATA_HOME", str(home_dir / "data"))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home_dir / "config"))
    monkeypatch.setenv("APPDATA", str(home_dir / "appdata"))
    monkeypatch.setenv("PATH", "")
    return home_dir


@pytest.fixture
def executable(tmp_path):
    target = tmp_path / "tool-bin"
    target.write_text("#!/bin/sh\necho hi\n")
    return target


def test_no_arguments_prints_help(home, capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "usage: pave" in out
    assert "link" in out


def test_version_flag_prints_version(home, capsys):
    assert main(["-V"]) == 0
    assert capsys.readouterr().out == "dev\n"


def test_link_requires_name(home, capsys):
    assert main(["link", "--path", "/tmp"]) == 1
    err = capsys.readouterr().err
    assert "Error:" in err
    assert "--name" in err


def test_unlink_requires_name(home, capsys):
    assert main(["unlink"]) == 1
    assert "--name" in capsys.readouterr().err


def test_unknown_command_fails(home, capsys):
    assert main(["bogus"]) == 1
    assert "Error:" in capsys.readouterr().err


def test_list_empty(home, capsys):
    assert main(["list"]) == 0
    assert capsys.readouterr().out == "No links found\n"


def test_status_all_empty(home, capsys):
    assert main(["status"]) == 0
    assert capsys.readouterr().out == "No links found\n"


def test_status_unknown_name(home, capsys):
    assert main(["status", "--name", "ghost"]) == 0
    assert capsys.readouterr().out == 'Link "ghost" not found\n'


def test_link_dry_run_changes_nothing(home, executable, capsys):
    assert main(["--dry-run", "link", "--name", "tool", "--path", str(executable)]) == 0
    out = capsys.readouterr().out
    assert out == f"[DRY-RUN] Would link tool -> {executable}\n"
    assert main(["list"]) == 0
    assert capsys.readouterr().out == "No links found\n"


def test_verbose_after_subcommand(home, executable, capsys):
    assert main(["link", "--name", "tool", "--path", str(executable), "--verbose", "--dry-run"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == f"Linking tool -> {executable} (dry-run=true)"
    assert lines[1] == f"[DRY-RUN] Would link tool -> {executable}"


def test_unlink_dry_run(home, capsys):
    assert main(["unlink", "--name", "tool", "--dry-run"]) == 0
    assert capsys.readouterr().out == "[DRY-RUN] Would unlink tool\n"


def test_link_missing_target_fails(home, tmp_path, capsys):
    missing = tmp_path / "nope"
    assert main(["link", "--name", "tool", "--path", str(missing)]) == 1
    err = capsys.readouterr().err
    assert "failed to create link" in err
    assert "target path does not exist" in err


def test_link_then_list_and_status(home, executable, capsys):
    assert main(["link", "--name", "tool", "--path", str(executable)]) == 0
    capsys.readouterr()

    assert main(["list"]) == 0
    out = capsys.readouterr().out
    assert "Managed links:" in out
    assert f"  tool -> {os.path.abspath(executable)} [valid]" in out

    assert main(["status", "--name", "tool"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert "Name: tool" in lines
    assert f"Path: {os.path.abspath(executable)}" in lines
    assert "Status: valid" in lines


def test_status_all_shows_broken_target(home, executable, capsys):
    assert main(["link", "--name", "tool", "--path", str(executable)]) == 0
    executable.unlink()
    capsys.readouterr()
    assert main(["status"]) == 0
    out = capsys.readouterr().out
    assert "Link status:" in out
    assert out.rstrip().endswith("[broken]")
    assert "  tool: " in out


def test_unlink_removes_link(home, executable, capsys):
    assert main(["link", "--name", "tool", "--path", str(executable)]) == 0
    link_file = Path(get_bin_dir()) / "tool"
    assert link_file.is_symlink()
    assert main(["--verbose", "unlink", "--name", "tool"]) == 0
    out = capsys.readouterr().out
    assert "Link removed successfully" in out
    assert not link_file.exists() and not link_file.is_symlink()
    assert main(["list"]) == 0
    assert capsys.readouterr().out == "No links found\n"


def test_parser_defaults_and_flags():
    parser = build_parser()
    args = parser.parse_args(["--verbose", "status"])
    assert args.verbose is True
    assert args.dry_run is False
    assert args.name == ""
    assert args.command == "status"

    args = parser.parse_args(["link", "--name", "a", "--path", "b", "--dry-run"])
    assert args.dry_run is True
    assert args.verbose is False
    assert (args.name, args.path) == ("a", "b")