"""Tests for the CLI argument parser."""

from pathlib import Path

import pytest

from appimage_desktop.cli.parser import CLIParser


def test_install_arguments():
    """A bare path means install."""
    args = CLIParser().parse_args(["Tool.AppImage"])

    assert args.appimage == Path("Tool.AppImage")
    assert args.remove is False
    assert args.verbose is False
    assert args.config_dir is None


def test_remove_flag_after_path():
    """--remove follows the path as in the classic usage line."""
    args = CLIParser().parse_args(["Tool.AppImage", "--remove"])

    assert args.remove is True


def test_remove_flag_before_path():
    """Option order does not matter."""
    args = CLIParser().parse_args(["--remove", "-v", "Tool.AppImage"])

    assert args.remove is True
    assert args.verbose is True
    assert args.appimage == Path("Tool.AppImage")


def test_config_dir():
    """--config-dir is parsed as a Path."""
    args = CLIParser().parse_args(
        ["--config-dir", "/tmp/conf", "Tool.AppImage"]
    )

    assert args.config_dir == Path("/tmp/conf")


def test_missing_path_is_usage_error(capsys):
    """Without a path argparse exits with status 2 and prints usage."""
    with pytest.raises(SystemExit) as exc_info:
        CLIParser().parse_args([])

    assert exc_info.value.code == 2
    assert "appimage" in capsys.readouterr().err


def test_version_without_path():
    """--version needs no path."""
    args = CLIParser().parse_args(["--version"])

    assert args.version is True
    assert args.appimage is None


def test_unknown_option(capsys):
    """Unknown options are usage errors."""
    with pytest.raises(SystemExit) as exc_info:
        CLIParser().parse_args(["Tool.AppImage", "--purge"])

    assert exc_info.value.code == 2
    assert "--purge" in capsys.readouterr().err
