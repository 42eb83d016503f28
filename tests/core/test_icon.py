"""Tests for icon discovery and installation."""

from pathlib import Path

import pytest

from appimage_desktop.core.icon import (
    find_icon_candidates,
    find_installed_icons,
    install_icon,
)
from appimage_desktop.exceptions import UnwritableTargetError


@pytest.fixture
def extract_root(tmp_path: Path) -> Path:
    """Return a fake squashfs-root with assorted files."""
    root = tmp_path / "squashfs-root"
    (root / "usr" / "share" / "icons").mkdir(parents=True)
    (root / "usr" / "share" / "icons" / "real.svg").write_text("<svg/>")
    (root / "zeta.png").write_bytes(b"png")
    (root / "Alpha.PNG").write_bytes(b"png")
    (root / "AppRun").write_text("#!/bin/sh\n")
    (root / "tool.desktop").write_text("[Desktop Entry]\n")
    (root / ".DirIcon").symlink_to("zeta.png")
    (root / "linked.svg").symlink_to("usr/share/icons/real.svg")
    (root / "dangling.png").symlink_to("missing.png")
    return root


def test_candidates_are_root_level_images(extract_root):
    """Only images directly in the root are offered, sorted by name."""
    names = [path.name for path in find_icon_candidates(extract_root)]
    assert names == ["Alpha.PNG", "linked.svg", "zeta.png"]


def test_candidates_empty(tmp_path):
    """A root without images yields no candidates."""
    (tmp_path / "AppRun").write_text("")
    assert find_icon_candidates(tmp_path) == []


def test_install_icon_keeps_extension(extract_root, tmp_path):
    """The icon is copied as <app_name><ext> into a created directory."""
    icons_dir = tmp_path / "share" / "icons"

    dest = install_icon(extract_root / "linked.svg", icons_dir, "My App")

    assert dest == icons_dir / "My App.svg"
    assert dest.is_absolute()
    assert not dest.is_symlink()
    assert dest.read_text() == "<svg/>"


def test_install_icon_overwrites(extract_root, tmp_path):
    """Reinstalling replaces the previous icon."""
    icons_dir = tmp_path / "icons"
    icons_dir.mkdir()
    (icons_dir / "App.png").write_bytes(b"old")

    install_icon(extract_root / "zeta.png", icons_dir, "App")

    assert (icons_dir / "App.png").read_bytes() == b"png"


def test_install_icon_unwritable(extract_root, tmp_path):
    """Failure to create the icons directory raises."""
    blocker = tmp_path / "blocker"
    blocker.write_text("file")

    with pytest.raises(UnwritableTargetError):
        install_icon(extract_root / "zeta.png", blocker / "icons", "App")


def test_find_installed_icons_matches_stem(tmp_path):
    """Icons named <app>.<ext> match; longer names do not."""
    for name in ("App.png", "App.svg", "App Extra.png", "Other.png"):
        (tmp_path / name).write_text("")

    found = find_installed_icons(tmp_path, "App")

    assert found == [tmp_path / "App.png", tmp_path / "App.svg"]


def test_find_installed_icons_missing_dir(tmp_path):
    """A missing icons directory yields nothing."""
    assert find_installed_icons(tmp_path / "missing", "App") == []
