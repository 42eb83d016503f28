"""Install and remove a stand-in AppImage with real processes.

The AppImage is a shell script that understands ``--appimage-extract``,
so extraction runs through the real CommandRunner.
"""

import shutil
import stat
from pathlib import Path

import pytest

from appimage_desktop.core.install import InstallService
from appimage_desktop.core.remove import RemoveService

FAKE_APPIMAGE = """#!/bin/sh
if [ "$1" = "--appimage-extract" ]; then
    mkdir -p squashfs-root/usr/share/icons
    printf 'png' > squashfs-root/usr/share/icons/tool.png
    ln -s usr/share/icons/tool.png squashfs-root/tool.png
    printf '<svg/>' > squashfs-root/tool.svg
    echo "squashfs-root/AppRun"
    exit 0
fi
exit 1
"""

pytestmark = pytest.mark.skipif(
    shutil.which("sh") is None, reason="needs a POSIX shell"
)


@pytest.fixture
def script_appimage(tmp_path: Path, global_config) -> Path:
    """Return a non-executable script posing as an AppImage."""
    global_config["directory"]["bin"].mkdir()
    path = tmp_path / "Apps" / "Fancy Tool.AppImage"
    path.parent.mkdir()
    path.write_text(FAKE_APPIMAGE, encoding="utf-8")
    path.chmod(0o644)
    return path


def test_install_then_remove(
    script_appimage, global_config, records, scripted_prompter
):
    """A full install leaves nothing behind after removal."""
    global_config["integration"]["privilege_command"] = ""
    installer = InstallService(
        global_config, records, scripted_prompter(["", "2", "3"])
    )

    result = installer.install(script_appimage)

    directory = global_config["directory"]
    assert script_appimage.stat().st_mode & stat.S_IXUSR
    assert result.command_name == "fancytool"
    assert result.symlink_path.resolve() == script_appimage.resolve()
    assert result.icon_path == directory["icons"] / "Fancy Tool.svg"
    assert result.icon_path.read_text() == "<svg/>"
    assert result.category == "Utility"
    assert list(directory["tmp"].iterdir()) == []

    removal = RemoveService(global_config, records).remove(script_appimage)

    assert removal.warnings == []
    assert not result.symlink_path.is_symlink()
    assert not result.desktop_file.exists()
    assert not result.icon_path.exists()
    assert records.load_record("Fancy Tool") is None
    assert script_appimage.exists()


def test_symlinked_icon_is_copied(
    script_appimage, global_config, records, scripted_prompter
):
    """Choosing a root-level symlink copies the file it points to."""
    installer = InstallService(
        global_config, records, scripted_prompter(["", "1", "1"])
    )

    result = installer.install(script_appimage)

    assert result.icon_path.name == "Fancy Tool.png"
    assert not result.icon_path.is_symlink()
    assert result.icon_path.read_text() == "png"
