"""Tests for AppImage extraction."""

from pathlib import Path

import pytest

from appimage_desktop.core.extract import (
    AppImageExtractor,
    extraction_directory,
)
from appimage_desktop.exceptions import (
    ExtractionFailedError,
    UnwritableTargetError,
)


class TestExtractionDirectory:
    """Tests for the temporary extraction directory context manager."""

    def test_created_inside_parent_and_removed(self, tmp_path: Path):
        """The directory exists inside the block and is gone afterwards."""
        with extraction_directory(tmp_path / "tmp") as work_dir:
            assert work_dir.is_dir()
            assert work_dir.parent == tmp_path / "tmp"
            (work_dir / "squashfs-root").mkdir()
            (work_dir / "squashfs-root" / "file").write_text("x")

        assert not work_dir.exists()

    def test_removed_on_error(self, tmp_path: Path):
        """An exception inside the block still cleans up."""
        with (
            pytest.raises(RuntimeError),
            extraction_directory(tmp_path) as work_dir,
        ):
            raise RuntimeError

        assert not work_dir.exists()

    def test_unique_per_call(self, tmp_path: Path):
        """Nested extractions never share a directory."""
        with (
            extraction_directory(tmp_path) as first,
            extraction_directory(tmp_path) as second,
        ):
            assert first != second

    def test_unwritable_parent(self, tmp_path: Path):
        """A parent that cannot be created raises UnwritableTargetError."""
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")

        with (
            pytest.raises(UnwritableTargetError),
            extraction_directory(blocker / "sub"),
        ):
            pass


class TestAppImageExtractor:
    """Tests for AppImageExtractor."""

    def test_extract_returns_squashfs_root(
        self, tmp_path: Path, fake_runner
    ):
        """Extraction runs the AppImage in the work dir."""
        appimage = tmp_path / "Tool.AppImage"
        appimage.write_bytes(b"x")
        appimage.chmod(0o755)

        root = AppImageExtractor(fake_runner).extract(appimage, tmp_path)

        assert root == tmp_path / "squashfs-root"
        assert fake_runner.calls == [
            ([str(appimage), "--appimage-extract"], tmp_path)
        ]

    def test_makes_appimage_executable(self, tmp_path: Path, fake_runner):
        """Non-executable AppImages are chmod'ed before running."""
        appimage = tmp_path / "Tool.AppImage"
        appimage.write_bytes(b"x")
        appimage.chmod(0o644)

        AppImageExtractor(fake_runner).extract(appimage, tmp_path)

        assert appimage.stat().st_mode & 0o111

    def test_non_zero_exit_includes_output(
        self, tmp_path: Path, fake_runner
    ):
        """A failing extraction raises with the captured output."""
        appimage = tmp_path / "Tool.AppImage"
        appimage.write_bytes(b"x")
        appimage.chmod(0o755)
        fake_runner.extract_returncode = 1
        fake_runner.extract_output = "squashfs: bad superblock"

        with pytest.raises(ExtractionFailedError) as exc_info:
            AppImageExtractor(fake_runner).extract(appimage, tmp_path)

        assert "bad superblock" in str(exc_info.value)
        assert exc_info.value.output == "squashfs: bad superblock"

    def test_missing_squashfs_root(self, tmp_path: Path, fake_runner):
        """A zero exit without squashfs-root is still a failure."""
        appimage = tmp_path / "Tool.AppImage"
        appimage.write_bytes(b"x")
        appimage.chmod(0o755)
        fake_runner.create_root = False

        with pytest.raises(ExtractionFailedError, match="squashfs-root"):
            AppImageExtractor(fake_runner).extract(appimage, tmp_path)
