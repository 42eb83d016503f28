"""AppImage self-extraction.

Runs ``<appimage> --appimage-extract`` inside a fresh temporary directory
and hands back the ``squashfs-root`` directory it produces.
"""

import os
import shutil
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from appimage_desktop.constants import (
    APPIMAGE_EXTRACT_DIR,
    APPIMAGE_EXTRACT_FLAG,
    EXECUTABLE_MODE,
    TEMP_DIR_PREFIX,
)
from appimage_desktop.core.process import CommandRunner
from appimage_desktop.exceptions import (
    ExtractionFailedError,
    UnwritableTargetError,
)
from appimage_desktop.logger import get_logger

logger = get_logger(__name__)


@contextmanager
def extraction_directory(parent: Path) -> Iterator[Path]:
    """Yield a uniquely named temporary directory and remove it afterwards.

    Removal is best-effort; failures are ignored.

    Args:
        parent: Directory in which to create the temporary directory

    Raises:
        UnwritableTargetError: If the directory cannot be created

    """
    try:
        parent.mkdir(parents=True, exist_ok=True)
        work_dir = Path(tempfile.mkdtemp(prefix=TEMP_DIR_PREFIX, dir=parent))
    except OSError as e:
        msg = f"Cannot create temporary directory: {e}"
        raise UnwritableTargetError(msg, str(parent)) from e

    logger.debug("Created extraction directory: %s", work_dir)
    try:
        yield work_dir
    finally:
        shutil.rmtree(work_dir, ignore_errors=True)
        logger.debug("Cleaned up extraction directory: %s", work_dir)


class AppImageExtractor:
    """Extracts AppImage contents with the bundle's own runtime."""

    def __init__(self, runner: CommandRunner) -> None:
        self.runner = runner

    def make_executable(self, appimage_path: Path) -> None:
        """Set the executable bits if the AppImage lacks them.

        Raises:
            ExtractionFailedError: If permissions cannot be changed

        """
        if os.access(appimage_path, os.X_OK):
            return

        logger.info("Making AppImage executable...")
        try:
            appimage_path.chmod(EXECUTABLE_MODE)
        except OSError as e:
            msg = f"Failed to make AppImage executable: {e}"
            raise ExtractionFailedError(msg, str(appimage_path)) from e

    def extract(self, appimage_path: Path, work_dir: Path) -> Path:
        """Extract the AppImage into work_dir.

        Args:
            appimage_path: Absolute AppImage path
            work_dir: Empty directory used as the working directory

        Returns:
            Path to the extracted ``squashfs-root`` directory

        Raises:
            ExtractionFailedError: If the command fails or produces no
                ``squashfs-root`` directory

        """
        logger.info("📦 Extracting AppImage contents...")
        self.make_executable(appimage_path)

        try:
            result = self.runner.run(
                [str(appimage_path), APPIMAGE_EXTRACT_FLAG], cwd=work_dir
            )
        except OSError as e:
            msg = f"Cannot run AppImage: {e}"
            raise ExtractionFailedError(msg, str(appimage_path)) from e

        output = "\n".join(
            part for part in (result.stdout, result.stderr) if part
        )
        if result.returncode != 0:
            msg = f"Extraction exited with code {result.returncode}"
            raise ExtractionFailedError(msg, str(appimage_path), output)

        extract_root = work_dir / APPIMAGE_EXTRACT_DIR
        if not extract_root.is_dir():
            msg = (
                "Extraction appeared to succeed but "
                f"{APPIMAGE_EXTRACT_DIR} directory not found"
            )
            raise ExtractionFailedError(msg, str(appimage_path), output)

        logger.debug("AppImage extracted to %s", extract_root)
        return extract_root
