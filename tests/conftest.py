"""Pytest configuration and fixtures for appimage-desktop tests.

Shared fixtures:
- A GlobalConfig whose every directory lives under tmp_path
- FakeRunner, a CommandRunner stand-in that simulates AppImage extraction
- A scripted Prompter factory that feeds canned answers and records output
"""

import logging
import subprocess
from collections.abc import Callable, Sequence
from pathlib import Path

import pytest

from appimage_desktop.config import InstallRecordManager
from appimage_desktop.constants import APPIMAGE_EXTRACT_DIR, LOG_ROOT_NAME
from appimage_desktop.core.process import CommandRunner
from appimage_desktop.logger import clear_logger_state, setup_logging
from appimage_desktop.types import GlobalConfig
from appimage_desktop.ui.prompts import Prompter


@pytest.fixture(autouse=True)
def enable_log_propagation():
    """Reset logging and enable propagation for every test.

    Handlers are rebuilt so the console handler writes to the stream of
    the current test, and propagation lets caplog see every record even
    though the root ``appimage_desktop`` logger has propagate=False.
    """
    clear_logger_state()
    setup_logging(enable_file_logging=False)

    original_propagation = {}
    for name in list(logging.Logger.manager.loggerDict.keys()):
        if name.startswith(LOG_ROOT_NAME):
            logger = logging.getLogger(name)
            original_propagation[name] = logger.propagate
            logger.propagate = True

    yield

    for name, propagate_value in original_propagation.items():
        logging.getLogger(name).propagate = propagate_value
    clear_logger_state()


# =============================================================================
# Process Fakes
# =============================================================================


class FakeRunner(CommandRunner):
    """CommandRunner that records calls instead of spawning processes.

    Running ``<appimage> --appimage-extract`` creates ``squashfs-root`` in
    the working directory and fills it with ``icons``, mimicking the
    AppImage runtime.
    """

    def __init__(self) -> None:
        """Initialize with a successful extraction of one PNG icon."""
        super().__init__("sudo")
        self.icons: list[str] = ["app.png"]
        self.extract_returncode = 0
        self.extract_output = ""
        self.create_root = True
        self.privileged_returncode = 0
        self.which_results: dict[str, str] = {}
        self.calls: list[tuple[list[str], Path | None]] = []
        self.privileged_calls: list[list[str]] = []

    def run(
        self, args: Sequence[str], cwd: Path | None = None
    ) -> subprocess.CompletedProcess[str]:
        """Record the call and simulate extraction when asked to."""
        args = list(args)
        self.calls.append((args, cwd))
        if args[-1:] == ["--appimage-extract"]:
            if self.create_root and cwd is not None:
                root = cwd / APPIMAGE_EXTRACT_DIR
                root.mkdir()
                for icon in self.icons:
                    (root / icon).write_bytes(b"image-data")
            return subprocess.CompletedProcess(
                args,
                self.extract_returncode,
                stdout=self.extract_output,
                stderr="",
            )
        return subprocess.CompletedProcess(args, 0, stdout="", stderr="")

    def run_privileged(
        self, args: Sequence[str]
    ) -> subprocess.CompletedProcess[str]:
        """Record the privileged call without running it."""
        self.privileged_calls.append(list(args))
        return subprocess.CompletedProcess(
            list(args), self.privileged_returncode, stdout="", stderr="denied"
        )

    def which(self, name: str) -> str | None:
        """Return a configured PATH hit instead of searching PATH."""
        return self.which_results.get(name)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Return a FakeRunner with default behavior."""
    return FakeRunner()


# =============================================================================
# Configuration
# =============================================================================


@pytest.fixture
def category_dir(tmp_path: Path) -> Path:
    """Return a directory holding desktop entries with known categories."""
    directory = tmp_path / "system-applications"
    directory.mkdir()
    (directory / "editor.desktop").write_text(
        "[Desktop Entry]\nName=Editor\nCategories=Utility;TextEditor;\n",
        encoding="utf-8",
    )
    (directory / "game.desktop").write_text(
        "[Desktop Entry]\nName=Game\nCategories=Game;Utility;\n",
        encoding="utf-8",
    )
    return directory


@pytest.fixture
def global_config(tmp_path: Path, category_dir: Path) -> GlobalConfig:
    """Return a global config with all directories under tmp_path."""
    return {
        "config_version": "1.0.0",
        "log_level": "DEBUG",
        "console_log_level": "INFO",
        "directory": {
            "applications": tmp_path / "applications",
            "icons": tmp_path / "icons",
            "bin": tmp_path / "bin",
            "records": tmp_path / "records",
            "logs": tmp_path / "logs",
            "tmp": tmp_path / "tmp",
        },
        "integration": {
            "category_dirs": [category_dir],
            "privilege_command": "sudo",
            "refresh_database": False,
        },
    }


@pytest.fixture
def records(global_config: GlobalConfig) -> InstallRecordManager:
    """Return an install record manager for the temporary records dir."""
    return InstallRecordManager(global_config["directory"]["records"])


@pytest.fixture
def appimage(tmp_path: Path, global_config: GlobalConfig) -> Path:
    """Return an AppImage file named "My Cool App.AppImage".

    The bin directory is created as well so symlinks can be written.
    """
    global_config["directory"]["bin"].mkdir()
    path = tmp_path / "downloads" / "My Cool App.AppImage"
    path.parent.mkdir()
    path.write_bytes(b"\x7fELF fake appimage")
    path.chmod(0o755)
    return path


# =============================================================================
# Prompts
# =============================================================================


class ScriptedPrompter(Prompter):
    """Prompter fed from a list of answers that records everything shown.

    Running out of answers behaves like Ctrl-D.
    """

    def __init__(self, answers: Sequence[str]) -> None:
        """Initialize with the answers to give, in order."""
        self.answers = list(answers)
        self.prompts: list[str] = []
        self.output: list[str] = []
        super().__init__(self._next_answer, self.output.append)

    def _next_answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def transcript(self) -> str:
        """Return all shown lines and prompts joined by newlines."""
        return "\n".join([*self.output, *self.prompts])


@pytest.fixture
def scripted_prompter() -> Callable[[Sequence[str]], ScriptedPrompter]:
    """Return a factory for ScriptedPrompter instances."""
    return ScriptedPrompter
