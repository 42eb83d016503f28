"""InstallService: registers an AppImage with the desktop environment.

The install is a straight-line sequence; the first failure raises and
leaves already completed steps (e.g. the symlink) in place:

1. validate the AppImage path
2. choose a command name, resolving conflicts interactively
3. create the launcher symlink
4. extract the AppImage into a temporary directory
5. let the user pick an icon from the extraction root
6. let the user pick a category from the installed desktop entries
7. write the desktop entry
8. save the install record
"""

from datetime import UTC, datetime
from pathlib import Path

from appimage_desktop.config import ConfigManager, InstallRecordManager
from appimage_desktop.constants import RECORD_VERSION
from appimage_desktop.core.categories import collect_categories
from appimage_desktop.core.desktop_entry import DesktopEntryManager
from appimage_desktop.core.extract import (
    AppImageExtractor,
    extraction_directory,
)
from appimage_desktop.core.icon import find_icon_candidates, install_icon
from appimage_desktop.core.naming import (
    app_name_from_path,
    sanitize_command_name,
)
from appimage_desktop.core.process import CommandRunner
from appimage_desktop.core.symlink import SymlinkManager
from appimage_desktop.exceptions import (
    NoCategoriesFoundError,
    NoIconsFoundError,
    NotFoundError,
    UserAbortedError,
)
from appimage_desktop.logger import get_logger
from appimage_desktop.types import (
    DesktopEntryRecord,
    GlobalConfig,
    InstallRecord,
    InstallResult,
)
from appimage_desktop.ui.prompts import Prompter

logger = get_logger(__name__)


def resolve_appimage(appimage_path: Path) -> Path:
    """Return the absolute path of an existing AppImage file.

    Raises:
        NotFoundError: If the path is not an existing regular file

    """
    resolved = appimage_path.expanduser().resolve()
    if not resolved.is_file():
        raise NotFoundError(str(appimage_path))
    return resolved


class InstallService:
    """Service that performs the interactive install of one AppImage."""

    def __init__(
        self,
        global_config: GlobalConfig,
        records: InstallRecordManager,
        prompter: Prompter,
        runner: CommandRunner | None = None,
    ) -> None:
        """Create a new InstallService.

        Args:
            global_config: Parsed global configuration
            records: Install record manager
            prompter: Prompt seam for all user interaction
            runner: External process runner (created from config if None)

        """
        self.global_config = global_config
        self.records = records
        self.prompter = prompter

        directory = global_config["directory"]
        integration = global_config["integration"]
        self.runner = runner or CommandRunner(
            integration["privilege_command"]
        )
        self.symlinks = SymlinkManager(directory["bin"], self.runner)
        self.extractor = AppImageExtractor(self.runner)
        self.desktop_entries = DesktopEntryManager(
            directory["applications"],
            self.runner,
            refresh_database=integration["refresh_database"],
        )

    @classmethod
    def create_default(
        cls,
        config_manager: ConfigManager | None = None,
        prompter: Prompter | None = None,
    ) -> "InstallService":
        """Create InstallService with default dependencies."""
        config_mgr = config_manager or ConfigManager()
        return cls(
            global_config=config_mgr.load_global_config(),
            records=config_mgr.records,
            prompter=prompter or Prompter(),
        )

    def install(self, appimage_path: Path) -> InstallResult:
        """Register an AppImage with the desktop environment.

        Args:
            appimage_path: Path to the AppImage

        Returns:
            What was created

        Raises:
            AppImageDesktopError: Any subclass, on the first failing step

        """
        appimage = resolve_appimage(appimage_path)
        app_name = app_name_from_path(appimage)
        logger.debug("Installing %s from %s", app_name, appimage)

        command_name, replace_existing = self.choose_command_name(app_name)
        symlink_path = self.symlinks.create(
            command_name, appimage, replace_existing=replace_existing
        )

        directory = self.global_config["directory"]
        with extraction_directory(directory["tmp"]) as work_dir:
            extract_root = self.extractor.extract(appimage, work_dir)
            icon_path = self.select_icon(extract_root, app_name)

        category = self.select_category()

        desktop_file = self.desktop_entries.write(
            DesktopEntryRecord(
                name=app_name,
                exec_command=command_name,
                icon_path=icon_path,
                category=category,
            )
        )

        result = InstallResult(
            app_name=app_name,
            command_name=command_name,
            symlink_path=symlink_path,
            icon_path=icon_path,
            desktop_file=desktop_file,
            category=category,
        )
        self._save_record(appimage, result)
        return result

    def choose_command_name(self, app_name: str) -> tuple[str, bool]:
        """Ask for the launcher command name until it is usable.

        Args:
            app_name: AppImage base name used for the suggestion

        Returns:
            Tuple of (command_name, replace_existing)

        Raises:
            UserAbortedError: If the user refuses both a new name and
                overriding the existing file

        """
        default_name = sanitize_command_name(app_name)
        if default_name:
            self.prompter.show(f"Suggested command name: {default_name}")

        while True:
            answer = self.prompter.ask(
                "Enter command name (press Enter to use suggested name): "
            )
            command_name = (
                sanitize_command_name(answer) if answer else default_name
            )
            if not command_name:
                self.prompter.show(
                    "Command name must contain at least one letter or digit."
                )
                continue

            existing = self.runner.which(command_name)
            if existing:
                self.prompter.show(
                    f"Warning: Command '{command_name}' already exists "
                    f"at: {existing}"
                )
                if self.prompter.confirm(
                    "Would you like to try a different name?", default=True
                ):
                    continue

            link = self.symlinks.link_path(command_name)
            if not self.symlinks.occupied(link):
                return command_name, False

            self.prompter.show(f"Warning: {link} already exists.")
            target = self.symlinks.read_target(link)
            if target:
                self.prompter.show(f"It points to: {target}")
            if self.prompter.confirm(
                "Do you want to override it?", default=False
            ):
                return command_name, True
            if self.prompter.confirm(
                "Would you like to try a different name?", default=True
            ):
                continue
            raise UserAbortedError("")

    def select_icon(self, extract_root: Path, app_name: str) -> Path:
        """Let the user pick an icon and install it.

        Raises:
            NoIconsFoundError: If the extraction root holds no images
            UnwritableTargetError: If the icon cannot be copied

        """
        candidates = find_icon_candidates(extract_root)
        if not candidates:
            msg = "No image files found in the AppImage root"
            raise NoIconsFoundError(msg, str(extract_root))

        index = self.prompter.choose(
            "Choose icon:", [path.name for path in candidates]
        )
        return install_icon(
            candidates[index],
            self.global_config["directory"]["icons"],
            app_name,
        )

    def select_category(self) -> str:
        """Let the user pick a category from installed desktop entries.

        Raises:
            NoCategoriesFoundError: If no categories were discovered

        """
        category_dirs = self.global_config["integration"]["category_dirs"]
        categories = collect_categories(category_dirs)
        if not categories:
            searched = ", ".join(str(path) for path in category_dirs)
            msg = f"No desktop entries with categories in: {searched}"
            raise NoCategoriesFoundError(msg)

        index = self.prompter.choose("Choose a category:", categories)
        return categories[index]

    def _save_record(self, appimage: Path, result: InstallResult) -> None:
        record = InstallRecord(
            config_version=RECORD_VERSION,
            app_name=result.app_name,
            appimage_path=str(appimage),
            command_name=result.command_name,
            symlink_path=str(result.symlink_path),
            desktop_file=str(result.desktop_file),
            icon_path=str(result.icon_path),
            category=result.category,
            installed_date=datetime.now(tz=UTC).isoformat(),
        )
        try:
            self.records.save_record(record)
        except ValueError as e:
            logger.warning("Install record not saved: %s", e)


def display_install_result(result: InstallResult) -> None:
    """Log a summary of a completed install."""
    logger.info("✅ %s installed", result.app_name)
    logger.info("   Command:  %s", result.command_name)
    logger.info("   Category: %s", result.category)
    logger.info("   Entry:    %s", result.desktop_file)
