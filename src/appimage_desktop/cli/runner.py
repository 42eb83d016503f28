"""CLI runner for appimage-desktop.

Routes parsed arguments to the install or removal service and turns
errors into messages and exit codes.
"""

import sys
from argparse import Namespace
from collections.abc import Sequence
from contextlib import nullcontext

from appimage_desktop import __version__
from appimage_desktop.config import ConfigManager
from appimage_desktop.core.install import (
    InstallService,
    display_install_result,
)
from appimage_desktop.core.remove import (
    RemoveService,
    display_removal_result,
)
from appimage_desktop.exceptions import AppImageDesktopError, UserAbortedError
from appimage_desktop.logger import (
    get_logger,
    temporary_console_level,
    update_logger_from_config,
)
from appimage_desktop.ui.prompts import Prompter

from .parser import CLIParser

logger = get_logger(__name__)


class CLIRunner:
    """CLI command runner and orchestrator."""

    def __init__(
        self,
        argv: Sequence[str] | None = None,
        prompter: Prompter | None = None,
    ) -> None:
        """Initialize CLI runner.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])
            prompter: Prompt seam handed to the install service

        """
        self.argv = argv
        self.prompter = prompter or Prompter()

    def run(self) -> None:
        """Run the CLI application.

        Exits with status 1 on any failure; argparse exits with 2 on usage
        errors.
        """
        args = CLIParser().parse_args(self.argv)

        if args.version:
            print(__version__)
            return

        config_manager = ConfigManager(config_dir=args.config_dir)
        update_logger_from_config(config_manager.load_global_config())

        verbosity = (
            temporary_console_level("DEBUG") if args.verbose else nullcontext()
        )
        try:
            with verbosity:
                self._execute(args, config_manager)
        except UserAbortedError as e:
            logger.debug("User aborted: %s", e)
            print("Aborted by user.")
            sys.exit(1)
        except AppImageDesktopError as e:
            logger.debug("Command failed: %s", e)
            print(f"❌ {e}")
            sys.exit(1)
        except KeyboardInterrupt:
            print("\n⏹️  Operation cancelled by user")
            sys.exit(1)

    def _execute(self, args: Namespace, config_manager: ConfigManager) -> None:
        """Execute install or removal for the parsed arguments."""
        if args.remove:
            service = RemoveService.create_default(config_manager)
            display_removal_result(service.remove(args.appimage))
            return

        install_service = InstallService.create_default(
            config_manager, self.prompter
        )
        display_install_result(install_service.install(args.appimage))
