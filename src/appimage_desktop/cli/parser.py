"""CLI argument parser for appimage-desktop."""

import argparse
from argparse import Namespace
from collections.abc import Sequence
from pathlib import Path


class CLIParser:
    """Command-line argument parser for appimage-desktop."""

    def parse_args(self, argv: Sequence[str] | None = None) -> Namespace:
        """Parse command-line arguments.

        Args:
            argv: Arguments to parse (defaults to sys.argv[1:])

        Returns:
            Namespace: Parsed arguments namespace.

        """
        parser = self._create_main_parser()
        self._add_arguments(parser)
        args = parser.parse_args(argv)
        if not args.version and args.appimage is None:
            parser.error("the following arguments are required: appimage")
        return args

    def _create_main_parser(self) -> argparse.ArgumentParser:
        """Create the main argument parser."""
        return argparse.ArgumentParser(
            prog="appimage-desktop",
            description=(
                "Register an AppImage with the desktop environment: "
                "launcher symlink, icon and desktop entry"
            ),
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Create symlink, icon and desktop entry (interactive)
  %(prog)s ~/Applications/Obsidian.AppImage

  # Remove them again
  %(prog)s ~/Applications/Obsidian.AppImage --remove
            """,
        )

    def _add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add positional and optional arguments."""
        parser.add_argument(
            "appimage",
            nargs="?",
            type=Path,
            help="Path to the AppImage",
        )
        parser.add_argument(
            "--remove",
            action="store_true",
            help="Remove the symlink, desktop entry and icon instead",
        )
        parser.add_argument(
            "--config-dir",
            type=Path,
            default=None,
            help="Use a different configuration directory",
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="store_true",
            help="Show debug output on the console",
        )
        parser.add_argument(
            "--version",
            action="store_true",
            help="Show appimage-desktop version and exit",
        )
