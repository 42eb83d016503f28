"""Main CLI entry point for appimage-desktop."""

import sys

from appimage_desktop.cli import CLIRunner
from appimage_desktop.logger import get_logger

logger = get_logger(__name__)


def main() -> None:
    """Run the CLI application.

    Raises:
        SystemExit: With status 1 on unexpected errors.

    """
    logger.debug("CLI started")
    try:
        CLIRunner().run()
    except KeyboardInterrupt:
        logger.info("CLI cancelled by user")
        sys.exit(1)
    except Exception:
        logger.exception("❌ Unexpected error")
        sys.exit(1)


if __name__ == "__main__":
    main()
