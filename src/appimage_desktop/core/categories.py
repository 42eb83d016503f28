"""Desktop category discovery.

Scans installed desktop entries and returns the distinct, sorted set of
``Categories=`` tags offered to the user at install time.
"""

import re
from collections.abc import Iterable
from pathlib import Path

from appimage_desktop.constants import DESKTOP_FILE_GLOB
from appimage_desktop.logger import get_logger

logger = get_logger(__name__)

CATEGORIES_PATTERN = re.compile(r"^Categories=(.+)$", re.MULTILINE)


def parse_categories(content: str) -> list[str]:
    """Extract category tags from desktop entry text.

    Only the first ``Categories=`` line counts; empty tokens are dropped.

    Args:
        content: Desktop entry file content

    Returns:
        Category names in file order

    """
    match = CATEGORIES_PATTERN.search(content)
    if not match:
        return []
    tokens = (token.strip() for token in match.group(1).split(";"))
    return [token for token in tokens if token]


def _desktop_files(directory: Path) -> list[Path]:
    try:
        return sorted(directory.glob(DESKTOP_FILE_GLOB))
    except OSError as e:
        logger.debug("Cannot list %s: %s", directory, e)
        return []


def collect_categories(directories: Iterable[Path]) -> list[str]:
    """Collect distinct categories from every desktop file in directories.

    Unreadable files and missing directories contribute nothing. An empty
    list is a valid result; callers decide how to handle it.

    Args:
        directories: Directories containing ``*.desktop`` files

    Returns:
        Sorted, de-duplicated category names

    """
    categories: set[str] = set()
    scanned = 0

    for directory in directories:
        for desktop_file in _desktop_files(directory):
            try:
                content = desktop_file.read_text(encoding="utf-8")
            except (OSError, UnicodeDecodeError) as e:
                logger.debug("Skipping unreadable %s: %s", desktop_file, e)
                continue
            scanned += 1
            categories.update(parse_categories(content))

    logger.debug(
        "Found %d categories in %d desktop files", len(categories), scanned
    )
    return sorted(categories)
