"""Install record manager for per-app JSON state files.

A record remembers exactly what an install created (custom command name
included) so removal can undo it.
"""

import logging
from pathlib import Path
from typing import Any, cast

import orjson

from appimage_desktop.config.schemas.validator import (
    SchemaValidationError,
    validate_install_record,
)
from appimage_desktop.types import InstallRecord

logger = logging.getLogger(__name__)


class InstallRecordManager:
    """Manages install records stored as ``<records_dir>/<app>.json``."""

    def __init__(self, records_dir: Path) -> None:
        """Initialize record manager.

        Args:
            records_dir: Directory holding the JSON records

        """
        self.records_dir = records_dir

    def record_path(self, app_name: str) -> Path:
        """Return the record file path for an app."""
        return self.records_dir / f"{app_name}.json"

    def load_record(self, app_name: str) -> InstallRecord | None:
        """Load the install record for an app.

        Args:
            app_name: AppImage base name

        Returns:
            The record, or None if no record exists

        Raises:
            ValueError: If the record exists but is unreadable or invalid

        """
        record_file = self.record_path(app_name)
        if not record_file.exists():
            return None

        try:
            data = orjson.loads(record_file.read_bytes())
            validate_install_record(data, app_name)
        except SchemaValidationError as e:
            msg = f"Invalid install record for {app_name}: {e}"
            raise ValueError(msg) from e
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in install record for {app_name}: {e}"
            raise ValueError(msg) from e
        except OSError as e:
            msg = f"Failed to load install record for {app_name}: {e}"
            raise ValueError(msg) from e

        return cast("InstallRecord", data)

    def save_record(self, record: InstallRecord) -> Path:
        """Validate and save an install record.

        Args:
            record: Record to persist

        Returns:
            Path of the written record

        Raises:
            ValueError: If the record is invalid or cannot be written

        """
        app_name = record["app_name"]
        record_file = self.record_path(app_name)

        try:
            validate_install_record(cast("dict[str, Any]", record), app_name)
            self.records_dir.mkdir(parents=True, exist_ok=True)
            record_file.write_bytes(
                orjson.dumps(
                    record,
                    option=orjson.OPT_INDENT_2 | orjson.OPT_SORT_KEYS,
                )
            )
        except SchemaValidationError as e:
            msg = f"Cannot save invalid install record for {app_name}: {e}"
            raise ValueError(msg) from e
        except OSError as e:
            msg = f"Failed to save install record for {app_name}: {e}"
            raise ValueError(msg) from e

        logger.debug("Saved install record: %s", record_file)
        return record_file

    def remove_record(self, app_name: str) -> bool:
        """Remove an install record.

        Returns:
            True if a record was removed, False if none existed

        """
        record_file = self.record_path(app_name)
        if not record_file.exists():
            return False
        record_file.unlink()
        return True
