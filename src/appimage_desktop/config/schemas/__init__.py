"""JSON schemas for files written by appimage-desktop."""

from appimage_desktop.config.schemas.validator import (
    SchemaValidationError,
    validate_install_record,
)

__all__ = ["SchemaValidationError", "validate_install_record"]
