"""JSON Schema validation for install records."""

from pathlib import Path
from typing import Any

import orjson
from jsonschema import Draft7Validator, ValidationError
from jsonschema.exceptions import best_match

from appimage_desktop.logger import get_logger

logger = get_logger(__name__)

SCHEMA_DIR = Path(__file__).parent
INSTALL_RECORD_V1_SCHEMA_PATH = SCHEMA_DIR / "install_record_v1.schema.json"


class SchemaValidationError(Exception):
    """Raised when JSON schema validation fails."""

    def __init__(
        self,
        message: str,
        path: str | None = None,
        schema_type: str | None = None,
    ) -> None:
        """Initialize schema validation error.

        Args:
            message: Error message
            path: JSON path where error occurred
            schema_type: Type of schema being validated

        """
        self.path = path
        self.schema_type = schema_type
        super().__init__(message)

    def __str__(self) -> str:
        """Format error message with path information."""
        parts = []
        if self.schema_type:
            parts.append(f"[{self.schema_type}]")
        if self.path:
            parts.append(f"at '{self.path}'")
        if parts:
            return f"{' '.join(parts)}: {super().__str__()}"
        return super().__str__()


class RecordValidator:
    """Validates install records against the bundled JSON schema."""

    def __init__(self, schema_path: Path = INSTALL_RECORD_V1_SCHEMA_PATH):
        self._validator = Draft7Validator(self._load_schema(schema_path))

    @staticmethod
    def _load_schema(schema_path: Path) -> dict[str, Any]:
        """Load JSON schema from file.

        Raises:
            FileNotFoundError: If schema file doesn't exist
            ValueError: If schema JSON is invalid

        """
        if not schema_path.exists():
            msg = f"Schema file not found: {schema_path}"
            raise FileNotFoundError(msg)

        try:
            schema: dict[str, Any] = orjson.loads(schema_path.read_bytes())
        except orjson.JSONDecodeError as e:
            msg = f"Invalid JSON in schema file {schema_path}: {e}"
            raise ValueError(msg) from e

        return schema

    @staticmethod
    def _format_validation_error(error: ValidationError) -> str:
        """Format a jsonschema error into a user-friendly message."""
        path = (
            ".".join(str(p) for p in error.absolute_path)
            if error.absolute_path
            else "root"
        )

        message = error.message
        if error.validator == "required":
            missing = (
                error.message.split("'")[1]
                if "'" in error.message
                else "unknown"
            )
            message = f"Missing required field: '{missing}'"
        elif error.validator == "const":
            message = (
                f"Expected constant value '{error.validator_value}', "
                f"got '{error.instance}'"
            )
        elif error.validator == "type":
            actual = type(error.instance).__name__
            message = (
                f"Expected type '{error.validator_value}', got '{actual}'"
            )

        return f"{message} (at '{path}')"

    def validate(
        self, record: dict[str, Any], app_name: str | None = None
    ) -> None:
        """Validate an install record.

        Args:
            record: Install record dictionary
            app_name: Optional app name for better error messages

        Raises:
            SchemaValidationError: If validation fails

        """
        errors = list(self._validator.iter_errors(record))
        if not errors:
            logger.debug(
                "Install record validation passed: %s", app_name or "unknown"
            )
            return

        best_error = best_match(errors)
        error_msg = self._format_validation_error(best_error)
        if app_name:
            error_msg = f"Invalid install record for '{app_name}': {error_msg}"

        path = (
            ".".join(str(p) for p in best_error.absolute_path)
            if best_error.absolute_path
            else None
        )
        raise SchemaValidationError(
            error_msg, path=path, schema_type="install_record"
        )


_validator: RecordValidator | None = None


def get_validator() -> RecordValidator:
    """Get or create the shared validator instance."""
    global _validator  # noqa: PLW0603
    if _validator is None:
        _validator = RecordValidator()
    return _validator


def validate_install_record(
    record: dict[str, Any], app_name: str | None = None
) -> None:
    """Validate an install record (convenience function).

    Raises:
        SchemaValidationError: If validation fails

    """
    get_validator().validate(record, app_name)
