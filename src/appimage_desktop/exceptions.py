"""Exception classes for appimage-desktop operations."""


class AppImageDesktopError(Exception):
    """Base exception for appimage-desktop operations."""

    error_prefix: str = "Operation failed"

    def __init__(self, message: str, target: str | None = None) -> None:
        """Initialize error with message and optional target.

        Args:
            message: Error message describing the failure.
            target: Optional path or name of the target that failed.

        """
        super().__init__(message)
        self.message = message
        self.target = target

    def __str__(self) -> str:
        """Return formatted error message."""
        if self.target:
            return f"{self.error_prefix} for '{self.target}': {self.message}"
        return f"{self.error_prefix}: {self.message}"


class NotFoundError(AppImageDesktopError):
    """Raised when the AppImage path does not point to a file."""

    error_prefix = "File not found"


class PermissionDeniedError(AppImageDesktopError):
    """Raised when a privileged operation fails."""

    error_prefix = "Permission denied"


class ExtractionFailedError(AppImageDesktopError):
    """Raised when AppImage self-extraction fails."""

    error_prefix = "Extraction failed"

    def __init__(
        self,
        message: str,
        target: str | None = None,
        output: str = "",
    ) -> None:
        """Initialize error with the captured extraction output.

        Args:
            message: Error message describing the failure.
            target: Optional path of the AppImage being extracted.
            output: Combined stdout/stderr of the extraction command.

        """
        super().__init__(message, target)
        self.output = output

    def __str__(self) -> str:
        """Return formatted error message including extraction output."""
        base = super().__str__()
        if self.output:
            return f"{base}\n{self.output.rstrip()}"
        return base


class NoIconsFoundError(AppImageDesktopError):
    """Raised when the extracted AppImage has no image at its root."""

    error_prefix = "No icons found"


class NoCategoriesFoundError(AppImageDesktopError):
    """Raised when no desktop categories could be discovered."""

    error_prefix = "No categories found"


class UserAbortedError(AppImageDesktopError):
    """Raised when the user declines to continue."""

    error_prefix = "Aborted by user"

    def __str__(self) -> str:
        """Return a short abort message."""
        if self.message:
            return f"{self.error_prefix}: {self.message}"
        return f"{self.error_prefix}."


class UnwritableTargetError(AppImageDesktopError):
    """Raised when a directory or file cannot be created or written."""

    error_prefix = "Cannot write"
