"""Error codes and error handling utilities for duskicons."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from pathlib import Path
from typing import Any


class ErrorCode(Enum):
    """Standardized error codes for duskicons operations."""

    # File system errors
    FILE_NOT_FOUND = auto()
    FILE_ACCESS_DENIED = auto()
    DISK_FULL = auto()
    PATH_INVALID = auto()

    # Theme errors
    COLOR_INVALID = auto()
    TOKEN_MAP_INVALID = auto()

    # Rendering errors
    SVG_INVALID = auto()
    PNG_WRITE_FAILED = auto()

    # Operation errors
    OPERATION_CANCELLED = auto()
    OPERATION_FAILED = auto()


ERROR_MESSAGES: dict[ErrorCode, str] = {
    ErrorCode.FILE_NOT_FOUND: "The file was not found. It may have been moved or deleted.",
    ErrorCode.FILE_ACCESS_DENIED: "Access denied. Check the permissions of the output directory.",
    ErrorCode.DISK_FULL: "The destination disk is full. Free up space and try again.",
    ErrorCode.PATH_INVALID: "The specified path is invalid or inaccessible.",

    ErrorCode.COLOR_INVALID: "Please enter a valid hex code.",
    ErrorCode.TOKEN_MAP_INVALID: "The color token map is invalid. Check the tokens file.",

    ErrorCode.SVG_INVALID: "The SVG document could not be parsed.",
    ErrorCode.PNG_WRITE_FAILED: "The PNG file could not be written.",

    ErrorCode.OPERATION_CANCELLED: "Cancelled dusk-icons.",
    ErrorCode.OPERATION_FAILED: "Operation failed. See the log for more information.",
}


@dataclass
class DuskIconsError(Exception):
    """Base exception for duskicons with error code and context."""

    code: ErrorCode
    message: str = ""
    path: Path | None = None
    details: dict[str, Any] = field(default_factory=dict)
    suggestion: str = ""

    def __post_init__(self) -> None:
        if not self.message:
            self.message = ERROR_MESSAGES.get(self.code, "An unexpected error occurred.")
        if not self.suggestion and self.code in ERROR_MESSAGES:
            self.suggestion = ERROR_MESSAGES[self.code]

    def __str__(self) -> str:
        parts = [self.message]
        if self.path:
            parts.append(f"\nFile: {self.path}")
        if self.details:
            details_str = " | ".join(f"{k}={v}" for k, v in self.details.items())
            parts.append(f"\nDetails: {details_str}")
        return "".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging."""
        return {
            "code": self.code.name,
            "message": self.message,
            "path": str(self.path) if self.path else None,
            "details": self.details,
            "suggestion": self.suggestion,
        }


class ThemeValidationError(DuskIconsError, ValueError):
    """Raised when a theme color or a color token map fails validation."""

    def __init__(self, message: str, *, code: ErrorCode = ErrorCode.COLOR_INVALID,
                 path: Path | None = None) -> None:
        super().__init__(code, message=message, path=path)


class RasterizationError(DuskIconsError):
    """Raised when the SVG renderer cannot produce a PNG."""


class ConversionAbortedError(DuskIconsError):
    """Raised when an icon fails in a way that must stop the whole batch.

    ``icon`` names the icon being processed; the original exception is
    chained as ``__cause__``.
    """

    def __init__(self, icon: str, cause: DuskIconsError) -> None:
        super().__init__(
            cause.code,
            message=f"Conversion of {icon} aborted: {cause.message}",
            path=cause.path,
            details=dict(cause.details),
            suggestion=cause.suggestion,
        )
        self.icon = icon


def classify_exception(exc: Exception, path: Path | None = None) -> DuskIconsError:
    """Classify a generic exception into a DuskIconsError with appropriate code."""
    if isinstance(exc, DuskIconsError):
        return exc

    exc_name = type(exc).__name__
    exc_str = str(exc).lower()

    if isinstance(exc, FileNotFoundError) or "no such file" in exc_str:
        return DuskIconsError(ErrorCode.FILE_NOT_FOUND, path=path, details={"original": exc_str})
    if isinstance(exc, PermissionError) or "permission denied" in exc_str:
        return DuskIconsError(ErrorCode.FILE_ACCESS_DENIED, path=path, details={"original": exc_str})
    if "disk full" in exc_str or "no space left" in exc_str:
        return DuskIconsError(ErrorCode.DISK_FULL, path=path, details={"original": exc_str})
    if isinstance(exc, (IsADirectoryError, NotADirectoryError)):
        return DuskIconsError(ErrorCode.PATH_INVALID, path=path, details={"original": exc_str})
    if isinstance(exc, UnicodeDecodeError):
        return DuskIconsError(ErrorCode.SVG_INVALID, path=path, details={"original": exc_str})

    return DuskIconsError(
        ErrorCode.OPERATION_FAILED,
        message=f"{exc_name}: {exc}",
        path=path,
        details={"original": exc_str},
    )


def format_error_for_user(error: DuskIconsError | Exception) -> str:
    """Format an error for display on the console."""
    if isinstance(error, DuskIconsError):
        parts = [error.message]
        if error.suggestion and error.suggestion != error.message:
            parts.append(f" ({error.suggestion})")
        if error.path:
            parts.append(f"\nFile: {error.path}")
        return "".join(parts)

    classified = classify_exception(error)
    return format_error_for_user(classified)
