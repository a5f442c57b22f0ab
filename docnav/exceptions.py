"""Custom exception hierarchy for docnav.

Exception Hierarchy:
    DocnavError (base)
    ├── StorageError - session storage operations
    │   └── StorageUnavailableError
    ├── ManifestError - site manifest loading/validation
    ├── PageError - rendered HTML page loading
    └── ConfigurationError - settings/configuration issues

Usage:
    from docnav.exceptions import StorageUnavailableError

    try:
        path.write_text(data)
    except OSError as e:
        raise StorageUnavailableError("Failed to write session", path=str(path)) from e
"""

from typing import Any, Optional


class DocnavError(Exception):
    """Base exception for all docnav errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., ids, paths)
    """

    def __init__(self, message: str, **context: Any) -> None:
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format the error message with context."""
        if self.context:
            context_str = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


# =============================================================================
# Storage Errors
# =============================================================================


class StorageError(DocnavError):
    """Base exception for session storage operations."""

    pass


class StorageUnavailableError(StorageError):
    """The storage backend cannot be read or written."""

    def __init__(
        self,
        message: str = "Session storage unavailable",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


# =============================================================================
# Input Errors
# =============================================================================


class ManifestError(DocnavError):
    """The site manifest is missing or malformed."""

    def __init__(
        self,
        message: str = "Invalid site manifest",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class PageError(DocnavError):
    """A rendered page could not be read or written."""

    def __init__(
        self,
        message: str = "Failed to process page",
        *,
        path: Optional[str] = None,
        **context: Any,
    ) -> None:
        if path:
            context["path"] = path
        super().__init__(message, **context)


class ConfigurationError(DocnavError):
    """Settings or configuration values are invalid."""

    def __init__(
        self,
        message: str = "Invalid configuration",
        *,
        key: Optional[str] = None,
        **context: Any,
    ) -> None:
        if key:
            context["key"] = key
        super().__init__(message, **context)
