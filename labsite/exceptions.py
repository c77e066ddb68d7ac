"""Custom exception hierarchy for labsite.

Exception Hierarchy:
    LabsiteError (base)
    ├── ContentError - reading the JSON content files
    │   ├── ContentNotFoundError
    │   └── ContentParseError
    ├── RecordValidationError - a content entry missing required fields
    └── ConfigurationError - settings/configuration issues

The interactive core (filtering, lightbox, debounce) never raises for caller
misuse; these errors only come from the content and configuration layers.

Usage:
    from labsite.exceptions import ContentParseError

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise ContentParseError("Invalid JSON", path=str(path)) from e
"""

from typing import Any, Optional


class LabsiteError(Exception):
    """Base exception for all labsite errors.

    Attributes:
        message: Human-readable error description
        context: Additional context about the error (e.g., paths, record ids)
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
# Content Errors
# =============================================================================


class ContentError(LabsiteError):
    """Base exception for content loading; carries the offending file's path."""

    default_message = "Content error"

    def __init__(
        self, message: Optional[str] = None, *, path: Optional[str] = None, **context: Any
    ) -> None:
        self.path = path
        if path:
            context = {"path": path, **context}
        super().__init__(message or self.default_message, **context)


class ContentNotFoundError(ContentError):
    """A content file does not exist."""

    default_message = "Content file not found"


class ContentParseError(ContentError):
    """A content file could not be parsed."""

    default_message = "Failed to parse content file"


class RecordValidationError(LabsiteError):
    """A single content entry is malformed."""

    def __init__(
        self,
        message: str = "Invalid record",
        *,
        record_id: Optional[str] = None,
        field: Optional[str] = None,
        **context: Any,
    ) -> None:
        if record_id is not None:
            context["record_id"] = record_id
        if field:
            context["field"] = field
        super().__init__(message, **context)


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigurationError(LabsiteError):
    """Configuration or settings error."""

    def __init__(
        self,
        message: str = "Configuration error",
        *,
        setting: Optional[str] = None,
        **context: Any,
    ) -> None:
        if setting:
            context["setting"] = setting
        super().__init__(message, **context)
