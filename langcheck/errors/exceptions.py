"""
Error hierarchy for langcheck.

Every failure the checker can report maps onto one of these types so the CLI
can tell a key mismatch apart from a broken input.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


class LangCheckError(Exception):
    """
    Base exception for all langcheck errors.

    Carries an error code, structured context for logging and a short
    message suitable for printing to the user.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        user_message: Optional[str] = None,
        previous_error: Optional[Exception] = None,
    ):
        super().__init__(message)

        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.context = context or {}
        self.user_message = user_message or message
        self.previous_error = previous_error
        self.timestamp = datetime.now(timezone.utc)

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "error_code": self.error_code,
            "context": self.context,
            "user_message": self.user_message,
            "timestamp": self.timestamp.isoformat(),
            "previous_error": str(self.previous_error) if self.previous_error else None,
        }


class ConfigurationError(LangCheckError):
    """Invalid settings or an unusable config file."""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"config_key": config_key},
            **kwargs
        )


class ResourceReadError(LangCheckError):
    """A language directory or file could not be read."""

    def __init__(self, message: str, path: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"path": path},
            **kwargs
        )


class ResourceParseError(LangCheckError):
    """A language file is not a valid JSON object."""

    def __init__(
        self,
        message: str,
        path: Optional[str] = None,
        line: Optional[int] = None,
        column: Optional[int] = None,
        **kwargs
    ):
        super().__init__(
            message,
            context={"path": path, "line": line, "column": column},
            **kwargs
        )


class NoResourcesError(LangCheckError):
    """The language directory holds no files to compare."""

    def __init__(self, message: str, directory: Optional[str] = None, **kwargs):
        super().__init__(
            message,
            context={"directory": directory},
            **kwargs
        )


class InconsistentKeysError(LangCheckError):
    """At least one language file differs from the reference key set."""

    def __init__(self, message: str, files: Optional[List[str]] = None, **kwargs):
        super().__init__(
            message,
            context={"files": files or []},
            user_message="Translation files have inconsistent keys",
            **kwargs
        )
