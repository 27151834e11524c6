"""
Error handling for langcheck.

- Structured error hierarchy
- Logging decorator for checker operations
"""

from .exceptions import (
    LangCheckError,
    ConfigurationError,
    ResourceReadError,
    ResourceParseError,
    NoResourcesError,
    InconsistentKeysError,
)

from .decorators import log_errors

__all__ = [
    # Exceptions
    "LangCheckError",
    "ConfigurationError",
    "ResourceReadError",
    "ResourceParseError",
    "NoResourcesError",
    "InconsistentKeysError",

    # Decorators
    "log_errors",
]
