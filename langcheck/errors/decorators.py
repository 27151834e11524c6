"""
Error logging decorator for langcheck operations.
"""

import functools
from typing import Any, Callable, Dict, Optional

import structlog

from .exceptions import LangCheckError

logger = structlog.get_logger(__name__)


def log_errors(
    level: str = "error",
    include_traceback: bool = False,
    reraise: bool = True,
    operation_name: Optional[str] = None,
    context: Optional[Callable[..., Dict[str, Any]]] = None,
    default: Any = None,
):
    """
    Decorator to log errors with context.

    LangCheckError context (paths, line numbers, config keys) is logged
    alongside the error code.

    Args:
        level: Log level (debug, info, warning, error, critical)
        include_traceback: Attach exc_info to the log event
        reraise: Whether to re-raise the exception after logging
        operation_name: Custom operation name for logging
        context: Called with the decorated call's arguments; returns extra log fields
        default: Returned instead of raising when reraise is False
    """
    def decorator(func: Callable) -> Callable:
        op_name = operation_name or f"{func.__module__}.{func.__name__}"

        @functools.wraps(func)
        def wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                log_data: Dict[str, Any] = {
                    "operation": op_name,
                    "error_type": type(e).__name__,
                    "error": str(e),
                }
                if isinstance(e, LangCheckError):
                    log_data["error_code"] = e.error_code
                    log_data.update({k: v for k, v in e.context.items() if v is not None})
                if context is not None:
                    log_data.update(context(*args, **kwargs))
                if include_traceback:
                    log_data["exc_info"] = True

                log_method = getattr(logger, level.lower(), logger.error)
                log_method("Error in operation", **log_data)

                if reraise:
                    raise
                return default

        return wrapper

    return decorator
