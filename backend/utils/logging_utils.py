"""
Structured Logging Utilities

Provides utilities for adding structured context to log messages,
improving observability and debugging.
"""

import inspect
import logging
from typing import Any, Dict, Optional
from contextvars import ContextVar
from functools import wraps


# Context variable for request-scoped logging context
_logging_context: ContextVar[Dict[str, Any]] = ContextVar('logging_context', default={})

# Argument names copied into the log context by log_operation
_CONTEXT_KEYS = ("form_id", "category_id", "content_id", "submission_id", "user_id")


class StructuredLogger:
    """
    Wrapper around standard logger that adds structured context.

    Usage:
        logger = StructuredLogger(__name__)
        logger.info("Form updated", extra={
            "form_id": form.id,
            "operation": "update_form",
        })
    """

    def __init__(self, name: str):
        """
        Initialize structured logger.

        Args:
            name: Logger name (typically __name__)
        """
        self.logger = logging.getLogger(name)

    def _add_context(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """
        Add context from ContextVar to extra dict.

        Args:
            extra: Additional context dict

        Returns:
            Merged context dict
        """
        context = _logging_context.get().copy()
        if extra:
            context.update(extra)
        return context

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log debug message with structured context."""
        self.logger.debug(message, extra=self._add_context(extra))

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log info message with structured context."""
        self.logger.info(message, extra=self._add_context(extra))

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        """Log warning message with structured context."""
        self.logger.warning(message, extra=self._add_context(extra))

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None, exc_info: bool = False):
        """Log error message with structured context."""
        self.logger.error(message, extra=self._add_context(extra), exc_info=exc_info)


class RequestContextFilter(logging.Filter):
    """
    Copy the request id from the logging context onto every record.

    Lets handlers use %(request_id)s in their format string; records logged
    outside a request get "-".
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "request_id"):
            record.request_id = _logging_context.get().get("request_id", "-")
        return True


def set_logging_context(**kwargs):
    """
    Set logging context for the current request/operation.

    This context will be automatically included in all log messages
    within the current context (typically a request).

    Args:
        **kwargs: Key-value pairs to add to context

    Example:
        set_logging_context(
            request_id="abc-123",
            method="PUT",
            path="/api/v1/cms/forms/..."
        )
    """
    context = _logging_context.get().copy()
    context.update(kwargs)
    _logging_context.set(context)


def clear_logging_context():
    """Clear the logging context."""
    _logging_context.set({})


def _collect_context(func, operation_name: str, args, kwargs) -> Dict[str, Any]:
    context = {"operation": operation_name}
    try:
        bound = inspect.signature(func).bind_partial(*args, **kwargs)
    except TypeError:
        return context
    for key in _CONTEXT_KEYS:
        if key in bound.arguments:
            context[key] = bound.arguments[key]
    return context


def log_operation(operation_name: str):
    """
    Decorator to automatically log operation start/end with structured context.

    Identifiers such as form_id or category_id are picked up from the
    decorated function's arguments.

    Args:
        operation_name: Name of the operation

    Example:
        @log_operation("update_form")
        def update_form(self, form_id: str, request: FormRequest):
            ...
    """
    def decorator(func):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _collect_context(func, operation_name, args, kwargs)

            logger.info(f"Starting {operation_name}", extra=context)

            try:
                result = await func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}: {e}", extra=context)
                raise

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            logger = StructuredLogger(func.__module__)
            context = _collect_context(func, operation_name, args, kwargs)

            logger.info(f"Starting {operation_name}", extra=context)

            try:
                result = func(*args, **kwargs)
                logger.info(f"Completed {operation_name}", extra=context)
                return result
            except Exception as e:
                context["error"] = str(e)
                context["error_type"] = type(e).__name__
                logger.warning(f"Failed {operation_name}: {e}", extra=context)
                raise

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
