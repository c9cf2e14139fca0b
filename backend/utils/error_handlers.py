"""
Error handling decorators and utilities for API endpoints.

Routers call services that raise the exceptions from exceptions.py; this module
turns them into HTTPException responses with consistent status codes and logging.
"""

from functools import wraps
from typing import Callable
from fastapi import HTTPException
import inspect
import logging

from constants import HTTPStatus
from exceptions import (
    ConfigurationError,
    ValidationError,
    NotFoundError,
    ConflictError,
    AuthenticationError,
    DatabaseError,
    ApplicationError
)

logger = logging.getLogger(__name__)


def to_http_exception(operation_name: str, error: Exception) -> HTTPException:
    """
    Map an exception raised below the API layer to an HTTPException.

    Client errors are logged as warnings, server errors with a traceback.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create form")
        error: The exception that was raised

    Returns:
        HTTPException carrying the status code and detail for the response
    """
    if isinstance(error, ValidationError):
        logger.warning(f"{operation_name} - Validation error: {error.message}")
        return HTTPException(status_code=HTTPStatus.BAD_REQUEST, detail=error.message)
    if isinstance(error, NotFoundError):
        logger.warning(f"{operation_name} - Not found: {error.message}")
        return HTTPException(status_code=HTTPStatus.NOT_FOUND, detail=error.message)
    if isinstance(error, ConflictError):
        logger.warning(f"{operation_name} - Conflict: {error.message}")
        return HTTPException(status_code=HTTPStatus.CONFLICT, detail=error.message)
    if isinstance(error, AuthenticationError):
        logger.warning(f"{operation_name} - Authentication failed: {error.message}")
        return HTTPException(
            status_code=HTTPStatus.UNAUTHORIZED,
            detail=error.message,
            headers={"WWW-Authenticate": "Bearer"}
        )
    if isinstance(error, ConfigurationError):
        logger.error(f"{operation_name} - Configuration error: {error.message}", exc_info=error)
        return HTTPException(status_code=HTTPStatus.INTERNAL_SERVER_ERROR, detail=error.message)
    if isinstance(error, DatabaseError):
        logger.error(f"{operation_name} - Database error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"Database operation failed: {error.message}"
        )
    if isinstance(error, ApplicationError):
        logger.error(f"{operation_name} - Application error: {error.message}", exc_info=error)
        return HTTPException(
            status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
            detail=f"{operation_name} failed: {error.message}"
        )
    logger.error(f"{operation_name} - Unexpected error: {error}", exc_info=error)
    return HTTPException(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        detail=f"{operation_name} failed. Please check server logs or contact support."
    )


def handle_api_errors(operation_name: str):
    """
    Decorator to handle common API errors consistently across endpoints.

    This decorator catches application exceptions and converts them
    to appropriate HTTPException responses with consistent error messages.

    Args:
        operation_name: Human-readable name of the operation (e.g., "Create form")

    Returns:
        Decorated function that handles errors uniformly

    Example:
        @router.put("/forms/{form_id}")
        @handle_api_errors("Update form")
        def update_form(...):
            return service.update_form(form_id, request)
    """
    def decorator(func: Callable):
        @wraps(func)
        async def async_wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        @wraps(func)
        def sync_wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except HTTPException:
                # Re-raise HTTPException as-is to preserve status code and detail
                raise
            except Exception as e:
                raise to_http_exception(operation_name, e) from e

        # Return appropriate wrapper based on whether the function is async
        if inspect.iscoroutinefunction(func):
            return async_wrapper
        else:
            return sync_wrapper

    return decorator
