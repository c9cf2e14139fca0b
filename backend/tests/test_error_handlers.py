import asyncio

import pytest
from fastapi import HTTPException

from exceptions import (
    ApplicationError,
    AuthenticationError,
    ConfigurationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    ValidationError,
)
from utils.error_handlers import handle_api_errors, to_http_exception


@pytest.mark.parametrize("error,status", [
    (ValidationError("bad input"), 400),
    (NotFoundError("Form", "abc"), 404),
    (ConflictError("taken"), 409),
    (AuthenticationError("Token has expired"), 401),
    (ConfigurationError("missing key"), 500),
    (DatabaseError("update_form", "disk full"), 500),
    (ApplicationError("boom"), 500),
    (RuntimeError("unexpected"), 500),
])
def test_status_mapping(error, status):
    assert to_http_exception("Update form", error).status_code == status


def test_not_found_message():
    exc = to_http_exception("Get form", NotFoundError("Form", "abc"))

    assert exc.detail == "Form 'abc' not found"


def test_authentication_error_sets_challenge_header():
    exc = to_http_exception("Login", AuthenticationError("Invalid email or password"))

    assert exc.headers == {"WWW-Authenticate": "Bearer"}


def test_unexpected_error_hides_details():
    exc = to_http_exception("Update form", RuntimeError("secret stack detail"))

    assert "secret stack detail" not in exc.detail


def test_decorator_wraps_sync_function():
    @handle_api_errors("Delete form")
    def endpoint():
        raise ConflictError("Cannot delete form: it has existing submissions.")

    with pytest.raises(HTTPException) as exc_info:
        endpoint()

    assert exc_info.value.status_code == 409


def test_decorator_wraps_async_function():
    @handle_api_errors("Get form")
    async def endpoint():
        raise NotFoundError("Form", "abc")

    with pytest.raises(HTTPException) as exc_info:
        asyncio.run(endpoint())

    assert exc_info.value.status_code == 404


def test_decorator_passes_http_exception_through():
    @handle_api_errors("Get form")
    def endpoint():
        raise HTTPException(status_code=418, detail="teapot")

    with pytest.raises(HTTPException) as exc_info:
        endpoint()

    assert exc_info.value.status_code == 418
