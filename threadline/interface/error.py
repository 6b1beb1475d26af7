"""Interface layer errors and their HTTP mapping."""

import logfire
from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from threadline.domain.error import DataAccessError, NotFoundError, ValidationError


class InterfaceError(Exception):
    """Base interface error."""

    pass


class FormError(InterfaceError):
    """Submitted form failed validation."""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__("Form validation failed")


def _field_errors(errors: dict[str, list[str]]) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={"detail": "Validation failed", "errors": errors},
    )


async def handle_not_found(request: Request, exc: NotFoundError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(exc)}
    )


async def handle_validation(request: Request, exc: ValidationError) -> JSONResponse:
    return _field_errors(exc.errors)


async def handle_form(request: Request, exc: FormError) -> JSONResponse:
    return _field_errors(exc.errors)


async def handle_data_access(request: Request, exc: DataAccessError) -> JSONResponse:
    logfire.error(
        "Data access failed",
        operation=exc.operation,
        path=request.url.path,
        error=str(exc),
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": f"Failed to {exc.operation}"},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Map domain and interface errors to HTTP responses."""
    app.add_exception_handler(NotFoundError, handle_not_found)
    app.add_exception_handler(ValidationError, handle_validation)
    app.add_exception_handler(FormError, handle_form)
    app.add_exception_handler(DataAccessError, handle_data_access)
