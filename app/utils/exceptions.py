import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.services.exceptions import (
    ServiceError,
    VehicleAlreadyExistsError,
    VehicleNotFoundError,
    VehiclesNotFoundByCriteriaError,
)
from app.utils.response import error_response

logger = logging.getLogger(__name__)

# Checked in order; subclasses must come before their bases.
SERVICE_ERROR_STATUS: list[tuple[type[ServiceError], int]] = [
    (VehicleAlreadyExistsError, 409),
    (VehicleNotFoundError, 404),
    (VehiclesNotFoundByCriteriaError, 404),
]


class AppException(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code


def status_for(exc: ServiceError) -> int:
    for error_type, status_code in SERVICE_ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return 500


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException) -> JSONResponse:
        return JSONResponse(
            status_code=exc.status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(ServiceError)
    async def service_exception_handler(request: Request, exc: ServiceError) -> JSONResponse:
        status_code = status_for(exc)
        if status_code == 500:
            logger.error("Unmapped service error on %s %s: %s", request.method, request.url.path, exc.message)
            return JSONResponse(status_code=500, content=error_response("Internal server error"))
        return JSONResponse(
            status_code=status_code,
            content=error_response(exc.message),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=error_response("Invalid request", data=jsonable_errors(exc)),
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=500,
            content=error_response("Internal server error"),
        )


def jsonable_errors(exc: RequestValidationError) -> list[dict]:
    return [
        {"loc": [str(part) for part in error["loc"]], "msg": error["msg"]}
        for error in exc.errors()
    ]
