from fastapi import FastAPI, Request, HTTPException
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import IntegrityError

from shared.core.exceptions import AppException
from shared.core.logging import get_logger
from shared.helpers.json_response_helper import error_response

logger = get_logger("facility.errors")


def _field_errors(raw_errors, skip: int = 1):
    errors = {}
    for error in raw_errors:
        # FastAPI prefixes every location with "body", "query" or "path"
        location = [str(part) for part in error.get("loc", ())[skip:]] or ["request"]
        errors.setdefault(".".join(location), []).append(error.get("msg", "Invalid value"))
    return errors


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(AppException)
    async def app_exception_handler(request: Request, exc: AppException):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path,
                         exc.message, exc_info=exc.__cause__ or exc)
        return error_response(exc.message, http_status=exc.status_code, errors=exc.errors)

    @app.exception_handler(HTTPException)
    async def http_exception_handler(request: Request, exc: HTTPException):
        response = error_response(str(exc.detail), http_status=exc.status_code)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_response("Validation failed", http_status=422, errors=_field_errors(exc.errors()))

    # query models built through Depends() validate outside FastAPI's own pass
    @app.exception_handler(PydanticValidationError)
    async def pydantic_validation_handler(request: Request, exc: PydanticValidationError):
        return error_response("Validation failed", http_status=422,
                              errors=_field_errors(exc.errors(), skip=0))

    @app.exception_handler(IntegrityError)
    async def integrity_exception_handler(request: Request, exc: IntegrityError):
        logger.warning("Integrity error on %s %s: %s", request.method, request.url.path, exc.orig)
        return error_response("The request conflicts with existing data", http_status=409)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
        return error_response("Internal server error", http_status=500)
