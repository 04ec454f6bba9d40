from typing import Dict, List, Optional

from fastapi import status


class AppException(Exception):
    """Base for every error the services raise on purpose.

    Carries the HTTP status the exception handler answers with and, for
    validation failures, a field -> messages map.
    """

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Operation failed"

    def __init__(self, message: Optional[str] = None, errors: Optional[Dict[str, List[str]]] = None):
        self.message = message or self.default_message
        self.errors = errors
        super().__init__(self.message)


class ValidationError(AppException):
    status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    default_message = "Validation failed"

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        super().__init__(message, errors)

    @classmethod
    def for_field(cls, field: str, message: str) -> "ValidationError":
        return cls({field: [message]})


class NotFoundError(AppException):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Resource not found"


class ConflictError(AppException):
    status_code = status.HTTP_409_CONFLICT
    default_message = "Resource conflict"


class InternalError(AppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"
