# shared/helpers/json_response_helper.py
from typing import Any, Dict, List, Optional

from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from shared.core.schemas import JsonOutResult


def success_response(data: Any = None, message: str = "Success"):
    return JsonOutResult(
        success=True,
        message=message,
        data=data
    )


def created_response(data: Any = None, message: str = "Created successfully"):
    return success_response(data=data, message=message)


def deleted_response(message: str = "Deleted successfully"):
    return success_response(data=None, message=message)


def error_response(message: str, http_status: int = 400, errors: Optional[Dict[str, List[str]]] = None):
    body = JsonOutResult(
        success=False,
        message=message,
        data=errors
    )
    return JSONResponse(content=jsonable_encoder(body), status_code=http_status)
