from typing import Any, Dict, Optional

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse


def api_response(
    *,
    data: Optional[Any] = None,
    message: str = "Operation successful",
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    """
    Envelope used by the service endpoints (health, info).
    Automatically sets status = "success" if < 400 else "error"
    """
    status_str = "success" if status_code < 400 else "error"
    data = jsonable_encoder(data) if data is not None else {}

    return JSONResponse(
        status_code=status_code,
        content={
            "status_code": status_code,
            "status": status_str,
            "message": message,
            "data": data,
        },
    )


def success_response(content: Dict[str, Any], status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """Analysis payloads are flat: {"success": true, ...content}."""
    return JSONResponse(
        status_code=status_code,
        content={"success": True, **jsonable_encoder(content)},
    )


def error_response(
    *,
    error: str,
    status_code: int,
    hint: Optional[str] = None,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    content: Dict[str, Any] = {"success": False, "error": error}
    if hint:
        content["hint"] = hint

    return JSONResponse(status_code=status_code, content=content, headers=headers)
