"""
Response helpers shared by the routers
"""
from fastapi.responses import JSONResponse

ALLOW_ORIGIN = {"Access-Control-Allow-Origin": "*"}

PREFLIGHT_HEADERS = {
    **ALLOW_ORIGIN,
    "Access-Control-Allow-Methods": "GET, POST, OPTIONS, DELETE",
    "Access-Control-Allow-Headers": "Content-Type",
}


def error_response(status_code: int, message: str, **extra) -> JSONResponse:
    """Build ``{"error": message, **extra}`` with the given status"""
    return JSONResponse(
        status_code=status_code,
        content={"error": message, **extra},
        headers=ALLOW_ORIGIN
    )
