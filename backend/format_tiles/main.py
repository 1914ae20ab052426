import logging

from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status
from starlette.middleware.sessions import SessionMiddleware

from format_tiles.api.v1.router import api_router
from format_tiles.core.config import settings
from format_tiles.core.errors import AuthorizationError, InvalidValueError, NotFoundError, TilesError

logging.basicConfig(level=settings.LOG_LEVEL.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

app = FastAPI(title=settings.PROJECT_NAME)
app.add_middleware(SessionMiddleware, secret_key=settings.SESSION_SECRET, session_cookie="format_tiles_session")

app.include_router(api_router, prefix="/api/v1")
# Same routes without the /api prefix for proxies that strip it
app.include_router(api_router, prefix="/v1")


@app.get("/health")
def health_check():
    return {"status": "ok"}


def _error_payload(code: str, message: str, details: object | None = None) -> dict[str, object]:
    error: dict[str, object] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return {"error": error}


@app.exception_handler(HTTPException)
def handle_http_exception(request: Request, exc: HTTPException):
    logging.getLogger("api").warning("HTTP %s %s: %s", exc.status_code, request.url.path, exc.detail)
    payload = _error_payload("http_error", str(exc.detail))
    payload["detail"] = exc.detail
    return JSONResponse(status_code=exc.status_code, content=payload)


@app.exception_handler(TilesError)
def handle_tiles_error(request: Request, exc: TilesError):
    if isinstance(exc, AuthorizationError):
        status_code = status.HTTP_403_FORBIDDEN
    elif isinstance(exc, NotFoundError):
        status_code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, InvalidValueError):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        status_code = status.HTTP_400_BAD_REQUEST
    logging.getLogger("api").warning("HTTP %s %s: %s", status_code, request.url.path, exc.message)
    payload = _error_payload(exc.code, exc.message)
    payload["detail"] = exc.message
    return JSONResponse(status_code=status_code, content=payload)


@app.exception_handler(RequestValidationError)
def handle_validation_error(request: Request, exc: RequestValidationError):
    payload = _error_payload("validation_error", "Invalid request", exc.errors())
    payload["detail"] = exc.errors()
    return JSONResponse(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, content=payload)


@app.exception_handler(Exception)
def handle_unexpected_error(request: Request, exc: Exception):
    logging.getLogger("api").exception("Unhandled error on %s", request.url.path)
    payload = _error_payload("server_error", "Internal server error")
    return JSONResponse(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, content=payload)
