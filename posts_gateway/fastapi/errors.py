from typing import Any

import structlog
from fastapi import FastAPI, status
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.requests import Request
from starlette.responses import JSONResponse

logger = structlog.get_logger()

AVAILABLE_ROUTES = [
    "GET /api/posts",
    "POST /api/posts",
    "GET /api/health",
]
REQUIRED_POST_FIELDS = ["title", "body", "user_id"]


class ApiError(Exception):
    """
    A failure that views report to the client in the common error envelope.

    The original exception, if any, is never shown to the client
    unless the application runs in development mode.
    """

    def __init__(
        self,
        *,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        error: str,
        message: str,
        exc: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message
        self.exc = exc


def _is_development(request: Request) -> bool:
    return request.app.state.container.settings.app().is_development


def _error_body(
    request: Request,
    *,
    error: str,
    message: str,
    exc: BaseException | None = None,
) -> dict[str, Any]:
    body: dict[str, Any] = {"success": False, "error": error, "message": message}
    if exc is not None and _is_development(request):
        body["details"] = str(exc)
    return body


async def api_error_handler(request: Request, exc: ApiError) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, error=exc.error, message=exc.message, exc=exc.exc),
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = []
    for err in exc.errors():
        match err["loc"]:
            case ("body", str(name), *_):
                field = name
            case _:
                field = "body"
        errors.append({"field": field, "message": err["msg"]})

    logger.info(
        "Rejected invalid request",
        method=request.method,
        path=request.url.path,
        errors=errors,
    )

    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "success": False,
            "error": "Validation failed",
            "message": "title, body and user_id are required and must be non-empty strings",
            "requiredFields": REQUIRED_POST_FIELDS,
            "errors": errors,
        },
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    # unknown paths and unsupported methods on known paths are both reported as missing routes
    if exc.status_code in {status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED}:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={
                "error": "Route not found",
                "message": f"Route {request.method} {request.url.path} not found",
                "availableRoutes": AVAILABLE_ROUTES,
            },
        )

    return JSONResponse(
        status_code=exc.status_code,
        content=_error_body(request, error=str(exc.detail), message=str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def unhandled_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(
        "Unhandled error while serving request",
        method=request.method,
        path=request.url.path,
        exc_info=exc,
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=_error_body(
            request,
            error="Internal server error",
            message="Something went wrong",
            exc=exc,
        ),
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ApiError, api_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(RequestValidationError, validation_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(StarletteHTTPException, http_error_handler)  # type: ignore[arg-type]
    app.add_exception_handler(Exception, unhandled_error_handler)
