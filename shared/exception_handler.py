import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from shared.core.schemas import ErrorResponse

logger = logging.getLogger(__name__)

# starlette's routing errors, reworded for the API
ROUTING_DETAILS = {"Not Found", "Method Not Allowed"}
HTTP_MESSAGES = {
    404: "Not found",
    405: "Method not allowed",
}


def format_validation_errors(errors) -> str:
    parts = []
    for err in errors:
        # drop the leading "body"/"query"/"path" marker
        loc = [str(p) for p in err.get("loc", ())[1:]]
        field = ".".join(loc)
        message = err.get("msg", "Invalid value")
        parts.append(f"{field}: {message}" if field else message)
    return "; ".join(parts) or "Invalid request"


def error_json(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(content=ErrorResponse(error=message).model_dump(), status_code=status_code)


def setup_exception_handlers(app: FastAPI):

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        message = str(exc.detail)
        if message in ROUTING_DETAILS:
            message = HTTP_MESSAGES.get(exc.status_code, message)
        return error_json(message, exc.status_code)

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return error_json(format_validation_errors(exc.errors()), 400)

    # Catch all unhandled exceptions
    @app.exception_handler(Exception)
    async def generic_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return error_json("Internal server error", 500)
