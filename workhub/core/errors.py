import logging
from datetime import datetime, timezone
from http import HTTPStatus
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

# 오류 응답 형식: {statusCode, message, error, timestamp}


class SubmissionError(Exception):
    """상태 코드와 메시지를 가진 도메인 오류"""
    status_code: int = 500
    default_message: str = "Internal server error"

    def __init__(self, message: Any = None):
        self.message = self.default_message if message is None else message
        super().__init__(self.message)


class ValidationFailedError(SubmissionError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, errors):
        self.errors = list(errors)
        super().__init__([{"field": e.field, "message": e.message} for e in self.errors])


class FileRequiredError(SubmissionError):
    status_code = 400
    default_message = "File is required"


class ContentRejectedError(SubmissionError):
    status_code = 400
    default_message = "Unsupported file type for the given category"


class FileTooLargeError(SubmissionError):
    status_code = 413
    default_message = "File too large"


class SubmissionNotFoundError(SubmissionError):
    status_code = 404
    default_message = "Submission not found"


class InvalidCredentialsError(SubmissionError):
    status_code = 401
    default_message = "Invalid credentials"


class UnauthorizedError(SubmissionError):
    status_code = 401
    default_message = "Unauthorized"


def error_body(status_code: int, message: Any, error: Optional[str] = None) -> dict:
    body = {
        "statusCode": status_code,
        "message": message,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
    if error is None:
        try:
            error = HTTPStatus(status_code).phrase
        except ValueError:
            error = None
    if error:
        body["error"] = error
    return body


def error_response(status_code: int, message: Any, headers: Optional[dict] = None) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error_body(status_code, message),
        headers=headers,
    )


async def submission_error_handler(request: Request, exc: SubmissionError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.error(f"처리 중 오류 발생: {exc.message}", exc_info=exc)
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    headers = {"WWW-Authenticate": "Bearer"} if exc.status_code == 401 else None
    return error_response(exc.status_code, exc.message, headers)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return error_response(exc.status_code, exc.detail, getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = []
    for err in exc.errors():
        loc = [str(part) for part in err.get("loc", ()) if part not in ("body", "query", "path", "header")]
        details.append({"field": ".".join(loc), "message": err.get("msg", "Invalid value")})
    return error_response(400, details)


async def rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning(f"요청 제한 초과: {request.client.host if request.client else '-'} {request.url.path}")
    return error_response(429, "Too many requests")


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error(f"예상치 못한 오류 발생: {request.method} {request.url.path}", exc_info=exc)
    return error_response(500, "Internal server error")


def register_exception_handlers(app: FastAPI) -> None:
    """모든 오류를 공통 JSON 형식으로 변환"""
    app.add_exception_handler(SubmissionError, submission_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(RateLimitExceeded, rate_limit_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
