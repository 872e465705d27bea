from fastapi import HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.constants import ErrorMessages
from app.enums import ErrorCode
from app.utils.logger import get_logger

logger = get_logger(__name__)


# --------------------------------------------------
# STORE ERRORS (raised below the HTTP layer)
# --------------------------------------------------

class StoreError(Exception):
    """Base class for failures raised by the in-memory store."""


class ProjectNotFoundError(StoreError, LookupError):
    def __init__(self, project_id: str):
        super().__init__(f"{ErrorMessages.PROJECT_NOT_FOUND}: {project_id}")
        self.project_id = project_id


class BaseAPIException(HTTPException):
    """
    Base exception for all API errors.
    Every error leaves the API as {"error": <message>}.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        error_code: ErrorCode,
    ):
        super().__init__(status_code=status_code, detail=message)
        self.message = message
        self.error_code = error_code


# --------------------------------------------------
# GLOBAL EXCEPTION HANDLERS
# --------------------------------------------------

async def base_api_exception_handler(request: Request, exc: BaseAPIException):
    logger.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.error_code.value}")
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.message},
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(exc.detail)},
        headers=getattr(exc, "headers", None),
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    message = ErrorMessages.INVALID_REQUEST
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        message = f"{location}: {first.get('msg')}" if location else first.get("msg", message)
    logger.info(f"{request.method} {request.url.path} -> 400 {message}")
    return JSONResponse(status_code=400, content={"error": message})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"error": ErrorMessages.INTERNAL_ERROR},
    )


# --------------------------------------------------
# CENTRAL ERROR FACTORY (ONLY PLACE TO RAISE ERRORS)
# --------------------------------------------------

def raise_api_error(
    status_code: int,
    message: str,
    error_code: ErrorCode,
):
    raise BaseAPIException(
        status_code=status_code,
        message=message,
        error_code=error_code,
    )


# --------------------------------------------------
# GENERIC HTTP HELPERS
# --------------------------------------------------

def raise_bad_request(message: str, error_code: ErrorCode = ErrorCode.BAD_REQUEST):
    raise_api_error(400, message, error_code)


def raise_unauthorized(
    message: str = ErrorMessages.INVALID_CREDENTIALS,
):
    raise_api_error(401, message, ErrorCode.INVALID_CREDENTIALS)


def raise_not_found(
    message: str = ErrorMessages.NOT_FOUND,
    error_code: ErrorCode = ErrorCode.NOT_FOUND,
):
    raise_api_error(404, message, error_code)


def raise_internal_error(
    message: str = ErrorMessages.INTERNAL_ERROR,
):
    raise_api_error(
        500,
        message,
        ErrorCode.INTERNAL_SERVER_ERROR,
    )


# --------------------------------------------------
# DOMAIN-SPECIFIC HELPERS
# --------------------------------------------------

def raise_project_not_found():
    raise_not_found(
        ErrorMessages.PROJECT_NOT_FOUND,
        ErrorCode.PROJECT_NOT_FOUND,
    )


def raise_issue_not_found():
    raise_not_found(
        ErrorMessages.ISSUE_NOT_FOUND,
        ErrorCode.ISSUE_NOT_FOUND,
    )


def raise_email_exists():
    raise_bad_request(ErrorMessages.EMAIL_EXISTS, ErrorCode.EMAIL_EXISTS)
