from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

BOOK_NOT_FOUND = "Book not found"
FIELDS_REQUIRED = "All fields (title, author, year) are required"
YEAR_TOO_EARLY = "Year must be greater than 1900"
EMPTY_TEXT_FIELD = "Title and author must not be empty"
TITLE_QUERY_REQUIRED = "Title query parameter is required"


class BookTrackerError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidBookError(BookTrackerError):
    status_code = status.HTTP_400_BAD_REQUEST


class BookNotFoundError(BookTrackerError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, message: str = BOOK_NOT_FOUND):
        super().__init__(message)


def error_body(message: str) -> dict:
    return {"success": False, "message": message}


async def book_tracker_error_handler(request: Request, exc: BookTrackerError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=error_body(exc.message))


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = exc.errors()
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
        detail = f"{location}: {first.get('msg')}" if location else first.get("msg")
    else:
        detail = "malformed payload"
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_body(f"Invalid request: {detail}"),
    )


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


def register_error_handlers(app) -> None:
    app.add_exception_handler(BookTrackerError, book_tracker_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
