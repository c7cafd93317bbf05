from typing import Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    error: str
    message: str
    path: Optional[str] = None
    correlation_id: Optional[str] = None


class BaseAPIException(Exception):
    def __init__(
        self,
        error: str,
        message: str,
        status_code: int,
        path: Optional[str] = None
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.path = path
        super().__init__(message)

    def to_error_response(self, correlation_id: Optional[str] = None) -> ErrorResponse:
        return ErrorResponse(
            error=self.error,
            message=self.message,
            path=self.path,
            correlation_id=correlation_id
        )


class BadRequestError(BaseAPIException):
    def __init__(
        self,
        error: str = "Bad request",
        message: str = "The request was invalid or malformed",
        path: Optional[str] = None
    ):
        super().__init__(
            error=error,
            message=message,
            status_code=400,
            path=path
        )


class ResourceNotFoundError(BaseAPIException):
    def __init__(
        self,
        error: str = "Not found",
        message: str = "The requested path does not exist",
        path: Optional[str] = None
    ):
        super().__init__(
            error=error,
            message=message,
            status_code=404,
            path=path
        )


class InternalServerError(BaseAPIException):
    def __init__(
        self,
        error: str = "Internal server error",
        message: str = "An unexpected error occurred",
        path: Optional[str] = None
    ):
        super().__init__(
            error=error,
            message=message,
            status_code=500,
            path=path
        )
