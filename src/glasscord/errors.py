from __future__ import annotations

from typing import Any


__all__ = (
    'BaseGlasscordException',
    'ConversionError',
    'FileLimitExceeded',
    'Forbidden',
    'HTTPException',
    'InvalidStateError',
    'NotFound',
    'ServerError',
    'Unauthorized',
)


class BaseGlasscordException(Exception):
    def __init__(self, *args, **kwargs) -> None:  # noqa: ANN002, ANN003
        super().__init__(*args, **kwargs)


class HTTPException(BaseGlasscordException):
    status_code: int = 0

    def __init__(
        self,
        detail: Any | None = None,  # noqa: ANN401
        status_code: int | None = None
    ) -> None:
        self.detail = detail

        if status_code is not None:
            self.status_code = status_code

        super().__init__(detail)


class Unauthorized(HTTPException):
    status_code: int = 401


class Forbidden(HTTPException):
    status_code: int = 403


class NotFound(HTTPException):
    status_code: int = 404


class ServerError(HTTPException):
    status_code: int = 500


class FileLimitExceeded(HTTPException):
    status_code: int = 413


class ConversionError(BaseGlasscordException):
    ...


class InvalidStateError(BaseGlasscordException):
    """an operation was called on an entity that cannot support it"""
