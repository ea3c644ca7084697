import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import status
from fastapi.exceptions import RequestValidationError
from fastapi.requests import Request
from fastapi.responses import JSONResponse
from sqlalchemy.exc import IntegrityError, DataError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

"""
400: Bad Request  - 잘못된 id/본문, 허용되지 않은 쿼리 값, DB 제약 위반
404: Not Found    - 존재하지 않는 게시글/댓글/유저/토픽, 라우트
500: Internal Server Error - 그 외 모든 예외 (DB 에러 메시지는 노출하지 않는다)
"""


class NcNewsException(Exception):
    """Base exception for all application errors."""
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_msg: str = "Internal Server Error"

    def __init__(self, msg: str | None = None):
        self.msg = msg or self.default_msg
        super().__init__(self.msg)


class BadRequest(NcNewsException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_msg = "Bad request"


class InvalidSortColumn(BadRequest):
    default_msg = "Invalid sort_by query"


class InvalidOrder(BadRequest):
    default_msg = "Invalid order query"


class InvalidPagination(BadRequest):
    default_msg = "Limit and page number must be greater than 0"


class InternalError(NcNewsException):
    """Anything unanticipated. Rendered without the underlying error text."""


class NotFound(NcNewsException):
    status_code = status.HTTP_404_NOT_FOUND
    default_msg = "Not found"

    @classmethod
    def of(cls, entity: str) -> "NotFound":
        return cls(f"{entity.capitalize()} not found")


@asynccontextmanager
async def translate_db_errors(db: AsyncSession) -> AsyncIterator[None]:
    """Turn constraint/input errors raised by the store into ``BadRequest``.

    Covers FK violations (unknown author/topic/username), NOT NULL and unique
    violations and invalid input syntax. The session is rolled back so it can
    be reused by the rest of the request.
    """
    try:
        yield
    except (IntegrityError, DataError) as e:
        await db.rollback()
        logger.info("Storage rejected statement: %s", type(e.orig).__name__ if e.orig else type(e).__name__)
        raise BadRequest() from e


async def ncnews_exception_handler(request: Request, exc: NcNewsException):
    logger.warning(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.msg}")
    return JSONResponse(status_code=exc.status_code, content={"msg": exc.msg})


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    # 요청 본문/경로 파라미터 검증 실패는 422가 아니라 400으로 내려준다.
    logger.warning(f"Validation error on {request.method} {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"msg": BadRequest.default_msg})


async def custom_http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"msg": "Route not found"})
    return JSONResponse(status_code=exc.status_code, content={"msg": f"{exc.detail}"})


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"Unhandled exception on {request.method} {request.url.path}", exc_info=exc)
    # 원래 예외 메시지는 로그에만 남기고 응답은 InternalError로 바꾼다.
    error = InternalError()
    return JSONResponse(status_code=error.status_code, content={"msg": error.msg})
