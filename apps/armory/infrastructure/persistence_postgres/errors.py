"""SQLAlchemy error translation."""

import asyncio
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import SQLAlchemyError

from apps.armory.application.common.exceptions import StoreFailureError

logger = logging.getLogger(__name__)

# asyncpg는 연결 실패 시 OSError(ConnectionRefusedError 등)를 그대로 올림
STORE_ERRORS = (SQLAlchemyError, OSError, asyncio.TimeoutError)


@contextmanager
def store_errors(operation: str) -> Iterator[None]:
    """DB 예외(SQLAlchemy, 연결 실패, 타임아웃)를 StoreFailureError로 변환합니다."""
    try:
        yield
    except STORE_ERRORS as e:
        logger.error(
            "Record store failure",
            extra={"operation": operation, "error": str(e), "error_type": type(e).__name__},
        )
        raise StoreFailureError(operation) from e
