"""Base application exceptions."""

from __future__ import annotations


class ApplicationError(Exception):
    """애플리케이션 계층 기본 예외."""

    def __init__(self, message: str = "Application error occurred") -> None:
        self.message = message
        super().__init__(message)


class StoreFailureError(ApplicationError):
    """레코드 저장소(DB) 오류.

    내부 상세 정보는 로그에만 남기고 클라이언트에는 노출하지 않습니다.
    """

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__("Record store unavailable")


class ValidationFailedError(ApplicationError):
    """변경 요청 입력값이 유효하지 않음."""

    def __init__(self, message: str = "Validation failed") -> None:
        super().__init__(message)
