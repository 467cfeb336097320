"""Character exceptions."""

from __future__ import annotations

from apps.armory.application.common.exceptions.base import (
    ApplicationError,
    ValidationFailedError,
)


class CharacterNotFoundError(ApplicationError):
    """캐릭터를 찾을 수 없을 때 발생하는 예외."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Character not found")


class NotCharacterOwnerError(ApplicationError):
    """요청자가 캐릭터 소유자가 아님.

    캐릭터가 존재하지 않는 경우에도 동일하게 발생합니다.
    (존재 여부를 노출하지 않기 위함)
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__("Not your character")


class ProfileSourceError(ApplicationError):
    """GW2 API 호출 실패 (네트워크, 인증, 타임아웃, rate limit)."""

    def __init__(self, reason: str, status_code: int | None = None) -> None:
        self.reason = reason
        self.status_code = status_code
        super().__init__(f"GW2 API unavailable: {reason}")


class InvalidPrivacyFieldError(ValidationFailedError):
    """유효하지 않은 비공개 필드 이름."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"Invalid privacy field: {field!r}")


class NoChangesProvidedError(ValidationFailedError):
    """변경사항이 없을 때 발생하는 예외."""

    def __init__(self) -> None:
        super().__init__("No changes provided")
