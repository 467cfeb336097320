"""Privacy commands - Adds or removes private fields of a character."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.armory.application.character.ports import CharacterCommandGateway
    from apps.armory.application.character.services import OwnershipGate, PrivacyService
    from apps.armory.application.common.ports import TransactionManager

logger = logging.getLogger(__name__)


class _PrivacyCommand:
    def __init__(
        self,
        ownership_gate: "OwnershipGate",
        command_gateway: "CharacterCommandGateway",
        transaction_manager: "TransactionManager",
        privacy_service: "PrivacyService",
    ) -> None:
        self._ownership_gate = ownership_gate
        self._command_gateway = command_gateway
        self._tx = transaction_manager
        self._privacy_service = privacy_service


class SetPrivacyCommand(_PrivacyCommand):
    """비공개 필드 추가 유스케이스."""

    async def execute(self, name: str, requester_email: str | None, privacy: str) -> tuple[str, ...]:
        """캐릭터의 비공개 필드를 추가합니다.

        필드 목록의 읽기-수정-쓰기는 저장소가 원자적으로 처리하므로
        같은 캐릭터에 대한 동시 요청도 서로의 변경을 덮어쓰지 않습니다.
        이미 비공개인 필드는 중복 저장하지 않습니다.

        Returns:
            변경 후 비공개 필드 목록

        Raises:
            InvalidPrivacyFieldError: 필드 이름 형식 오류
            MissingRequesterError: 요청자 이메일 없음
            NotCharacterOwnerError: 요청자 소유 캐릭터가 아님
        """
        field = self._privacy_service.validate_field(privacy)
        await self._ownership_gate.assert_owner(requester_email, name)

        try:
            fields = await self._command_gateway.add_privacy(name, field)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Privacy field set", extra={"character": name, "field": field})
        return fields


class RemovePrivacyCommand(_PrivacyCommand):
    """비공개 필드 제거 유스케이스."""

    async def execute(self, name: str, requester_email: str | None, privacy: str) -> tuple[str, ...]:
        """캐릭터의 비공개 필드를 제거합니다.

        Returns:
            변경 후 비공개 필드 목록

        Raises:
            InvalidPrivacyFieldError: 필드 이름 형식 오류
            MissingRequesterError: 요청자 이메일 없음
            NotCharacterOwnerError: 요청자 소유 캐릭터가 아님
        """
        field = self._privacy_service.validate_field(privacy)
        await self._ownership_gate.assert_owner(requester_email, name)

        try:
            fields = await self._command_gateway.remove_privacy(name, field)
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info("Privacy field removed", extra={"character": name, "field": field})
        return fields
