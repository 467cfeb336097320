"""Update character command - Updates character visibility settings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.armory.application.character.exceptions import NoChangesProvidedError

if TYPE_CHECKING:
    from apps.armory.application.character.dto import CharacterUpdate
    from apps.armory.application.character.ports import CharacterCommandGateway
    from apps.armory.application.character.services import OwnershipGate
    from apps.armory.application.common.ports import TransactionManager
    from apps.armory.domain.entities import CharacterRecord

logger = logging.getLogger(__name__)


class UpdateCharacterCommand:
    """캐릭터 설정 변경 유스케이스."""

    def __init__(
        self,
        ownership_gate: "OwnershipGate",
        command_gateway: "CharacterCommandGateway",
        transaction_manager: "TransactionManager",
    ) -> None:
        self._ownership_gate = ownership_gate
        self._command_gateway = command_gateway
        self._tx = transaction_manager

    async def execute(self, requester_email: str | None, update: "CharacterUpdate") -> "CharacterRecord":
        """캐릭터 설정을 변경합니다.

        Args:
            requester_email: 요청자 이메일
            update: 변경할 설정

        Returns:
            변경된 캐릭터

        Raises:
            MissingRequesterError: 요청자 이메일 없음
            NotCharacterOwnerError: 요청자 소유 캐릭터가 아님
            NoChangesProvidedError: 변경사항 없음
        """
        character = await self._ownership_gate.assert_owner(requester_email, update.name)

        if not update.has_changes():
            raise NoChangesProvidedError()

        try:
            updated = await self._command_gateway.update(character.id, update.changes())
            await self._tx.commit()
        except Exception:
            await self._tx.rollback()
            raise

        logger.info(
            "Character updated",
            extra={"character": update.name, "fields": sorted(update.changes())},
        )
        return updated
