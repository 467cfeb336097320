"""OwnershipGate.

캐릭터 변경 전 소유권을 확인합니다.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from apps.armory.application.character.exceptions import NotCharacterOwnerError
from apps.armory.application.common.exceptions import MissingRequesterError

if TYPE_CHECKING:
    from apps.armory.application.character.ports import CharacterQueryGateway
    from apps.armory.domain.entities import CharacterRecord

logger = logging.getLogger(__name__)


class OwnershipGate:
    """캐릭터 소유권 확인기.

    요청자 계정이 소유한 캐릭터 중에서만 조회하므로
    캐릭터가 없는 경우와 소유자가 아닌 경우를 구분하지 않습니다.
    """

    def __init__(self, query_gateway: "CharacterQueryGateway") -> None:
        self._query_gateway = query_gateway

    async def assert_owner(self, requester_email: str | None, name: str) -> "CharacterRecord":
        """요청자가 캐릭터 소유자인지 확인합니다.

        Args:
            requester_email: 요청자 이메일
            name: 캐릭터 이름

        Returns:
            소유권이 확인된 캐릭터

        Raises:
            MissingRequesterError: 요청자 이메일 없음
            NotCharacterOwnerError: 요청자가 소유한 해당 이름의 캐릭터가 없음
        """
        if not requester_email:
            raise MissingRequesterError()

        character = await self._query_gateway.find_by_name(name, owner_email=requester_email)
        if character is None:
            logger.info("Ownership check rejected", extra={"character": name})
            raise NotCharacterOwnerError(name)

        return character
