"""ListCharactersQuery."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

if TYPE_CHECKING:
    from apps.armory.application.character.ports import CharacterQueryGateway
    from apps.armory.domain.entities import CharacterRecord


class ListCharactersQuery:
    """소유자 이메일/별칭으로 캐릭터 목록을 조회합니다.

    필터가 없으면 전체 목록을 반환합니다.
    """

    def __init__(self, query_gateway: "CharacterQueryGateway") -> None:
        self._query_gateway = query_gateway

    async def execute(
        self, *, email: str | None = None, alias: str | None = None
    ) -> Sequence["CharacterRecord"]:
        return await self._query_gateway.list_by_owner(email=email or None, alias=alias or None)
