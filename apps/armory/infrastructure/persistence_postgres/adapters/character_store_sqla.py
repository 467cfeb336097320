"""SQLAlchemy Character Store Implementation."""

from __future__ import annotations

from typing import Any, Callable, Mapping, Sequence

from sqlalchemy import Select, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from apps.armory.application.character.exceptions import CharacterNotFoundError
from apps.armory.domain.entities import (
    CharacterRecord,
    add_privacy_field,
    parse_privacy,
    remove_privacy_field,
)
from apps.armory.infrastructure.persistence_postgres.errors import store_errors
from apps.armory.infrastructure.persistence_postgres.mappers import row_to_character
from apps.armory.infrastructure.persistence_postgres.tables import (
    characters_table,
    gw2_api_tokens_table,
    users_table,
)

UPDATABLE_FIELDS = frozenset({"show_public", "show_guild", "show_builds"})


def _select_characters() -> Select:
    """캐릭터 + 토큰 + 소유자 조인 조회문."""
    return select(
        characters_table,
        gw2_api_tokens_table.c.token,
        gw2_api_tokens_table.c.account_name,
        gw2_api_tokens_table.c.user_id,
        users_table.c.email,
        users_table.c.alias,
    ).select_from(
        characters_table.join(
            gw2_api_tokens_table,
            characters_table.c.gw2_api_token_id == gw2_api_tokens_table.c.id,
        ).join(users_table, gw2_api_tokens_table.c.user_id == users_table.c.id)
    )


class SqlaCharacterStore:
    """SQLAlchemy 기반 캐릭터 저장소.

    CharacterQueryGateway와 CharacterCommandGateway 포트를 구현합니다.
    커밋은 TransactionManager가 담당합니다.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize.

        Args:
            session: SQLAlchemy 비동기 세션
        """
        self._session = session

    async def find_by_name(
        self, name: str, owner_email: str | None = None
    ) -> CharacterRecord | None:
        """이름으로 캐릭터를 조회합니다."""
        stmt = _select_characters().where(characters_table.c.name == name)
        if owner_email is not None:
            stmt = stmt.where(users_table.c.email == owner_email)

        with store_errors("find_character_by_name"):
            result = await self._session.execute(stmt)
            row = result.mappings().one_or_none()

        return row_to_character(row) if row else None

    async def find_by_id(self, character_id: int) -> CharacterRecord | None:
        """ID로 캐릭터를 조회합니다."""
        stmt = _select_characters().where(characters_table.c.id == character_id)

        with store_errors("find_character_by_id"):
            result = await self._session.execute(stmt)
            row = result.mappings().one_or_none()

        return row_to_character(row) if row else None

    async def list_by_owner(
        self, *, email: str | None = None, alias: str | None = None
    ) -> Sequence[CharacterRecord]:
        """소유자 이메일 또는 별칭으로 캐릭터 목록을 조회합니다."""
        stmt = _select_characters().order_by(characters_table.c.name)

        conditions = []
        if email:
            conditions.append(users_table.c.email == email)
        if alias:
            conditions.append(users_table.c.alias == alias)
        if conditions:
            stmt = stmt.where(or_(*conditions))

        with store_errors("list_characters"):
            result = await self._session.execute(stmt)
            rows = result.mappings().all()

        return [row_to_character(row) for row in rows]

    async def update(self, character_id: int, fields: Mapping[str, Any]) -> CharacterRecord:
        """캐릭터 설정을 변경하고 변경된 레코드를 반환합니다."""
        values = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        stmt = (
            update(characters_table)
            .where(characters_table.c.id == character_id)
            .values(**values, updated_at=func.now())
        )

        with store_errors("update_character"):
            await self._session.execute(stmt)

        character = await self.find_by_id(character_id)
        if character is None:
            raise CharacterNotFoundError(str(character_id))
        return character

    async def add_privacy(self, name: str, field: str) -> tuple[str, ...]:
        """비공개 필드를 추가합니다 (행 잠금)."""
        return await self._change_privacy(name, field, add_privacy_field, "add_privacy")

    async def remove_privacy(self, name: str, field: str) -> tuple[str, ...]:
        """비공개 필드를 제거합니다 (행 잠금)."""
        return await self._change_privacy(name, field, remove_privacy_field, "remove_privacy")

    async def _change_privacy(
        self,
        name: str,
        field: str,
        change: Callable[[str | None, str], str],
        operation: str,
    ) -> tuple[str, ...]:
        # SELECT ... FOR UPDATE 잠금은 TransactionManager.commit/rollback까지 유지됨
        locked = (
            select(characters_table.c.privacy)
            .where(characters_table.c.name == name)
            .with_for_update()
        )

        with store_errors(operation):
            result = await self._session.execute(locked)
            current = result.scalar_one_or_none()

        if current is None:
            raise CharacterNotFoundError(name)

        privacy = change(current, field)
        stmt = (
            update(characters_table)
            .where(characters_table.c.name == name)
            .values(privacy=privacy, updated_at=func.now())
        )

        with store_errors(operation):
            await self._session.execute(stmt)

        return parse_privacy(privacy)
