"""SQLAlchemy Public Character Reader Implementation."""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from apps.armory.application.sampling.ports import PublicCharacterReader
from apps.armory.infrastructure.persistence_postgres.errors import store_errors
from apps.armory.infrastructure.persistence_postgres.tables import characters_table


class SqlaPublicCharacterReader(PublicCharacterReader):
    """SQLAlchemy 기반 공개 캐릭터 Reader.

    캐시 백그라운드 갱신에서 호출되므로 요청 세션 대신
    세션 팩토리로 조회마다 새 세션을 엽니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize.

        Args:
            session_factory: SQLAlchemy 비동기 세션 팩토리
        """
        self._session_factory = session_factory

    async def list_public(self) -> Sequence[str]:
        """공개 캐릭터 이름 목록을 조회합니다."""
        stmt = (
            select(characters_table.c.name)
            .where(characters_table.c.show_public.is_(True))
            .order_by(characters_table.c.name)
        )

        with store_errors("list_public_characters"):
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
