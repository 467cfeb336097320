"""SQLAlchemy Guild Reader Implementation."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from apps.armory.domain.entities import GuildRecord
from apps.armory.infrastructure.persistence_postgres.errors import store_errors
from apps.armory.infrastructure.persistence_postgres.mappers import row_to_guild
from apps.armory.infrastructure.persistence_postgres.tables import guilds_table


class SqlaGuildReader:
    """SQLAlchemy 기반 길드 Reader."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_guild(self, guild_id: str) -> GuildRecord | None:
        """길드 ID로 길드를 조회합니다."""
        stmt = select(guilds_table).where(guilds_table.c.id == guild_id)

        with store_errors("find_guild"):
            result = await self._session.execute(stmt)
            row = result.mappings().one_or_none()

        return row_to_guild(row) if row else None
