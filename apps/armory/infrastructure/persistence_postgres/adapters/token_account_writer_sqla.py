"""SQLAlchemy Token Account Writer Implementation."""

from __future__ import annotations

from sqlalchemy import update
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from apps.armory.infrastructure.persistence_postgres.errors import store_errors
from apps.armory.infrastructure.persistence_postgres.tables import gw2_api_tokens_table


class SqlaTokenAccountWriter:
    """GW2 API 토큰 계정 정보 갱신 SQLAlchemy 구현.

    백그라운드 선조회에서 호출되므로 자체 세션을 사용합니다.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def update_account_name(self, credential_id: int, account_name: str) -> None:
        """토큰의 account_name을 갱신합니다."""
        stmt = (
            update(gw2_api_tokens_table)
            .where(gw2_api_tokens_table.c.id == credential_id)
            .values(account_name=account_name)
        )

        with store_errors("update_token_account_name"):
            async with self._session_factory() as session:
                await session.execute(stmt)
                await session.commit()
