"""Guild Reader Port."""

from __future__ import annotations

from typing import Protocol

from apps.armory.domain.entities import GuildRecord


class GuildReader(Protocol):
    """길드 조회 포트."""

    async def find_guild(self, guild_id: str) -> GuildRecord | None:
        """길드 ID로 길드를 조회합니다."""
        ...
