"""Profile Source Port."""

from __future__ import annotations

from typing import Any, Mapping, Protocol


class ProfileSource(Protocol):
    """GW2 API 포트.

    실패 시 ProfileSourceError를 발생시킵니다.
    """

    async def fetch_character(self, token: str, name: str) -> Mapping[str, Any]:
        """토큰 소유 계정의 캐릭터 정보를 조회합니다."""
        ...

    async def fetch_account(self, token: str) -> Mapping[str, Any]:
        """토큰 소유 계정 정보를 조회합니다."""
        ...
