"""Token Account Writer Port."""

from __future__ import annotations

from typing import Protocol


class TokenAccountWriter(Protocol):
    """GW2 API 토큰의 계정 정보 갱신 포트.

    요청 세션과 무관하게 동작해야 합니다 (백그라운드 작업에서 호출됨).
    """

    async def update_account_name(self, credential_id: int, account_name: str) -> None:
        ...
