"""Token Prefetch Hint Port."""

from __future__ import annotations

from typing import Protocol

from apps.armory.domain.entities import Credential


class TokenPrefetchHint(Protocol):
    """토큰 데이터 선조회 힌트 포트.

    호출 즉시 반환해야 하며 실패를 호출자에게 전파하지 않습니다.
    응답 정합성에는 영향을 주지 않습니다.
    """

    def notify(self, credential: Credential) -> None:
        ...
