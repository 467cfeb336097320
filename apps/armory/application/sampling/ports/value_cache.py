"""Value Cache Port."""

from __future__ import annotations

from typing import Awaitable, Callable, Protocol, TypeVar

T = TypeVar("T")


class ValueCache(Protocol):
    """TTL 기반 값 캐시 포트.

    만료된 값은 즉시 반환하고 백그라운드에서 갱신합니다 (stale-while-revalidate).
    """

    async def get(self, key: str, loader: Callable[[], Awaitable[T]], ttl: float) -> T:
        ...
