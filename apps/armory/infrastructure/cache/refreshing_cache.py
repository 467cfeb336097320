"""Single-flight, stale-while-revalidate in-process cache.

프로세스 시작 시 한 번 생성되어 의존성 주입으로 전달됩니다.

State machine (key별):
    Empty → Pending → Fresh → Stale → Pending(refresh) → Fresh → ...

Architecture:
    - Empty: 첫 접근 시 로드, 동시 요청은 하나의 로드 Task를 공유 (single-flight)
    - Fresh: 캐시 값 즉시 반환
    - Stale: 만료된 값을 즉시 반환하고 백그라운드 갱신 (key당 최대 1개)
    - 값은 교체만 되고 변경되지 않음
"""

from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable, Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class CacheState(str, Enum):
    """캐시 key 상태."""

    EMPTY = "empty"
    PENDING = "pending"
    FRESH = "fresh"
    STALE = "stale"


@dataclass(frozen=True, slots=True)
class CacheEntry(Generic[T]):
    """캐시된 값.

    Attributes:
        value: 캐시 값
        computed_at: 계산 완료 시각 (clock 기준)
        ttl: 유효 기간 (초)
    """

    value: T
    computed_at: float
    ttl: float

    def is_fresh(self, now: float) -> bool:
        return now - self.computed_at < self.ttl


class RefreshingCache:
    """Single-flight stale-while-revalidate 캐시.

    asyncio 이벤트 루프 안에서만 사용합니다.
    상태 확인과 Task 등록 사이에 await가 없으므로 별도 Lock이 필요 없습니다.

    Usage:
        cache = RefreshingCache()
        names = await cache.get("armory:public_characters", reader.list_public, ttl=300)
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        """Initialize.

        Args:
            clock: 단조 증가 시계 (테스트용)
        """
        self._clock = clock
        self._entries: dict[str, CacheEntry[Any]] = {}
        self._inflight: dict[str, asyncio.Task[Any]] = {}

    async def get(self, key: str, loader: Callable[[], Awaitable[T]], ttl: float) -> T:
        """캐시 값을 반환합니다.

        Args:
            key: 캐시 키
            loader: 값 계산 함수 (캐시 미스/만료 시 호출)
            ttl: 유효 기간 (초)

        Returns:
            캐시 값 (만료된 경우 이전 값)

        Raises:
            loader가 발생시킨 예외 (Empty 상태의 첫 로드 실패 시, 대기 중인 모든 호출자에게 동일하게 전파)
        """
        entry = self._entries.get(key)

        if entry is None:
            # 호출자가 취소되어도 로드는 계속 진행 (다른 대기자 공유)
            return await asyncio.shield(self._ensure_load(key, loader, ttl))

        if not entry.is_fresh(self._clock()) and key not in self._inflight:
            logger.debug("Cache stale, refreshing in background", extra={"key": key})
            self._ensure_load(key, loader, ttl)

        return entry.value

    def state(self, key: str) -> CacheState:
        """key의 현재 상태를 반환합니다."""
        entry = self._entries.get(key)
        if key in self._inflight:
            return CacheState.PENDING
        if entry is None:
            return CacheState.EMPTY
        if entry.is_fresh(self._clock()):
            return CacheState.FRESH
        return CacheState.STALE

    def peek(self, key: str) -> CacheEntry[Any] | None:
        """갱신을 유발하지 않고 캐시 엔트리를 조회합니다."""
        return self._entries.get(key)

    async def close(self) -> None:
        """진행 중인 로드를 취소합니다.

        엔트리는 순수 데이터이므로 별도 정리가 필요 없습니다.
        """
        tasks = list(self._inflight.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
        self._inflight.clear()

    def _ensure_load(
        self, key: str, loader: Callable[[], Awaitable[T]], ttl: float
    ) -> asyncio.Task[T]:
        task = self._inflight.get(key)
        if task is None:
            task = asyncio.create_task(self._load(key, loader, ttl), name=f"cache-load:{key}")
            task.add_done_callback(lambda t: self._on_load_done(key, t))
            self._inflight[key] = task
        return task

    async def _load(self, key: str, loader: Callable[[], Awaitable[T]], ttl: float) -> T:
        try:
            value = await loader()
            self._entries[key] = CacheEntry(value=value, computed_at=self._clock(), ttl=ttl)
            logger.debug("Cache loaded", extra={"key": key, "ttl": ttl})
            return value
        finally:
            self._inflight.pop(key, None)

    def _on_load_done(self, key: str, task: asyncio.Task[Any]) -> None:
        if task.cancelled():
            return
        error = task.exception()
        if error is not None:
            # 만료된 값이 있으면 계속 제공되고, 다음 조회 시 재시도
            logger.warning(
                "Cache load failed",
                extra={"key": key, "error": str(error), "has_stale": key in self._entries},
            )
