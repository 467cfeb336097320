"""Cached Public Character Reader Implementation.

RefreshingCache를 사용하는 PublicCharacterReader 데코레이터입니다.

Flow:
    1. 캐시가 비어 있으면 delegate(DB Reader) 조회 (동시 요청은 하나의 조회 공유)
    2. 캐시가 유효하면 즉시 반환
    3. 캐시가 만료되었으면 이전 값을 반환하고 백그라운드에서 전체 목록 재조회
"""

from __future__ import annotations

from typing import Sequence

from apps.armory.application.sampling.ports import PublicCharacterReader
from apps.armory.infrastructure.cache.refreshing_cache import RefreshingCache

PUBLIC_CHARACTERS_KEY = "armory:public_characters"


class CachedPublicCharacterReader(PublicCharacterReader):
    """캐시를 활용한 공개 캐릭터 Reader.

    delegate는 요청 세션에 묶이지 않아야 합니다 (백그라운드 갱신에서 호출됨).
    """

    def __init__(
        self,
        delegate: PublicCharacterReader,
        cache: RefreshingCache,
        ttl_seconds: float,
    ) -> None:
        """Initialize.

        Args:
            delegate: 실제 DB Reader
            cache: 공유 캐시
            ttl_seconds: 공개 목록 갱신 주기
        """
        self._delegate = delegate
        self._cache = cache
        self._ttl = ttl_seconds

    async def list_public(self) -> Sequence[str]:
        """캐시된 공개 캐릭터 이름 목록을 조회합니다."""
        return await self._cache.get(PUBLIC_CHARACTERS_KEY, self._load, self._ttl)

    async def _load(self) -> tuple[str, ...]:
        return tuple(await self._delegate.list_public())
