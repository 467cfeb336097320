"""GetCharactersOfTheDayQuery.

오늘의 캐릭터 조회 Query입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.armory.application.sampling.ports import ValueCache
    from apps.armory.application.sampling.queries.get_random_characters import (
        GetRandomCharactersQuery,
    )

CHARACTERS_OF_THE_DAY_KEY = "armory:characters_of_the_day"


class GetCharactersOfTheDayQuery:
    """오늘의 캐릭터 Query.

    무작위 추출 결과 자체를 공개 목록과 별도의 TTL(일 단위)로 캐시합니다.
    """

    def __init__(
        self,
        random_query: "GetRandomCharactersQuery",
        cache: "ValueCache",
        count: int,
        ttl_seconds: float,
    ) -> None:
        """Initialize.

        Args:
            random_query: 무작위 추출 Query
            cache: 값 캐시
            count: 오늘의 캐릭터 개수
            ttl_seconds: 오늘의 캐릭터 갱신 주기
        """
        self._random_query = random_query
        self._cache = cache
        self._count = count
        self._ttl = ttl_seconds

    async def execute(self) -> list[str]:
        """오늘의 캐릭터 이름 목록을 반환합니다."""
        names = await self._cache.get(CHARACTERS_OF_THE_DAY_KEY, self._draw, self._ttl)
        return list(names)

    async def _draw(self) -> tuple[str, ...]:
        return tuple(await self._random_query.execute(self._count))
