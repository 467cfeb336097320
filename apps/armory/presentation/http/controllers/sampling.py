"""Sampling HTTP Controller.

`/characters/{name}`보다 먼저 등록되어야 합니다.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from apps.armory.application.sampling.queries import (
    GetCharactersOfTheDayQuery,
    GetRandomCharactersQuery,
)
from apps.armory.setup.dependencies import (
    get_characters_of_the_day_query,
    get_random_characters_query,
)

router = APIRouter(prefix="/characters", tags=["sampling"])


@router.get(
    "/random",
    response_model=list[str],
    summary="무작위 캐릭터",
    description="공개 캐릭터 중 중복 없이 무작위로 추출합니다. 최대 개수를 넘는 요청은 보정됩니다.",
)
async def random_characters(
    query: Annotated[GetRandomCharactersQuery, Depends(get_random_characters_query)],
    n: Annotated[int | None, Query(description="추출 개수")] = None,
) -> list[str]:
    """무작위 캐릭터 이름 목록을 반환합니다."""
    return await query.execute(n)


@router.get(
    "/of-the-day",
    response_model=list[str],
    summary="오늘의 캐릭터",
)
async def characters_of_the_day(
    query: Annotated[GetCharactersOfTheDayQuery, Depends(get_characters_of_the_day_query)],
) -> list[str]:
    """오늘의 캐릭터 이름 목록을 반환합니다."""
    return await query.execute()
