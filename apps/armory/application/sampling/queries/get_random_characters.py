"""GetRandomCharactersQuery.

공개 캐릭터 무작위 추출 Query입니다.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from apps.armory.application.sampling.ports import PublicCharacterReader
    from apps.armory.application.sampling.services import SamplingService


class GetRandomCharactersQuery:
    """공개 캐릭터 무작위 추출 Query.

    캐시된 공개 목록에서 추출합니다.
    """

    def __init__(self, reader: "PublicCharacterReader", service: "SamplingService") -> None:
        """Initialize.

        Args:
            reader: 공개 캐릭터 Reader (캐시 데코레이터)
            service: 샘플링 서비스
        """
        self._reader = reader
        self._service = service

    async def execute(self, n: int | None = None) -> list[str]:
        """무작위 캐릭터 이름 목록을 반환합니다.

        Args:
            n: 요청 개수 (None이면 기본값)

        Returns:
            중복 없는 캐릭터 이름 목록 (공개 목록이 비어 있으면 빈 목록)
        """
        names = await self._reader.list_public()
        if not names:
            return []

        return self._service.sample(names, n)
