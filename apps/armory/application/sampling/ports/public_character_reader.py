"""Public Character Reader Port."""

from abc import ABC, abstractmethod
from typing import Sequence


class PublicCharacterReader(ABC):
    """공개 캐릭터 목록 조회 포트.

    인프라스트럭처 계층에서 구현됩니다.
    """

    @abstractmethod
    async def list_public(self) -> Sequence[str]:
        """공개(show_public) 캐릭터 이름 목록을 조회합니다.

        Returns:
            캐릭터 이름 목록
        """
        ...
