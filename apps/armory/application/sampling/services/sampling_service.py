"""SamplingService.

무작위 캐릭터 추출 정책을 담당합니다.
"""

from __future__ import annotations

import random
from typing import Sequence


class SamplingService:
    """캐릭터 샘플링 서비스."""

    def __init__(
        self,
        default_size: int,
        max_size: int,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize.

        Args:
            default_size: 요청 개수가 없을 때 사용할 개수
            max_size: 한 번에 추출할 수 있는 최대 개수
            rng: 난수 생성기 (테스트용)
        """
        self._default_size = default_size
        self._max_size = max_size
        self._rng = rng or random.Random()

    def clamp(self, n: int | None) -> int:
        """요청 개수를 [0, max_size] 범위로 보정합니다."""
        if n is None:
            n = self._default_size
        return max(0, min(n, self._max_size))

    def sample(self, names: Sequence[str], n: int | None = None) -> list[str]:
        """이름 목록에서 중복 없이 무작위로 추출합니다.

        정책:
        - 추출 개수는 min(n, max_size)
        - 목록이 비어 있으면 빈 목록
        - 목록이 요청 개수보다 작으면 전체를 섞어서 반환

        Args:
            names: 공개 캐릭터 이름 목록
            n: 요청 개수 (None이면 default_size)

        Returns:
            추출된 이름 목록
        """
        unique = list(dict.fromkeys(names))
        size = min(self.clamp(n), len(unique))
        return self._rng.sample(unique, size)
