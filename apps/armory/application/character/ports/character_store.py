"""Character Store Ports."""

from __future__ import annotations

from typing import Any, Mapping, Protocol, Sequence

from apps.armory.domain.entities import CharacterRecord


class CharacterQueryGateway(Protocol):
    """캐릭터 레코드 조회 포트."""

    async def find_by_name(
        self, name: str, owner_email: str | None = None
    ) -> CharacterRecord | None:
        """이름으로 캐릭터를 조회합니다.

        Args:
            name: 캐릭터 이름
            owner_email: 지정하면 해당 이메일 사용자가 소유한 캐릭터로 제한

        Returns:
            토큰/소유자 정보가 포함된 캐릭터 또는 None
        """
        ...

    async def list_by_owner(
        self, *, email: str | None = None, alias: str | None = None
    ) -> Sequence[CharacterRecord]:
        """소유자 이메일 또는 별칭으로 캐릭터 목록을 조회합니다.

        둘 다 비어 있으면 전체 목록을 반환합니다. 이름순 정렬.
        """
        ...


class CharacterCommandGateway(Protocol):
    """캐릭터 레코드 변경 포트."""

    async def update(self, character_id: int, fields: Mapping[str, Any]) -> CharacterRecord:
        """캐릭터 설정을 변경하고 변경된 레코드를 반환합니다."""
        ...

    async def add_privacy(self, name: str, field: str) -> tuple[str, ...]:
        """비공개 필드를 추가하고 변경 후 목록을 반환합니다.

        읽기와 쓰기는 같은 트랜잭션에서 행 잠금으로 원자적으로 수행되어야 합니다.
        동시에 다른 필드를 추가해도 어느 쪽도 유실되지 않습니다.
        이미 있는 필드는 중복 저장하지 않습니다.

        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        ...

    async def remove_privacy(self, name: str, field: str) -> tuple[str, ...]:
        """비공개 필드를 제거하고 변경 후 목록을 반환합니다 (원자적).

        Raises:
            CharacterNotFoundError: 캐릭터 없음
        """
        ...
