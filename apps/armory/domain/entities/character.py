"""Character Entity.

캐릭터 권한/공개 설정 엔티티입니다.
GW2 API에서 가져오는 실시간 데이터는 포함하지 않습니다.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from apps.armory.domain.entities.account import Credential

PRIVACY_SEPARATOR = "|"


def parse_privacy(raw: str | None) -> tuple[str, ...]:
    """저장된 privacy 문자열을 필드 목록으로 변환합니다.

    `|`로 분리하고 빈 세그먼트는 버립니다. ("race||level|" -> ("race", "level"))
    """
    return tuple(segment for segment in (raw or "").split(PRIVACY_SEPARATOR) if segment)


def join_privacy(fields: tuple[str, ...] | list[str]) -> str:
    """필드 목록을 저장용 privacy 문자열로 변환합니다."""
    return PRIVACY_SEPARATOR.join(fields)


def add_privacy_field(raw: str | None, field: str) -> str:
    """privacy 문자열에 필드를 추가합니다 (이미 있으면 그대로)."""
    fields = parse_privacy(raw)
    if field in fields:
        return join_privacy(fields)
    return join_privacy((*fields, field))


def remove_privacy_field(raw: str | None, field: str) -> str:
    """privacy 문자열에서 필드를 제거합니다."""
    return join_privacy(tuple(f for f in parse_privacy(raw) if f != field))


@dataclass
class CharacterRecord:
    """캐릭터 레코드 엔티티.

    Attributes:
        id: 캐릭터 ID
        name: 캐릭터 이름 (unique)
        credential: 캐릭터가 속한 GW2 API 토큰
        guild_id: 소속 길드 ID (옵션)
        privacy: `|`로 연결된 비공개 필드 문자열
        show_public: 공개 목록 노출 여부
        show_guild: 길드원에게 노출 여부
        show_builds: 빌드 노출 여부
        created_at: 생성 시각
        updated_at: 수정 시각
    """

    id: int
    name: str
    credential: Credential
    guild_id: str | None = None
    privacy: str = ""
    show_public: bool = True
    show_guild: bool = True
    show_builds: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @property
    def privacy_fields(self) -> tuple[str, ...]:
        return parse_privacy(self.privacy)

    def is_owned_by(self, email: str | None) -> bool:
        """요청자가 이 캐릭터의 소유자인지 확인합니다.

        빈 이메일(익명)은 어떤 소유자와도 일치하지 않습니다.
        """
        if not email:
            return False
        return self.credential.owner.email == email

    def __hash__(self) -> int:
        return hash(self.id)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterRecord):
            return False
        return self.id == other.id
