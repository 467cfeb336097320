"""Character DTOs."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping


@dataclass(frozen=True, slots=True)
class ProfileSnapshot:
    """GW2 API에서 가져온 캐릭터 스냅샷.

    요청마다 새로 만들어지며 저장되지 않습니다.

    Attributes:
        fields: GW2 API 응답 필드 (race, level, profession 등)
        api_token_available: 이번 요청에서 GW2 API 호출이 성공했는지 여부
    """

    fields: Mapping[str, Any] = field(default_factory=dict)
    api_token_available: bool = False

    @classmethod
    def available(cls, fields: Mapping[str, Any]) -> ProfileSnapshot:
        return cls(fields=MappingProxyType(dict(fields)), api_token_available=True)

    @classmethod
    def unavailable(cls) -> ProfileSnapshot:
        return cls(fields=MappingProxyType({}), api_token_available=False)


@dataclass(frozen=True, slots=True)
class CharacterView:
    """캐릭터 조회 결과.

    Attributes:
        profile: 비공개 필드가 제거된 GW2 스냅샷 필드
        api_token_available: GW2 API 호출 성공 여부
        privacy: 비공개 필드 목록
        account_name: GW2 계정 이름
        alias: 소유자 별칭
        show_public: 공개 목록 노출 여부
        show_guild: 길드 노출 여부
        guild_tag: 길드 태그 (길드 조회 성공 시)
        guild_name: 길드 이름 (길드 조회 성공 시)
    """

    profile: Mapping[str, Any]
    api_token_available: bool
    privacy: tuple[str, ...]
    account_name: str
    alias: str
    show_public: bool
    show_guild: bool
    guild_tag: str | None = None
    guild_name: str | None = None

    def to_payload(self) -> dict[str, Any]:
        """응답 payload로 변환합니다.

        스냅샷 필드를 최상위에 펼치고 로컬 메타데이터를 덧붙입니다.
        """
        payload: dict[str, Any] = {
            **self.profile,
            "apiTokenAvailable": self.api_token_available,
            "privacy": list(self.privacy),
            "accountName": self.account_name,
            "alias": self.alias,
            "authorization": {
                "showPublic": self.show_public,
                "showGuild": self.show_guild,
            },
        }
        if self.guild_tag is not None:
            payload["guild_tag"] = self.guild_tag
            payload["guild_name"] = self.guild_name
        return payload


@dataclass(frozen=True, slots=True)
class CharacterUpdate:
    """캐릭터 설정 변경 요청.

    Attributes:
        name: 변경할 캐릭터 이름
        show_public: 공개 목록 노출 여부
        show_guild: 길드 노출 여부
        show_builds: 빌드 노출 여부
    """

    name: str
    show_public: bool | None = None
    show_guild: bool | None = None
    show_builds: bool | None = None

    def changes(self) -> dict[str, bool]:
        """None이 아닌 변경 필드만 반환합니다."""
        values = {
            "show_public": self.show_public,
            "show_guild": self.show_guild,
            "show_builds": self.show_builds,
        }
        return {key: value for key, value in values.items() if value is not None}

    def has_changes(self) -> bool:
        return bool(self.changes())
