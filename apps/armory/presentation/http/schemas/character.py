"""Character HTTP Schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from apps.armory.domain.entities import CharacterRecord


class CharacterSummaryResponse(BaseModel):
    """캐릭터 목록/변경 응답.

    토큰 등 비밀 값은 포함하지 않습니다.
    """

    name: str = Field(..., description="캐릭터 이름")
    account_name: str = Field(..., description="GW2 계정 이름")
    alias: str = Field(..., description="소유자 별칭")
    guild: str | None = Field(None, description="길드 ID")
    show_public: bool = Field(..., description="공개 목록 노출 여부")
    show_guild: bool = Field(..., description="길드 노출 여부")
    show_builds: bool = Field(..., description="빌드 노출 여부")

    @classmethod
    def from_record(cls, record: CharacterRecord) -> CharacterSummaryResponse:
        return cls(
            name=record.name,
            account_name=record.credential.account_name,
            alias=record.credential.owner.alias,
            guild=record.guild_id,
            show_public=record.show_public,
            show_guild=record.show_guild,
            show_builds=record.show_builds,
        )


class CharacterUpdateRequest(BaseModel):
    """캐릭터 설정 변경 요청."""

    show_public: bool | None = Field(None, description="공개 목록 노출 여부")
    show_guild: bool | None = Field(None, description="길드 노출 여부")
    show_builds: bool | None = Field(None, description="빌드 노출 여부")

    model_config = ConfigDict(extra="forbid")


class PrivacyResponse(BaseModel):
    """비공개 필드 변경 응답."""

    name: str = Field(..., description="캐릭터 이름")
    privacy: list[str] = Field(..., description="비공개 필드 목록")
