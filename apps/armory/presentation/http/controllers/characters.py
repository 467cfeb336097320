"""Character HTTP Controller."""

from __future__ import annotations

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query

from apps.armory.application.character.commands import (
    RemovePrivacyCommand,
    SetPrivacyCommand,
    UpdateCharacterCommand,
)
from apps.armory.application.character.dto import CharacterUpdate
from apps.armory.application.character.queries import GetCharacterQuery, ListCharactersQuery
from apps.armory.presentation.http.auth import get_requester_email
from apps.armory.presentation.http.schemas import (
    CharacterSummaryResponse,
    CharacterUpdateRequest,
    PrivacyResponse,
)
from apps.armory.setup.dependencies import (
    get_character_query,
    get_list_characters_query,
    get_remove_privacy_command,
    get_set_privacy_command,
    get_update_character_command,
)

router = APIRouter(prefix="/characters", tags=["characters"])


@router.get(
    "",
    response_model=list[CharacterSummaryResponse],
    summary="캐릭터 목록 조회",
    description="소유자 이메일 또는 별칭으로 캐릭터 목록을 조회합니다. 필터가 없으면 전체 목록입니다.",
)
async def list_characters(
    query: Annotated[ListCharactersQuery, Depends(get_list_characters_query)],
    email: Annotated[str | None, Query(description="소유자 이메일")] = None,
    alias: Annotated[str | None, Query(description="소유자 별칭")] = None,
) -> list[CharacterSummaryResponse]:
    """캐릭터 목록을 조회합니다."""
    records = await query.execute(email=email, alias=alias)
    return [CharacterSummaryResponse.from_record(record) for record in records]


@router.get(
    "/{name}",
    response_model=dict[str, Any],
    summary="캐릭터 조회",
    description="GW2 API 스냅샷과 로컬 설정을 병합하여 반환합니다. 소유자가 아니면 비공개 필드가 제거됩니다.",
)
async def read_character(
    name: str,
    query: Annotated[GetCharacterQuery, Depends(get_character_query)],
    requester_email: Annotated[str | None, Depends(get_requester_email)],
) -> dict[str, Any]:
    """캐릭터를 조회합니다."""
    view = await query.execute(name, requester_email)
    return view.to_payload()


@router.put(
    "/{name}",
    response_model=CharacterSummaryResponse,
    summary="캐릭터 설정 변경",
)
async def update_character(
    name: str,
    request: CharacterUpdateRequest,
    command: Annotated[UpdateCharacterCommand, Depends(get_update_character_command)],
    requester_email: Annotated[str | None, Depends(get_requester_email)],
) -> CharacterSummaryResponse:
    """캐릭터 공개 설정을 변경합니다."""
    update = CharacterUpdate(
        name=name,
        show_public=request.show_public,
        show_guild=request.show_guild,
        show_builds=request.show_builds,
    )
    record = await command.execute(requester_email, update)
    return CharacterSummaryResponse.from_record(record)


@router.put(
    "/{name}/privacy/{privacy}",
    response_model=PrivacyResponse,
    summary="비공개 필드 추가",
)
async def set_privacy(
    name: str,
    privacy: str,
    command: Annotated[SetPrivacyCommand, Depends(get_set_privacy_command)],
    requester_email: Annotated[str | None, Depends(get_requester_email)],
) -> PrivacyResponse:
    """캐릭터 필드를 비공개로 설정합니다."""
    fields = await command.execute(name, requester_email, privacy)
    return PrivacyResponse(name=name, privacy=list(fields))


@router.delete(
    "/{name}/privacy/{privacy}",
    response_model=PrivacyResponse,
    summary="비공개 필드 제거",
)
async def remove_privacy(
    name: str,
    privacy: str,
    command: Annotated[RemovePrivacyCommand, Depends(get_remove_privacy_command)],
    requester_email: Annotated[str | None, Depends(get_requester_email)],
) -> PrivacyResponse:
    """캐릭터 필드의 비공개 설정을 해제합니다."""
    fields = await command.execute(name, requester_email, privacy)
    return PrivacyResponse(name=name, privacy=list(fields))
