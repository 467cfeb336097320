"""GetCharacterQuery.

캐릭터 조회 Query(지휘자)입니다.

Architecture:
    - Query(지휘자): GetCharacterQuery
    - Services(연주자): PrivacyService (비공개 필드 제거)
    - Ports(인프라): CharacterQueryGateway, ProfileSource, GuildReader, TokenPrefetchHint
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import TYPE_CHECKING

from apps.armory.application.character.dto import CharacterView, ProfileSnapshot
from apps.armory.application.character.exceptions import (
    CharacterNotFoundError,
    ProfileSourceError,
)
from apps.armory.application.common.exceptions import StoreFailureError

if TYPE_CHECKING:
    from apps.armory.application.character.ports import (
        CharacterQueryGateway,
        GuildReader,
        ProfileSource,
        TokenPrefetchHint,
    )
    from apps.armory.application.character.services import PrivacyService
    from apps.armory.domain.entities import CharacterRecord

logger = logging.getLogger(__name__)


class GetCharacterQuery:
    """캐릭터 조회 Query (지휘자).

    로컬 레코드와 GW2 API 스냅샷을 병합합니다.

    Workflow:
        1. 캐릭터 레코드 조회 (없으면 CharacterNotFoundError)
        2. 토큰 선조회 힌트 (fire-and-forget)
        3. GW2 API 스냅샷 조회 (실패 시 빈 스냅샷으로 대체)
        4. 비공개 필드 제거 (PrivacyService)
        5. 길드 정보 추가 (실패해도 무시)
    """

    def __init__(
        self,
        # Ports (인프라)
        query_gateway: "CharacterQueryGateway",
        profile_source: "ProfileSource",
        guild_reader: "GuildReader",
        prefetch_hint: "TokenPrefetchHint",
        # Services (연주자)
        privacy_service: "PrivacyService",
    ) -> None:
        self._query_gateway = query_gateway
        self._profile_source = profile_source
        self._guild_reader = guild_reader
        self._prefetch_hint = prefetch_hint
        self._privacy_service = privacy_service

    async def execute(self, name: str, requester_email: str | None = None) -> CharacterView:
        """캐릭터를 조회합니다.

        Args:
            name: 캐릭터 이름
            requester_email: 요청자 이메일 (없으면 익명)

        Returns:
            CharacterView: 병합된 캐릭터 정보

        Raises:
            CharacterNotFoundError: 캐릭터가 존재하지 않는 경우
            StoreFailureError: 레코드 저장소 오류
        """
        character = await self._query_gateway.find_by_name(name)
        if character is None:
            raise CharacterNotFoundError(name)

        self._prefetch_hint.notify(character.credential)

        snapshot = await self._fetch_snapshot(character)
        is_owner = character.is_owned_by(requester_email)
        privacy = character.privacy_fields

        view = CharacterView(
            profile=self._privacy_service.redact(snapshot.fields, privacy, is_owner),
            api_token_available=snapshot.api_token_available,
            privacy=privacy,
            account_name=character.credential.account_name,
            alias=character.credential.owner.alias,
            show_public=character.show_public,
            show_guild=character.show_guild,
        )

        if not character.guild_id:
            return view

        return await self._with_guild(view, character.guild_id)

    async def _fetch_snapshot(self, character: "CharacterRecord") -> ProfileSnapshot:
        try:
            fields = await self._profile_source.fetch_character(
                character.credential.token, character.name
            )
        except ProfileSourceError as e:
            logger.warning(
                "GW2 API unavailable, serving degraded profile",
                extra={
                    "character": character.name,
                    "reason": e.reason,
                    "status_code": e.status_code,
                },
            )
            return ProfileSnapshot.unavailable()

        return ProfileSnapshot.available(fields)

    async def _with_guild(self, view: CharacterView, guild_id: str) -> CharacterView:
        try:
            guild = await self._guild_reader.find_guild(guild_id)
        except StoreFailureError as e:
            logger.warning(
                "Guild lookup failed, skipping guild fields",
                extra={"guild_id": guild_id, "operation": e.operation},
            )
            return view

        if guild is None:
            return view

        return replace(view, guild_tag=guild.tag, guild_name=guild.name)
