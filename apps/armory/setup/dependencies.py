"""Dependency Injection for FastAPI.

Architecture:
    - 프로세스 단위 컴포넌트(캐시, GW2 클라이언트)는 app.state.container에서 가져옴
    - 요청 단위 컴포넌트(세션, 저장소, Query/Command)는 요청마다 생성
"""

from typing import Annotated, AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from apps.armory.application.character.commands import (
    RemovePrivacyCommand,
    SetPrivacyCommand,
    UpdateCharacterCommand,
)
from apps.armory.application.character.queries import GetCharacterQuery, ListCharactersQuery
from apps.armory.application.character.services import OwnershipGate, PrivacyService
from apps.armory.application.sampling.queries import (
    GetCharactersOfTheDayQuery,
    GetRandomCharactersQuery,
)
from apps.armory.infrastructure.persistence_postgres import (
    SqlaCharacterStore,
    SqlaGuildReader,
    SqlaTransactionManager,
)
from apps.armory.setup.container import ArmoryContainer


def get_container(request: Request) -> ArmoryContainer:
    """앱 컨테이너를 반환합니다."""
    return request.app.state.container


async def get_db_session(
    container: Annotated[ArmoryContainer, Depends(get_container)],
) -> AsyncIterator[AsyncSession]:
    """DB 세션을 주입합니다."""
    async with container.session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


async def get_character_store(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlaCharacterStore:
    """Character Store를 주입합니다."""
    return SqlaCharacterStore(session)


async def get_guild_reader(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlaGuildReader:
    """Guild Reader를 주입합니다."""
    return SqlaGuildReader(session)


async def get_transaction_manager(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> SqlaTransactionManager:
    """Transaction Manager를 주입합니다."""
    return SqlaTransactionManager(session)


async def get_privacy_service() -> PrivacyService:
    """PrivacyService를 주입합니다."""
    return PrivacyService()


async def get_ownership_gate(
    store: Annotated[SqlaCharacterStore, Depends(get_character_store)],
) -> OwnershipGate:
    """OwnershipGate를 주입합니다."""
    return OwnershipGate(store)


async def get_character_query(
    container: Annotated[ArmoryContainer, Depends(get_container)],
    store: Annotated[SqlaCharacterStore, Depends(get_character_store)],
    guild_reader: Annotated[SqlaGuildReader, Depends(get_guild_reader)],
    privacy_service: Annotated[PrivacyService, Depends(get_privacy_service)],
) -> GetCharacterQuery:
    """GetCharacterQuery를 주입합니다."""
    return GetCharacterQuery(
        query_gateway=store,
        profile_source=container.profile_client,
        guild_reader=guild_reader,
        prefetch_hint=container.prefetcher,
        privacy_service=privacy_service,
    )


async def get_list_characters_query(
    store: Annotated[SqlaCharacterStore, Depends(get_character_store)],
) -> ListCharactersQuery:
    """ListCharactersQuery를 주입합니다."""
    return ListCharactersQuery(store)


async def get_update_character_command(
    gate: Annotated[OwnershipGate, Depends(get_ownership_gate)],
    store: Annotated[SqlaCharacterStore, Depends(get_character_store)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
) -> UpdateCharacterCommand:
    """UpdateCharacterCommand를 주입합니다."""
    return UpdateCharacterCommand(gate, store, tx)


async def get_set_privacy_command(
    gate: Annotated[OwnershipGate, Depends(get_ownership_gate)],
    store: Annotated[SqlaCharacterStore, Depends(get_character_store)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
    privacy_service: Annotated[PrivacyService, Depends(get_privacy_service)],
) -> SetPrivacyCommand:
    """SetPrivacyCommand를 주입합니다."""
    return SetPrivacyCommand(gate, store, tx, privacy_service)


async def get_remove_privacy_command(
    gate: Annotated[OwnershipGate, Depends(get_ownership_gate)],
    store: Annotated[SqlaCharacterStore, Depends(get_character_store)],
    tx: Annotated[SqlaTransactionManager, Depends(get_transaction_manager)],
    privacy_service: Annotated[PrivacyService, Depends(get_privacy_service)],
) -> RemovePrivacyCommand:
    """RemovePrivacyCommand를 주입합니다."""
    return RemovePrivacyCommand(gate, store, tx, privacy_service)


async def get_random_characters_query(
    container: Annotated[ArmoryContainer, Depends(get_container)],
) -> GetRandomCharactersQuery:
    """GetRandomCharactersQuery를 주입합니다."""
    return GetRandomCharactersQuery(container.public_reader, container.sampling_service)


async def get_characters_of_the_day_query(
    container: Annotated[ArmoryContainer, Depends(get_container)],
    random_query: Annotated[GetRandomCharactersQuery, Depends(get_random_characters_query)],
) -> GetCharactersOfTheDayQuery:
    """GetCharactersOfTheDayQuery를 주입합니다."""
    return GetCharactersOfTheDayQuery(
        random_query=random_query,
        cache=container.cache,
        count=container.settings.of_the_day_count,
        ttl_seconds=container.settings.of_the_day_ttl_seconds,
    )
