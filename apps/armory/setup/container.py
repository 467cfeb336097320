"""Process-wide components.

앱 시작 시 한 번 생성되어 app.state에 보관되고,
요청 단위 의존성은 dependencies.py에서 이 컨테이너를 통해 만들어집니다.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from apps.armory.application.sampling.services import SamplingService
from apps.armory.infrastructure.cache import CachedPublicCharacterReader, RefreshingCache
from apps.armory.infrastructure.gw2 import BackgroundTokenPrefetcher, Gw2ProfileClient
from apps.armory.infrastructure.persistence_postgres import (
    SqlaPublicCharacterReader,
    SqlaTokenAccountWriter,
)
from apps.armory.setup.config import Settings
from apps.armory.setup.database import create_engine, create_session_factory

logger = logging.getLogger(__name__)


@dataclass
class ArmoryContainer:
    """프로세스 단위 컴포넌트 묶음.

    Attributes:
        settings: 서비스 설정
        engine: SQLAlchemy 엔진
        session_factory: 세션 팩토리
        cache: 공개 목록/오늘의 캐릭터 공유 캐시
        profile_client: GW2 API 클라이언트
        prefetcher: 토큰 선조회 힌트
        public_reader: 캐시된 공개 캐릭터 Reader
        sampling_service: 샘플링 서비스
    """

    settings: Settings
    engine: AsyncEngine
    session_factory: async_sessionmaker[AsyncSession]
    cache: RefreshingCache
    profile_client: Gw2ProfileClient
    prefetcher: BackgroundTokenPrefetcher
    public_reader: CachedPublicCharacterReader
    sampling_service: SamplingService

    async def close(self) -> None:
        """백그라운드 작업을 정리하고 DB 연결을 닫습니다."""
        await self.prefetcher.close()
        await self.cache.close()
        await self.engine.dispose()
        logger.info("Container closed")


def build_container(settings: Settings) -> ArmoryContainer:
    """설정으로부터 컨테이너를 생성합니다."""
    engine = create_engine(settings)
    session_factory = create_session_factory(engine)
    cache = RefreshingCache()

    profile_client = Gw2ProfileClient(
        base_url=settings.gw2_api_base_url,
        timeout_seconds=settings.gw2_api_timeout_seconds,
        language=settings.gw2_api_language,
    )
    prefetcher = BackgroundTokenPrefetcher(
        profile_source=profile_client,
        account_writer=SqlaTokenAccountWriter(session_factory),
    )
    public_reader = CachedPublicCharacterReader(
        delegate=SqlaPublicCharacterReader(session_factory),
        cache=cache,
        ttl_seconds=settings.public_list_ttl_seconds,
    )
    sampling_service = SamplingService(
        default_size=settings.random_default_size,
        max_size=settings.random_max_size,
    )

    return ArmoryContainer(
        settings=settings,
        engine=engine,
        session_factory=session_factory,
        cache=cache,
        profile_client=profile_client,
        prefetcher=prefetcher,
        public_reader=public_reader,
        sampling_service=sampling_service,
    )
