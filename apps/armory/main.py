"""Armory Service Main Entry Point.

분산 트레이싱 통합 (ARMORY_OTEL_ENABLED=true):
- FastAPI 자동 계측 (HTTP 요청/응답)
- HTTPX 자동 계측 (GW2 API 호출)
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from apps.armory.infrastructure.observability import (
    instrument_fastapi,
    instrument_httpx,
    setup_tracing,
    shutdown_tracing,
)
from apps.armory.presentation.http.controllers import (
    characters_router,
    health_router,
    sampling_router,
)
from apps.armory.presentation.http.errors import register_exception_handlers
from apps.armory.setup.config import Settings, get_settings
from apps.armory.setup.container import ArmoryContainer, build_container
from apps.armory.setup.logging import setup_logging

logger = logging.getLogger(__name__)


async def warmup_public_cache(container: ArmoryContainer) -> None:
    """공개 캐릭터 캐시 워밍업.

    API 서버 시작 시 공개 목록을 미리 로드합니다.
    DB에 연결할 수 없어도 서비스는 시작되고, 첫 요청 시 다시 로드합니다.
    """
    try:
        names = await container.public_reader.list_public()
        logger.info("Public character cache warmup completed", extra={"count": len(names)})
    except Exception as e:
        logger.warning(
            "Public character cache warmup failed (graceful degradation)",
            extra={"error": str(e)},
        )


def create_app(settings: Settings | None = None) -> FastAPI:
    """FastAPI 앱을 생성합니다."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        """애플리케이션 라이프사이클 관리."""
        setup_logging(settings.log_level)
        logger.info(f"Starting {settings.app_name} ({settings.environment})")

        if settings.otel_enabled:
            setup_tracing(settings.app_name, settings.environment)
            instrument_httpx()

        container = build_container(settings)
        app.state.container = container

        await warmup_public_cache(container)

        yield

        logger.info(f"Shutting down {settings.app_name}")
        await container.close()
        shutdown_tracing()

    app = FastAPI(
        title=settings.app_name,
        description="GW2 캐릭터 조회, 공개 설정 및 오늘의 캐릭터 서비스",
        version="1.0.0",
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if settings.otel_enabled:
        instrument_fastapi(app)

    register_exception_handlers(app)

    # sampling 라우터는 /characters/{name}보다 먼저 등록
    app.include_router(health_router)
    app.include_router(sampling_router, prefix="/api/v1")
    app.include_router(characters_router, prefix="/api/v1")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "apps.armory.main:app",
        host="0.0.0.0",
        port=8000,
        reload=get_settings().environment == "local",
    )
