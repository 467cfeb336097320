"""Health Check Controller."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse

from apps.armory.infrastructure.cache import PUBLIC_CHARACTERS_KEY

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict[str, str]:
    """Health check 엔드포인트."""
    return {"status": "ok"}


@router.get("/ready")
async def ready(request: Request) -> JSONResponse:
    """Readiness check 엔드포인트.

    공개 캐릭터 목록이 한 번도 로드되지 않았으면 503을 반환합니다.
    만료된(stale) 목록은 계속 제공되므로 ready로 취급합니다.
    """
    cache = request.app.state.container.cache
    state = cache.state(PUBLIC_CHARACTERS_KEY).value

    if cache.peek(PUBLIC_CHARACTERS_KEY) is None:
        return JSONResponse(
            {"status": "not_ready", "reason": "public_characters_not_loaded", "public_characters": state},
            status_code=503,
        )

    return JSONResponse({"status": "ready", "public_characters": state})
