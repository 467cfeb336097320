"""GW2 API Client Implementation.

ProfileSource 포트의 httpx 구현체입니다.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping
from urllib.parse import quote

import httpx

from apps.armory.application.character.exceptions import ProfileSourceError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "2019-12-19T00:00:00.000Z"


class Gw2ProfileClient:
    """GW2 API 클라이언트.

    요청마다 타임아웃이 적용되며, 모든 실패(네트워크, 인증, 타임아웃, rate limit)는
    ProfileSourceError로 변환됩니다.
    """

    def __init__(
        self,
        base_url: str,
        timeout_seconds: float,
        language: str = "en",
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: GW2 API 주소 (예: https://api.guildwars2.com)
            timeout_seconds: HTTP 타임아웃 (설정에서 주입)
            language: 응답 언어
            transport: httpx 전송 계층 (테스트용)
        """
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout_seconds
        self._language = language
        self._transport = transport

    async def fetch_character(self, token: str, name: str) -> Mapping[str, Any]:
        """토큰 소유 계정의 캐릭터 정보를 조회합니다."""
        return await self._get(f"/v2/characters/{quote(name, safe='')}", token)

    async def fetch_account(self, token: str) -> Mapping[str, Any]:
        """토큰 소유 계정 정보를 조회합니다."""
        return await self._get("/v2/account", token)

    async def _get(self, path: str, token: str) -> Mapping[str, Any]:
        headers = {
            "Authorization": f"Bearer {token}",
            "X-Schema-Version": SCHEMA_VERSION,
            "Accept-Language": self._language,
        }

        try:
            async with httpx.AsyncClient(
                base_url=self._base_url,
                timeout=self._timeout,
                transport=self._transport,
            ) as client:
                response = await client.get(path, headers=headers)
                response.raise_for_status()
                payload = response.json()

        except httpx.TimeoutException as e:
            logger.warning(f"GW2 API timeout: {path}")
            raise ProfileSourceError("timeout") from e
        except httpx.HTTPStatusError as e:
            status_code = e.response.status_code
            logger.warning(f"GW2 API error: {status_code} {path}")
            raise ProfileSourceError(_reason_for(status_code), status_code) from e
        except httpx.HTTPError as e:
            logger.warning(f"GW2 API request failed: {e}")
            raise ProfileSourceError("network") from e
        except ValueError as e:
            raise ProfileSourceError("invalid response") from e

        if not isinstance(payload, dict):
            raise ProfileSourceError("invalid response")

        return payload


def _reason_for(status_code: int) -> str:
    if status_code in (401, 403):
        return "invalid token"
    if status_code == 404:
        return "not found"
    if status_code == 429:
        return "rate limited"
    return f"http {status_code}"
