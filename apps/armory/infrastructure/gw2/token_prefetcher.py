"""Background Token Prefetcher.

TokenPrefetchHint 포트 구현체입니다.
캐릭터 조회 시 토큰의 계정 정보를 백그라운드에서 다시 가져와
저장된 account_name을 최신으로 유지합니다.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from apps.armory.application.character.exceptions import ProfileSourceError
from apps.armory.application.common.exceptions import StoreFailureError

if TYPE_CHECKING:
    from apps.armory.application.character.ports import ProfileSource, TokenAccountWriter
    from apps.armory.domain.entities import Credential

logger = logging.getLogger(__name__)


class BackgroundTokenPrefetcher:
    """토큰 선조회 힌트 구현체.

    notify()는 Task만 등록하고 즉시 반환합니다.
    같은 토큰에 대한 선조회가 진행 중이면 새로 등록하지 않습니다.
    """

    def __init__(
        self,
        profile_source: "ProfileSource",
        account_writer: "TokenAccountWriter",
    ) -> None:
        self._profile_source = profile_source
        self._account_writer = account_writer
        self._tasks: dict[int, asyncio.Task[None]] = {}

    def notify(self, credential: "Credential") -> None:
        """토큰 선조회를 예약합니다."""
        if credential.id in self._tasks:
            return

        try:
            task = asyncio.get_running_loop().create_task(
                self._prefetch(credential), name=f"token-prefetch:{credential.id}"
            )
        except RuntimeError:
            logger.debug("No running loop, prefetch skipped", extra={"credential_id": credential.id})
            return

        self._tasks[credential.id] = task
        task.add_done_callback(lambda t: self._on_done(credential.id, t))

    def _on_done(self, credential_id: int, task: asyncio.Task[None]) -> None:
        self._tasks.pop(credential_id, None)
        if not task.cancelled() and task.exception() is not None:
            logger.error(
                "Token prefetch crashed",
                extra={"credential_id": credential_id, "error": str(task.exception())},
            )

    async def _prefetch(self, credential: "Credential") -> None:
        try:
            account = await self._profile_source.fetch_account(credential.token)
            account_name = account.get("name")
            if account_name and account_name != credential.account_name:
                await self._account_writer.update_account_name(credential.id, account_name)
                logger.info(
                    "Token account name refreshed",
                    extra={"credential_id": credential.id, "account_name": account_name},
                )
        except (ProfileSourceError, StoreFailureError) as e:
            logger.warning(
                "Token prefetch failed (ignored)",
                extra={"credential_id": credential.id, "error": e.message},
            )

    async def close(self) -> None:
        """진행 중인 선조회를 취소합니다."""
        tasks = list(self._tasks.values())
        for task in tasks:
            task.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)
