"""BackgroundTokenPrefetcher 테스트."""

import asyncio
from unittest.mock import AsyncMock

import pytest

from apps.armory.application.character.exceptions import ProfileSourceError
from apps.armory.application.common.exceptions import StoreFailureError
from apps.armory.infrastructure.gw2 import BackgroundTokenPrefetcher


@pytest.fixture
def mock_profile_source() -> AsyncMock:
    source = AsyncMock()
    source.fetch_account = AsyncMock(return_value={"name": "Zed.9999"})
    return source


@pytest.fixture
def mock_writer() -> AsyncMock:
    writer = AsyncMock()
    writer.update_account_name = AsyncMock()
    return writer


@pytest.fixture
def prefetcher(mock_profile_source, mock_writer) -> BackgroundTokenPrefetcher:
    return BackgroundTokenPrefetcher(mock_profile_source, mock_writer)


async def drain() -> None:
    for _ in range(3):
        await asyncio.sleep(0)


@pytest.mark.asyncio
class TestNotify:
    async def test_changed_account_name_is_written(
        self, prefetcher, mock_writer, make_character
    ) -> None:
        credential = make_character().credential

        prefetcher.notify(credential)
        await drain()

        mock_writer.update_account_name.assert_awaited_once_with(credential.id, "Zed.9999")

    async def test_same_account_name_is_not_written(
        self, prefetcher, mock_profile_source, mock_writer, make_character
    ) -> None:
        mock_profile_source.fetch_account.return_value = {"name": "Zed.1234"}

        prefetcher.notify(make_character().credential)
        await drain()

        mock_writer.update_account_name.assert_not_called()

    @pytest.mark.parametrize(
        "error",
        [ProfileSourceError("invalid token", 401), StoreFailureError("update_account_name")],
    )
    async def test_errors_are_ignored(
        self, prefetcher, mock_profile_source, mock_writer, make_character, error
    ) -> None:
        if isinstance(error, ProfileSourceError):
            mock_profile_source.fetch_account.side_effect = error
        else:
            mock_writer.update_account_name.side_effect = error

        prefetcher.notify(make_character().credential)
        await drain()

        mock_profile_source.fetch_account.assert_awaited_once()

    async def test_duplicate_notify_is_deduplicated(
        self, prefetcher, mock_profile_source, make_character
    ) -> None:
        credential = make_character().credential

        prefetcher.notify(credential)
        prefetcher.notify(credential)
        await drain()

        mock_profile_source.fetch_account.assert_awaited_once()

    async def test_close_cancels_pending(
        self, prefetcher, mock_profile_source, mock_writer, make_character
    ) -> None:
        blocker = asyncio.Event()

        async def slow(token):
            await blocker.wait()
            return {"name": "Zed.9999"}

        mock_profile_source.fetch_account.side_effect = slow
        prefetcher.notify(make_character().credential)
        await asyncio.sleep(0)

        await prefetcher.close()

        mock_writer.update_account_name.assert_not_called()


class TestWithoutLoop:
    def test_notify_without_running_loop_is_noop(
        self, prefetcher, mock_profile_source, make_character
    ) -> None:
        prefetcher.notify(make_character().credential)

        mock_profile_source.fetch_account.assert_not_called()
