"""Persistence 계층 테스트.

DB 없이 검증 가능한 매퍼, 예외 변환, 목록 Query를 다룹니다.
"""

import asyncio
from datetime import datetime
from unittest.mock import AsyncMock, MagicMock

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import OperationalError

from apps.armory.application.character.queries import ListCharactersQuery
from apps.armory.application.character.exceptions import CharacterNotFoundError
from apps.armory.application.common.exceptions import StoreFailureError
from apps.armory.infrastructure.persistence_postgres import SqlaCharacterStore
from apps.armory.infrastructure.persistence_postgres.errors import store_errors
from apps.armory.infrastructure.persistence_postgres.mappers import row_to_character, row_to_guild


def make_row(**overrides) -> dict:
    row = {
        "id": 42,
        "name": "Zed",
        "guild": "g-1",
        "privacy": None,
        "show_public": True,
        "show_guild": False,
        "show_builds": True,
        "created_at": datetime(2024, 1, 1),
        "updated_at": datetime(2024, 1, 2),
        "gw2_api_token_id": 7,
        "token": "SECRET-TOKEN",
        "account_name": "Zed.1234",
        "user_id": 1,
        "email": "a@x.com",
        "alias": "zedfan",
    }
    row.update(overrides)
    return row


class TestMappers:
    def test_row_to_character(self) -> None:
        record = row_to_character(make_row(privacy="race|level"))

        assert record.name == "Zed"
        assert record.guild_id == "g-1"
        assert record.privacy_fields == ("race", "level")
        assert record.credential.account_name == "Zed.1234"
        assert record.credential.owner.email == "a@x.com"
        assert record.is_owned_by("a@x.com")

    def test_null_privacy_becomes_empty(self) -> None:
        assert row_to_character(make_row()).privacy == ""

    def test_token_is_not_in_repr(self) -> None:
        assert "SECRET-TOKEN" not in repr(row_to_character(make_row()).credential)

    def test_row_to_guild(self) -> None:
        guild = row_to_guild({"id": "g-1", "tag": "ZED", "name": "Zed Squad"})

        assert guild.tag == "ZED"


class TestStoreErrors:
    def test_sqlalchemy_error_is_translated(self) -> None:
        with pytest.raises(StoreFailureError) as exc_info:
            with store_errors("find_character_by_name"):
                raise OperationalError("SELECT 1", {}, Exception("connection refused"))

        assert exc_info.value.operation == "find_character_by_name"
        assert "connection refused" not in exc_info.value.message

    @pytest.mark.parametrize(
        "error",
        [
            ConnectionRefusedError(111, "Connect call failed"),
            asyncio.TimeoutError(),
        ],
    )
    def test_connection_errors_are_translated(self, error) -> None:
        """asyncpg 연결 실패(OSError)와 타임아웃도 StoreFailureError로 변환."""
        with pytest.raises(StoreFailureError) as exc_info:
            with store_errors("list_public_characters"):
                raise error

        assert exc_info.value.__cause__ is error

    def test_other_errors_pass_through(self) -> None:
        with pytest.raises(KeyError):
            with store_errors("find_guild"):
                raise KeyError("id")


@pytest.mark.asyncio
class TestListCharactersQuery:
    @pytest.mark.parametrize(
        "email,alias,expected",
        [
            ("a@x.com", None, {"email": "a@x.com", "alias": None}),
            (None, "zedfan", {"email": None, "alias": "zedfan"}),
            ("", "", {"email": None, "alias": None}),
        ],
    )
    async def test_filters(self, email, alias, expected) -> None:
        gateway = AsyncMock()
        gateway.list_by_owner = AsyncMock(return_value=[])

        result = await ListCharactersQuery(gateway).execute(email=email, alias=alias)

        assert result == []
        gateway.list_by_owner.assert_awaited_once_with(**expected)


def scalar_result(value) -> MagicMock:
    result = MagicMock()
    result.scalar_one_or_none.return_value = value
    return result


def compiled(stmt) -> tuple[str, dict]:
    compiled_stmt = stmt.compile(dialect=postgresql.dialect())
    return str(compiled_stmt), compiled_stmt.params


@pytest.mark.asyncio
class TestPrivacyUpdates:
    """비공개 필드 변경은 행 잠금 후 같은 세션에서 갱신."""

    @pytest.fixture
    def session(self) -> AsyncMock:
        session = AsyncMock()
        session.execute = AsyncMock()
        return session

    async def test_add_locks_row_then_updates(self, session) -> None:
        session.execute.side_effect = [scalar_result("race"), MagicMock()]

        fields = await SqlaCharacterStore(session).add_privacy("Zed", "level")

        assert fields == ("race", "level")
        select_sql, _ = compiled(session.execute.await_args_list[0].args[0])
        assert "FOR UPDATE" in select_sql
        update_sql, params = compiled(session.execute.await_args_list[1].args[0])
        assert update_sql.startswith("UPDATE armory.characters")
        assert params["privacy"] == "race|level"

    async def test_add_existing_field_is_not_duplicated(self, session) -> None:
        session.execute.side_effect = [scalar_result("race"), MagicMock()]

        fields = await SqlaCharacterStore(session).add_privacy("Zed", "race")

        assert fields == ("race",)

    async def test_remove_field(self, session) -> None:
        session.execute.side_effect = [scalar_result("race|level"), MagicMock()]

        fields = await SqlaCharacterStore(session).remove_privacy("Zed", "race")

        assert fields == ("level",)
        _, params = compiled(session.execute.await_args_list[1].args[0])
        assert params["privacy"] == "level"

    async def test_missing_character(self, session) -> None:
        session.execute.side_effect = [scalar_result(None)]

        with pytest.raises(CharacterNotFoundError):
            await SqlaCharacterStore(session).add_privacy("Nobody", "race")

        assert session.execute.await_count == 1

    async def test_connection_refused_is_store_failure(self, session) -> None:
        session.execute.side_effect = ConnectionRefusedError(111, "Connect call failed")

        with pytest.raises(StoreFailureError):
            await SqlaCharacterStore(session).add_privacy("Zed", "race")
