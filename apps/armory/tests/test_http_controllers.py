"""HTTP Controller 테스트.

요청/응답 변환, 라우팅 순서, 예외 → HTTP 상태 매핑을 검증합니다.
"""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from apps.armory.application.character.dto import CharacterView
from apps.armory.application.character.exceptions import (
    CharacterNotFoundError,
    InvalidPrivacyFieldError,
    NoChangesProvidedError,
    NotCharacterOwnerError,
)
from apps.armory.application.common.exceptions import MissingRequesterError, StoreFailureError
from apps.armory.infrastructure.cache import PUBLIC_CHARACTERS_KEY, RefreshingCache
from apps.armory.presentation.http.controllers import (
    characters_router,
    health_router,
    sampling_router,
)
from apps.armory.presentation.http.errors import register_exception_handlers
from apps.armory.setup.dependencies import (
    get_character_query,
    get_characters_of_the_day_query,
    get_list_characters_query,
    get_random_characters_query,
    get_remove_privacy_command,
    get_set_privacy_command,
    get_update_character_command,
)
from apps.armory.tests.conftest import OWNER_EMAIL

OVERRIDES = {
    "character_query": get_character_query,
    "list_query": get_list_characters_query,
    "update_command": get_update_character_command,
    "set_privacy_command": get_set_privacy_command,
    "remove_privacy_command": get_remove_privacy_command,
    "random_query": get_random_characters_query,
    "of_the_day_query": get_characters_of_the_day_query,
}


def _provide(mock: AsyncMock):
    return lambda: mock


@pytest.fixture
def mocks() -> dict[str, AsyncMock]:
    return {key: AsyncMock() for key in OVERRIDES}


@pytest.fixture
def client(mocks: dict[str, AsyncMock]) -> TestClient:
    """테스트용 FastAPI 앱 (의존성 오버라이드 포함)."""
    app = FastAPI()
    register_exception_handlers(app)
    app.include_router(health_router)
    app.include_router(sampling_router, prefix="/api/v1")
    app.include_router(characters_router, prefix="/api/v1")
    app.state.container = SimpleNamespace(cache=RefreshingCache())

    for key, dependency in OVERRIDES.items():
        app.dependency_overrides[dependency] = _provide(mocks[key])

    return TestClient(app)


def make_view(**overrides) -> CharacterView:
    values = dict(
        profile={"level": 80},
        api_token_available=True,
        privacy=("race",),
        account_name="Zed.1234",
        alias="zedfan",
        show_public=True,
        show_guild=False,
    )
    values.update(overrides)
    return CharacterView(**values)


class TestReadCharacter:
    def test_returns_merged_payload(self, client, mocks) -> None:
        mocks["character_query"].execute.return_value = make_view(
            guild_tag="ZED", guild_name="Zed Squad"
        )

        response = client.get("/api/v1/characters/Zed", headers={"X-User-Email": OWNER_EMAIL})

        assert response.status_code == 200
        data = response.json()
        assert data["level"] == 80
        assert data["apiTokenAvailable"] is True
        assert data["privacy"] == ["race"]
        assert data["accountName"] == "Zed.1234"
        assert data["authorization"] == {"showPublic": True, "showGuild": False}
        assert data["guild_tag"] == "ZED"
        mocks["character_query"].execute.assert_awaited_once_with("Zed", OWNER_EMAIL)

    def test_anonymous_request(self, client, mocks) -> None:
        mocks["character_query"].execute.return_value = make_view()

        response = client.get("/api/v1/characters/Zed")

        assert response.status_code == 200
        mocks["character_query"].execute.assert_awaited_once_with("Zed", None)

    def test_not_found(self, client, mocks) -> None:
        mocks["character_query"].execute.side_effect = CharacterNotFoundError("Nobody")

        response = client.get("/api/v1/characters/Nobody")

        assert response.status_code == 404
        assert response.json()["code"] == "CHARACTER_NOT_FOUND"

    def test_store_failure_hides_details(self, client, mocks) -> None:
        mocks["character_query"].execute.side_effect = StoreFailureError("find_character_by_name")

        response = client.get("/api/v1/characters/Zed")

        assert response.status_code == 500
        assert response.json() == {"detail": "Record store unavailable", "code": "STORE_FAILURE"}


class TestListCharacters:
    def test_filters_are_passed(self, client, mocks, make_character) -> None:
        mocks["list_query"].execute.return_value = [make_character()]

        response = client.get("/api/v1/characters", params={"alias": "zedfan"})

        assert response.status_code == 200
        data = response.json()
        assert data[0]["name"] == "Zed"
        assert data[0]["account_name"] == "Zed.1234"
        assert "token" not in data[0]
        mocks["list_query"].execute.assert_awaited_once_with(email=None, alias="zedfan")


class TestUpdateCharacter:
    def test_update(self, client, mocks, make_character) -> None:
        mocks["update_command"].execute.return_value = make_character(show_public=False)

        response = client.put(
            "/api/v1/characters/Zed",
            json={"show_public": False},
            headers={"X-User-Email": OWNER_EMAIL},
        )

        assert response.status_code == 200
        assert response.json()["show_public"] is False
        email, update = mocks["update_command"].execute.await_args.args
        assert email == OWNER_EMAIL
        assert update.changes() == {"show_public": False}

    @pytest.mark.parametrize(
        "error,status_code,code",
        [
            (MissingRequesterError(), 401, "MISSING_REQUESTER"),
            (NotCharacterOwnerError("Zed"), 403, "NOT_CHARACTER_OWNER"),
            (NoChangesProvidedError(), 422, "NO_CHANGES_PROVIDED"),
        ],
    )
    def test_error_mapping(self, client, mocks, error, status_code, code) -> None:
        mocks["update_command"].execute.side_effect = error

        response = client.put("/api/v1/characters/Zed", json={"show_guild": True})

        assert response.status_code == status_code
        assert response.json()["code"] == code

    def test_unknown_field_rejected(self, client, mocks) -> None:
        response = client.put("/api/v1/characters/Zed", json={"privacy": "race"})

        assert response.status_code == 422
        assert response.json()["code"] == "VALIDATION_FAILED"
        mocks["update_command"].execute.assert_not_called()


class TestPrivacy:
    def test_set_privacy(self, client, mocks) -> None:
        mocks["set_privacy_command"].execute.return_value = ("race", "level")

        response = client.put(
            "/api/v1/characters/Zed/privacy/level", headers={"X-User-Email": OWNER_EMAIL}
        )

        assert response.status_code == 200
        assert response.json() == {"name": "Zed", "privacy": ["race", "level"]}
        mocks["set_privacy_command"].execute.assert_awaited_once_with("Zed", OWNER_EMAIL, "level")

    def test_remove_privacy(self, client, mocks) -> None:
        mocks["remove_privacy_command"].execute.return_value = ()

        response = client.delete(
            "/api/v1/characters/Zed/privacy/race", headers={"X-User-Email": OWNER_EMAIL}
        )

        assert response.status_code == 200
        assert response.json()["privacy"] == []

    def test_invalid_field(self, client, mocks) -> None:
        mocks["set_privacy_command"].execute.side_effect = InvalidPrivacyFieldError("a b")

        response = client.put(
            "/api/v1/characters/Zed/privacy/a%20b", headers={"X-User-Email": OWNER_EMAIL}
        )

        assert response.status_code == 422
        assert response.json()["code"] == "INVALID_PRIVACY_FIELD"


class TestSampling:
    def test_random_is_not_treated_as_name(self, client, mocks) -> None:
        """/characters/random은 캐릭터 조회로 라우팅되지 않음."""
        mocks["random_query"].execute.return_value = ["Zed", "Ada"]

        response = client.get("/api/v1/characters/random", params={"n": 2})

        assert response.status_code == 200
        assert response.json() == ["Zed", "Ada"]
        mocks["random_query"].execute.assert_awaited_once_with(2)
        mocks["character_query"].execute.assert_not_called()

    def test_random_default_size(self, client, mocks) -> None:
        mocks["random_query"].execute.return_value = ["Zed"]

        client.get("/api/v1/characters/random")

        mocks["random_query"].execute.assert_awaited_once_with(None)

    def test_non_integer_count_uses_error_shape(self, client, mocks) -> None:
        """요청 파라미터 검증 오류도 {"detail","code"} 형식."""
        response = client.get("/api/v1/characters/random", params={"n": "abc"})

        assert response.status_code == 422
        body = response.json()
        assert body["code"] == "VALIDATION_FAILED"
        assert body["detail"] == "Request validation failed"
        assert body["errors"][0]["loc"] == ["query", "n"]
        mocks["random_query"].execute.assert_not_called()

    def test_of_the_day(self, client, mocks) -> None:
        mocks["of_the_day_query"].execute.return_value = ["Zed", "Ada", "Kim"]

        response = client.get("/api/v1/characters/of-the-day")

        assert response.status_code == 200
        assert response.json() == ["Zed", "Ada", "Kim"]


class TestHealth:
    def test_health(self, client) -> None:
        assert client.get("/health").json() == {"status": "ok"}

    def test_not_ready_until_public_list_loaded(self, client) -> None:
        """공개 목록이 로드되지 않았으면 503."""
        response = client.get("/ready")

        assert response.status_code == 503
        assert response.json()["status"] == "not_ready"
        assert response.json()["public_characters"] == "empty"

    def test_ready_after_public_list_loaded(self, client) -> None:
        async def load() -> tuple[str, ...]:
            return ("Zed",)

        cache = client.app.state.container.cache
        asyncio.run(cache.get(PUBLIC_CHARACTERS_KEY, load, 60))

        response = client.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready", "public_characters": "fresh"}
