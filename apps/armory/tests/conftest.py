"""Pytest configuration for armory tests."""

from __future__ import annotations

from typing import Callable

import pytest

from apps.armory.domain.entities import CharacterRecord, Credential, UserAccount

OWNER_EMAIL = "a@x.com"
OTHER_EMAIL = "b@y.com"


@pytest.fixture(scope="session")
def anyio_backend() -> str:
    """Use asyncio backend for async tests."""
    return "asyncio"


@pytest.fixture
def owner() -> UserAccount:
    """캐릭터 소유자."""
    return UserAccount(id=1, email=OWNER_EMAIL, alias="zedfan")


@pytest.fixture
def make_character(owner: UserAccount) -> Callable[..., CharacterRecord]:
    """테스트용 캐릭터 팩토리."""

    def _make(
        name: str = "Zed",
        privacy: str = "race",
        guild_id: str | None = None,
        **overrides,
    ) -> CharacterRecord:
        credential = Credential(
            id=7,
            token="SECRET-TOKEN",
            account_name="Zed.1234",
            owner=owner,
        )
        return CharacterRecord(
            id=42,
            name=name,
            credential=credential,
            guild_id=guild_id,
            privacy=privacy,
            **overrides,
        )

    return _make
