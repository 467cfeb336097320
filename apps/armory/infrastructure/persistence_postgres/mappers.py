"""Row to Domain Mappers."""

from typing import Any, Mapping

from apps.armory.domain.entities import CharacterRecord, Credential, GuildRecord, UserAccount


def row_to_character(row: Mapping[str, Any]) -> CharacterRecord:
    """characters ⋈ gw2_api_tokens ⋈ users 조회 결과를 CharacterRecord로 변환합니다."""
    owner = UserAccount(
        id=row["user_id"],
        email=row["email"],
        alias=row["alias"],
    )
    credential = Credential(
        id=row["gw2_api_token_id"],
        token=row["token"],
        account_name=row["account_name"],
        owner=owner,
    )
    return CharacterRecord(
        id=row["id"],
        name=row["name"],
        credential=credential,
        guild_id=row["guild"],
        privacy=row["privacy"] or "",
        show_public=row["show_public"],
        show_guild=row["show_guild"],
        show_builds=row["show_builds"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_guild(row: Mapping[str, Any]) -> GuildRecord:
    """guilds 조회 결과를 GuildRecord로 변환합니다."""
    return GuildRecord(id=row["id"], tag=row["tag"], name=row["name"])
