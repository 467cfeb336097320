"""Domain Entities."""

from apps.armory.domain.entities.account import Credential, UserAccount
from apps.armory.domain.entities.character import (
    CharacterRecord,
    add_privacy_field,
    join_privacy,
    parse_privacy,
    remove_privacy_field,
)
from apps.armory.domain.entities.guild import GuildRecord

__all__ = [
    "CharacterRecord",
    "Credential",
    "GuildRecord",
    "UserAccount",
    "add_privacy_field",
    "join_privacy",
    "parse_privacy",
    "remove_privacy_field",
]
