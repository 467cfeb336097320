"""Character Ports."""

from apps.armory.application.character.ports.character_store import (
    CharacterCommandGateway,
    CharacterQueryGateway,
)
from apps.armory.application.character.ports.guild_reader import GuildReader
from apps.armory.application.character.ports.prefetch_hint import TokenPrefetchHint
from apps.armory.application.character.ports.profile_source import ProfileSource
from apps.armory.application.character.ports.token_account_writer import (
    TokenAccountWriter,
)

__all__ = [
    "CharacterCommandGateway",
    "CharacterQueryGateway",
    "GuildReader",
    "ProfileSource",
    "TokenAccountWriter",
    "TokenPrefetchHint",
]
