"""Character Commands."""

from apps.armory.application.character.commands.privacy import (
    RemovePrivacyCommand,
    SetPrivacyCommand,
)
from apps.armory.application.character.commands.update_character import (
    UpdateCharacterCommand,
)

__all__ = ["RemovePrivacyCommand", "SetPrivacyCommand", "UpdateCharacterCommand"]
