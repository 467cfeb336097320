"""Character DTOs."""

from apps.armory.application.character.dto.character import (
    CharacterUpdate,
    CharacterView,
    ProfileSnapshot,
)

__all__ = ["CharacterUpdate", "CharacterView", "ProfileSnapshot"]
