"""Character exceptions."""

from apps.armory.application.character.exceptions.character import (
    CharacterNotFoundError,
    InvalidPrivacyFieldError,
    NoChangesProvidedError,
    NotCharacterOwnerError,
    ProfileSourceError,
)

__all__ = [
    "CharacterNotFoundError",
    "InvalidPrivacyFieldError",
    "NoChangesProvidedError",
    "NotCharacterOwnerError",
    "ProfileSourceError",
]
