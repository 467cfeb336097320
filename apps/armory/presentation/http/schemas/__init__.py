"""HTTP Schemas."""

from apps.armory.presentation.http.schemas.character import (
    CharacterSummaryResponse,
    CharacterUpdateRequest,
    PrivacyResponse,
)

__all__ = [
    "CharacterSummaryResponse",
    "CharacterUpdateRequest",
    "PrivacyResponse",
]
