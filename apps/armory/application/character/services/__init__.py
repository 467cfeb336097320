"""Character Services."""

from apps.armory.application.character.services.ownership_gate import OwnershipGate
from apps.armory.application.character.services.privacy_service import PrivacyService

__all__ = ["OwnershipGate", "PrivacyService"]
