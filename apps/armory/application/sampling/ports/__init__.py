"""Sampling Ports."""

from apps.armory.application.sampling.ports.public_character_reader import (
    PublicCharacterReader,
)
from apps.armory.application.sampling.ports.value_cache import ValueCache

__all__ = ["PublicCharacterReader", "ValueCache"]
