"""Character Queries."""

from apps.armory.application.character.queries.get_character import GetCharacterQuery
from apps.armory.application.character.queries.list_characters import ListCharactersQuery

__all__ = ["GetCharacterQuery", "ListCharactersQuery"]
