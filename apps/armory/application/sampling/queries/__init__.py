"""Sampling Queries."""

from apps.armory.application.sampling.queries.get_characters_of_the_day import (
    CHARACTERS_OF_THE_DAY_KEY,
    GetCharactersOfTheDayQuery,
)
from apps.armory.application.sampling.queries.get_random_characters import (
    GetRandomCharactersQuery,
)

__all__ = [
    "CHARACTERS_OF_THE_DAY_KEY",
    "GetCharactersOfTheDayQuery",
    "GetRandomCharactersQuery",
]
