"""Local Cache Infrastructure.

프로세스 로컬 stale-while-revalidate 캐시를 제공합니다.
"""

from apps.armory.infrastructure.cache.cached_public_character_reader import (
    PUBLIC_CHARACTERS_KEY,
    CachedPublicCharacterReader,
)
from apps.armory.infrastructure.cache.refreshing_cache import (
    CacheEntry,
    CacheState,
    RefreshingCache,
)

__all__ = [
    "PUBLIC_CHARACTERS_KEY",
    "CacheEntry",
    "CacheState",
    "CachedPublicCharacterReader",
    "RefreshingCache",
]
