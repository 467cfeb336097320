"""GW2 API Infrastructure."""

from apps.armory.infrastructure.gw2.profile_client_httpx import Gw2ProfileClient
from apps.armory.infrastructure.gw2.token_prefetcher import BackgroundTokenPrefetcher

__all__ = ["BackgroundTokenPrefetcher", "Gw2ProfileClient"]
