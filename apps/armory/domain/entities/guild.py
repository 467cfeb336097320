"""Guild Entity."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GuildRecord:
    """길드 엔티티.

    Attributes:
        id: GW2 길드 ID
        tag: 길드 태그 (예: "ZED")
        name: 길드 이름
    """

    id: str
    tag: str
    name: str
