"""PrivacyService.

비공개 필드 제거 등 포트 의존성 없는 순수 애플리케이션 로직을 담당합니다.
"""

from __future__ import annotations

import re
from typing import Any, Iterable, Mapping

from apps.armory.application.character.exceptions import InvalidPrivacyFieldError
from apps.armory.domain.entities import parse_privacy

_INVALID_FIELD_PATTERN = re.compile(r"[|\s]")


class PrivacyService:
    """비공개 필드 서비스."""

    def parse(self, raw: str | None) -> tuple[str, ...]:
        """저장된 privacy 문자열을 필드 목록으로 변환합니다."""
        return parse_privacy(raw)

    def redact(
        self,
        snapshot: Mapping[str, Any],
        privacy_fields: Iterable[str],
        is_owner: bool,
    ) -> Mapping[str, Any]:
        """소유자가 아니면 비공개 필드를 제거합니다.

        정책:
        - 소유자: 스냅샷을 그대로 반환
        - 그 외: 비공개 필드를 제거한 얕은 복사본 반환 (입력은 변경하지 않음)

        Args:
            snapshot: GW2 스냅샷 필드
            privacy_fields: 비공개 필드 목록
            is_owner: 요청자가 소유자인지 여부

        Returns:
            공개 가능한 필드
        """
        if is_owner:
            return snapshot

        hidden = set(privacy_fields)
        return {key: value for key, value in snapshot.items() if key not in hidden}

    def validate_field(self, field: str) -> str:
        """비공개 필드 이름을 검증합니다.

        저장 형식(`|` 구분)을 깨뜨리는 이름은 허용하지 않습니다.

        Raises:
            InvalidPrivacyFieldError: 빈 이름, `|` 또는 공백 포함
        """
        if not field or _INVALID_FIELD_PATTERN.search(field):
            raise InvalidPrivacyFieldError(field)
        return field
