"""인증 관련 예외."""

from __future__ import annotations

from apps.armory.application.common.exceptions.base import ApplicationError


class MissingRequesterError(ApplicationError):
    """요청자 이메일이 누락됨."""

    def __init__(self) -> None:
        super().__init__("Missing requester email")
