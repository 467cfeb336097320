"""Requester identity dependencies.

인증 프록시(ext-authz)가 전달한 요청자 이메일을 추출합니다.
"""

from typing import Annotated

from fastapi import Header


def get_requester_email(
    x_user_email: Annotated[str | None, Header(alias="X-User-Email")] = None,
) -> str | None:
    """요청자 이메일을 반환합니다 (없으면 익명)."""
    if x_user_email is None:
        return None
    return x_user_email.strip() or None
