"""Account Entities.

사용자 계정과 GW2 API 토큰(자격 증명) 엔티티입니다.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class UserAccount:
    """사용자 계정 엔티티.

    Attributes:
        id: 사용자 ID
        email: 로그인 이메일
        alias: 공개 별칭
    """

    id: int
    email: str
    alias: str


@dataclass
class Credential:
    """GW2 API 토큰 엔티티.

    사용자 계정과 GW2 계정을 연결합니다.
    token은 비밀 값이므로 repr/로그에 노출하지 않습니다.

    Attributes:
        id: 토큰 레코드 ID
        token: GW2 API 키
        account_name: GW2 계정 이름 (예: "Zed.1234")
        owner: 토큰을 등록한 사용자
    """

    id: int
    token: str = field(repr=False)
    account_name: str
    owner: UserAccount
