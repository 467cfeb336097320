"""Table Definitions.

Armory 도메인의 SQLAlchemy Table 정의.
ORM 매핑 없이 순수 테이블 스키마만 정의합니다.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.sql import func

ARMORY_SCHEMA = "armory"

metadata = MetaData(schema=ARMORY_SCHEMA)

# armory.users 테이블 (가입/비밀번호 관리는 users 리소스 담당)
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("email", String(320), unique=True, nullable=False),
    Column("alias", String(120), unique=True, nullable=False),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
)

# armory.gw2_api_tokens 테이블
gw2_api_tokens_table = Table(
    "gw2_api_tokens",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("token", String(128), unique=True, nullable=False),
    Column("account_name", Text, nullable=False),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("armory.users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), server_default=func.now(), onupdate=func.now()),
)

# armory.guilds 테이블 (GW2 길드 ID가 PK)
guilds_table = Table(
    "guilds",
    metadata,
    Column("id", String(64), primary_key=True),
    Column("tag", String(8), nullable=False),
    Column("name", Text, nullable=False),
)

# armory.characters 테이블
characters_table = Table(
    "characters",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("name", String(128), unique=True, nullable=False),
    Column(
        "gw2_api_token_id",
        BigInteger,
        ForeignKey("armory.gw2_api_tokens.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    ),
    Column("guild", String(64), nullable=True),
    # `|`로 연결된 비공개 필드 목록
    Column("privacy", Text, nullable=False, server_default=""),
    Column("show_public", Boolean, nullable=False, server_default="true", index=True),
    Column("show_guild", Boolean, nullable=False, server_default="true"),
    Column("show_builds", Boolean, nullable=False, server_default="true"),
    Column("created_at", DateTime(timezone=True), server_default=func.now()),
    Column("updated_at", DateTime(timezone=True), server_default=func.now(), onupdate=func.now()),
)
