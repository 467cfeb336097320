"""PostgreSQL Persistence.

SQLAlchemy Core 테이블을 조회하여 도메인 엔티티로 변환합니다.
"""

from apps.armory.infrastructure.persistence_postgres.adapters import (
    SqlaCharacterStore,
    SqlaGuildReader,
    SqlaPublicCharacterReader,
    SqlaTokenAccountWriter,
    SqlaTransactionManager,
)
from apps.armory.infrastructure.persistence_postgres.tables import metadata

__all__ = [
    "SqlaCharacterStore",
    "SqlaGuildReader",
    "SqlaPublicCharacterReader",
    "SqlaTokenAccountWriter",
    "SqlaTransactionManager",
    "metadata",
]
