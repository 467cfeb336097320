"""SQLAlchemy adapters."""

from apps.armory.infrastructure.persistence_postgres.adapters.character_store_sqla import (
    SqlaCharacterStore,
)
from apps.armory.infrastructure.persistence_postgres.adapters.guild_reader_sqla import (
    SqlaGuildReader,
)
from apps.armory.infrastructure.persistence_postgres.adapters.public_character_reader_sqla import (
    SqlaPublicCharacterReader,
)
from apps.armory.infrastructure.persistence_postgres.adapters.token_account_writer_sqla import (
    SqlaTokenAccountWriter,
)
from apps.armory.infrastructure.persistence_postgres.adapters.transaction_manager_sqla import (
    SqlaTransactionManager,
)

__all__ = [
    "SqlaCharacterStore",
    "SqlaGuildReader",
    "SqlaPublicCharacterReader",
    "SqlaTokenAccountWriter",
    "SqlaTransactionManager",
]
