"""Column types that behave the same on PostgreSQL and SQLite."""

import uuid

from sqlalchemy import String, TypeDecorator
from sqlalchemy.dialects.postgresql import UUID as PG_UUID


class GUID(TypeDecorator):
    """UUID column.

    Native ``uuid`` on PostgreSQL; a 36 character string anywhere else.
    Python side it is always ``uuid.UUID``.
    """

    impl = String(36)
    cache_ok = True

    @staticmethod
    def _native(dialect) -> bool:
        return dialect.name == "postgresql"

    def load_dialect_impl(self, dialect):
        column_type = PG_UUID(as_uuid=True) if self._native(dialect) else String(36)
        return dialect.type_descriptor(column_type)

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        value = value if isinstance(value, uuid.UUID) else uuid.UUID(str(value))
        return value if self._native(dialect) else str(value)

    def process_result_value(self, value, dialect):
        if value is None or isinstance(value, uuid.UUID):
            return value
        return uuid.UUID(str(value))
