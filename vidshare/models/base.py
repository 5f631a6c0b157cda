import uuid
from sqlalchemy import CHAR
from sqlalchemy.orm import declarative_base
from sqlalchemy.types import TypeDecorator

Base = declarative_base()


class UUIDChar(TypeDecorator):
    """Primary and foreign keys: canonical uuid text on disk, uuid.UUID in Python."""
    impl = CHAR(36)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        # Path and token ids arrive as strings; malformed ones simply match no row.
        return None if value is None else str(value)

    def process_result_value(self, value, dialect):
        return None if value is None else uuid.UUID(value)
