from datetime import datetime, timezone
from sqlalchemy import BigInteger, Column, DateTime, Integer
from sqlmodel import SQLModel


class BaseModel(SQLModel):
    pass


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def id_column() -> Column:
    """Auto-increment BIGINT primary key (plain INTEGER on SQLite so rowid aliasing applies)"""
    return Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
    )


def timestamp_column() -> Column:
    """Timezone-aware timestamp; values are always written in UTC"""
    return Column(DateTime(timezone=True), nullable=False)
