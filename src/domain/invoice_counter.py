"""Invoice Counter Domain Entity

Per-year invoice numbering sequence. Incremented only through a single
atomic statement in the repository, never read-modify-written.
"""

from sqlmodel import Field, Column
from sqlalchemy import BigInteger, Integer
from src.domain.base import BaseModel


class InvoiceCounter(BaseModel, table=True):
    """
    Invoice Counter - Last invoice sequence number issued in a year

    Domain Rules:
    - One row per numbering year
    - last_number only ever increases
    """

    __tablename__ = "invoice_counters"

    year: int = Field(
        sa_column=Column(Integer, primary_key=True, autoincrement=False),
        description="Numbering epoch (calendar year)"
    )

    last_number: int = Field(
        default=0,
        sa_column=Column(BigInteger, nullable=False, default=0),
        description="Last sequence number handed out for the year"
    )
