"""
Campus Data Backend — UCSBDate SQLAlchemy Model
================================================

What:  ORM model representing the `ucsbdates` table.
Why:   Important academic-calendar dates (finals, registration passes, ...)
       tagged with the quarter they belong to.
Who:   Used by UCSBDateRepository and by Alembic for schema management.

Table Design Rationale:
    - Surrogate integer key assigned by the database
    - quarter_yyyyq: five-character quarter code, e.g. "20221" = Winter 2022
      (last digit: 1 winter, 2 spring, 3 summer, 4 fall)
    - local_date_time: naive date-time; campus dates are always Pacific local

    Index on quarter_yyyyq:
        Backs find_all_by_quarter_yyyyq, the only filtered query on this table.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class UCSBDate(Base):
    """An important date within a UCSB academic quarter."""

    __tablename__ = "ucsbdates"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)

    quarter_yyyyq: Mapped[str] = mapped_column(
        String(5),
        nullable=False,
        comment="Quarter code YYYYQ, e.g. 20221",
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    local_date_time: Mapped[datetime] = mapped_column(
        DateTime(timezone=False),
        nullable=False,
        comment="Date and time of the event (campus local time)",
    )

    __table_args__ = (
        Index("idx_ucsbdates_quarter_yyyyq", quarter_yyyyq),
    )

    def __repr__(self) -> str:
        return f"<UCSBDate(id={self.id}, quarter='{self.quarter_yyyyq}', name='{self.name}')>"
