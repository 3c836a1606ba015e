"""
Campus Data Backend — HelpRequest SQLAlchemy Model
===================================================

What:  A request for help raised by a team during a lab or section.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class HelpRequest(Base):
    __tablename__ = "helprequests"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    team_id: Mapped[str] = mapped_column(String(64), nullable=False)
    table_or_breakout_room: Mapped[str] = mapped_column(String(64), nullable=False)
    request_time: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    solved: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<HelpRequest(id={self.id}, team_id='{self.team_id}', solved={self.solved})>"
