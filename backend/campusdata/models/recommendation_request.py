"""
Campus Data Backend — RecommendationRequest SQLAlchemy Model
=============================================================

What:  A student's request for a letter of recommendation from a professor.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class RecommendationRequest(Base):
    """
    Lifecycle:
        1. Created when the student files the request (done = False)
        2. Updated by an admin once the letter has been sent (done = True)
        3. Deleted when no longer needed
    """

    __tablename__ = "recommendationrequests"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    requester_email: Mapped[str] = mapped_column(String(255), nullable=False)
    professor_email: Mapped[str] = mapped_column(String(255), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    date_requested: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    date_needed: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return (
            f"<RecommendationRequest(id={self.id}, requester='{self.requester_email}', "
            f"done={self.done})>"
        )
