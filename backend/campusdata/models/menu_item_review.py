"""
Campus Data Backend — MenuItemReview SQLAlchemy Model
======================================================

What:  A star rating plus comments left by a diner for a menu item.

Table Design Rationale:
    - item_id: id of the reviewed UCSBDiningCommonsMenu row, stored as a plain
      integer (no foreign key, resources are independent)
    - stars: integer rating; the API restricts it to 1-5
    - date_reviewed: naive local date-time of the review
"""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class MenuItemReview(Base):
    """A review of a single dining-commons menu item."""

    __tablename__ = "menuitemreviews"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    item_id: Mapped[int] = mapped_column(BigInteger, nullable=False)
    reviewer_email: Mapped[str] = mapped_column(String(255), nullable=False)
    stars: Mapped[int] = mapped_column(Integer, nullable=False)
    date_reviewed: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)
    comments: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<MenuItemReview(id={self.id}, item_id={self.item_id}, stars={self.stars})>"
