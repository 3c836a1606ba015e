"""
Campus Data Backend — Article SQLAlchemy Model
===============================================

What:  A link to an article shared with the class, with who added it and when.
"""

from datetime import datetime

from sqlalchemy import DateTime, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class Article(Base):
    __tablename__ = "articles"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    url: Mapped[str] = mapped_column(String(2048), nullable=False)
    explanation: Mapped[str] = mapped_column(Text, nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    date_added: Mapped[datetime] = mapped_column(DateTime(timezone=False), nullable=False)

    def __repr__(self) -> str:
        return f"<Article(id={self.id}, title='{self.title}')>"
