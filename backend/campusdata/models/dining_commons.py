"""
Campus Data Backend — UCSBDiningCommons SQLAlchemy Model
=========================================================

What:  ORM model for the `ucsbdiningcommons` table.
Key:   `code` is a natural key supplied by the client (e.g. "ortega",
       "de-la-guerra"); there is no surrogate id.
"""

from sqlalchemy import Boolean, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base


class UCSBDiningCommons(Base):
    """A dining commons on campus, with its services and map location."""

    __tablename__ = "ucsbdiningcommons"

    code: Mapped[str] = mapped_column(String(64), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    has_sack_meal: Mapped[bool] = mapped_column(Boolean, nullable=False)
    has_take_out_meal: Mapped[bool] = mapped_column(Boolean, nullable=False)
    has_dining_cam: Mapped[bool] = mapped_column(Boolean, nullable=False)
    latitude: Mapped[float] = mapped_column(Float, nullable=False)
    longitude: Mapped[float] = mapped_column(Float, nullable=False)

    def __repr__(self) -> str:
        return f"<UCSBDiningCommons(code='{self.code}', name='{self.name}')>"
