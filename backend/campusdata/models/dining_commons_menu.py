"""
Campus Data Backend — UCSBDiningCommonsMenu SQLAlchemy Model
=============================================================

What:  A menu item served at a station of a dining commons.

`dining_commons_code` holds the commons code as plain text. It is
deliberately not a foreign key: menus are imported independently of the
commons list and every resource in this API is flat.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base, BigIntegerPK


class UCSBDiningCommonsMenu(Base):
    __tablename__ = "ucsbdiningcommonsmenu"

    id: Mapped[int] = mapped_column(BigIntegerPK, primary_key=True, autoincrement=True)
    dining_commons_code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    station: Mapped[str] = mapped_column(String(255), nullable=False)

    def __repr__(self) -> str:
        return (
            f"<UCSBDiningCommonsMenu(id={self.id}, commons='{self.dining_commons_code}', "
            f"name='{self.name}')>"
        )
