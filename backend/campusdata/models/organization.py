"""
Campus Data Backend — UCSBOrganization SQLAlchemy Model
========================================================

What:  A registered student organization, keyed by its short org code
       (natural key, e.g. "ZPR" for Zeta Phi Rho).
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from campusdata.database import Base


class UCSBOrganization(Base):
    __tablename__ = "ucsborganizations"

    org_code: Mapped[str] = mapped_column(String(64), primary_key=True)
    org_translation_short: Mapped[str] = mapped_column(String(255), nullable=False)
    org_translation: Mapped[str] = mapped_column(String(255), nullable=False)
    inactive: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    def __repr__(self) -> str:
        return f"<UCSBOrganization(org_code='{self.org_code}', inactive={self.inactive})>"
