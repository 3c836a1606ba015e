"""
Campus Data Backend — UCSBDate Repository
==========================================

Declares the one custom finder on dates: all dates of a given quarter.
"""

from typing import List

from sqlalchemy import select

from campusdata.models.ucsb_date import UCSBDate
from campusdata.repositories.base import Repository


class UCSBDateRepository(Repository[UCSBDate, int]):
    model = UCSBDate

    async def find_all_by_quarter_yyyyq(self, quarter_yyyyq: str) -> List[UCSBDate]:
        """
        SELECT ... WHERE quarter_yyyyq = :quarter ORDER BY local_date_time

        Uses idx_ucsbdates_quarter_yyyyq. Returned in calendar order because
        callers render a quarter's dates as a timeline.
        """
        result = await self.db.execute(
            select(UCSBDate)
            .where(UCSBDate.quarter_yyyyq == quarter_yyyyq)
            .order_by(UCSBDate.local_date_time, UCSBDate.id)
        )
        return list(result.scalars().all())
