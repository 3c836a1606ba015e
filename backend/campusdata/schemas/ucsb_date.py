"""
Campus Data Backend — UCSBDate Schemas
=======================================

What:  API contract for /api/ucsbdates.

Why two models:
    UCSBDateFields is the full mutable record; it is the PUT body, so every
    field is required and an update can never silently keep an old value.
    UCSBDateResponse adds the server-assigned id for responses.
"""


from pydantic import Field, NaiveDatetime

from campusdata.schemas.common import CamelModel

# YYYYQ: four-digit year followed by quarter digit 1-4
QUARTER_YYYYQ_PATTERN = r"^\d{4}[1-4]$"


class UCSBDateFields(CamelModel):
    quarter_yyyyq: str = Field(
        alias="quarterYYYYQ",
        pattern=QUARTER_YYYYQ_PATTERN,
        description="Quarter code, e.g. 20221 for Winter 2022",
        examples=["20221"],
    )
    name: str = Field(min_length=1, examples=["Finals Begin"])
    local_date_time: NaiveDatetime = Field(
        description="ISO-8601 local date-time",
        examples=["2022-12-01T00:00:00"],
    )


class UCSBDateResponse(UCSBDateFields):
    id: int = Field(description="Server-assigned identifier")
