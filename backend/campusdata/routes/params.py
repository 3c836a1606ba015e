"""Query parameter types shared by the resource controllers."""

from typing import Annotated

from fastapi import Query

from campusdata.schemas.common import MAX_BIGINT

# Surrogate keys are BIGINT identity columns; anything outside that range
# can never match a row and is rejected before it reaches the driver.
RecordId = Annotated[
    int,
    Query(ge=1, le=MAX_BIGINT, description="Server-assigned id of the record"),
]
