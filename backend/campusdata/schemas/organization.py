"""
Campus Data Backend — UCSBOrganization Schemas
===============================================

What:  API contract for /api/ucsborganization (natural key `orgCode`).
"""

from pydantic import Field

from campusdata.schemas.common import CamelModel


class UCSBOrganizationFields(CamelModel):
    org_translation_short: str = Field(min_length=1, examples=["ZETA PHI RHO"])
    org_translation: str = Field(min_length=1, examples=["ZETA PHI RHO FRATERNITY"])
    inactive: bool


class UCSBOrganizationResponse(UCSBOrganizationFields):
    org_code: str = Field(description="Natural key chosen by the client, e.g. 'ZPR'")
