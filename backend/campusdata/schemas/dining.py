"""
Campus Data Backend — Dining Schemas
=====================================

What:  API contracts for the three dining resources:
       - /api/ucsbdiningcommons      (natural key `code`)
       - /api/ucsbdiningcommonsmenu  (surrogate `id`)
       - /api/menuitemreview         (surrogate `id`)

Each resource has a `*Fields` model (full mutable record, used as the PUT
body) and a `*Response` model (fields + identifier).
"""


from pydantic import Field, NaiveDatetime

from campusdata.schemas.common import MAX_BIGINT, CamelModel

MIN_STARS = 1
MAX_STARS = 5


# ── Dining Commons ────────────────────────────────────────────────────────

class UCSBDiningCommonsFields(CamelModel):
    name: str = Field(min_length=1, examples=["Ortega"])
    has_sack_meal: bool
    has_take_out_meal: bool
    has_dining_cam: bool
    latitude: float = Field(ge=-90, le=90, examples=[34.410987])
    longitude: float = Field(ge=-180, le=180, examples=[-119.84709])


class UCSBDiningCommonsResponse(UCSBDiningCommonsFields):
    code: str = Field(description="Natural key chosen by the client, e.g. 'ortega'")


# ── Dining Commons Menu ───────────────────────────────────────────────────

class UCSBDiningCommonsMenuFields(CamelModel):
    dining_commons_code: str = Field(min_length=1, examples=["ortega"])
    name: str = Field(min_length=1, examples=["Baked Pesto Pasta with Chicken"])
    station: str = Field(min_length=1, examples=["Entree Specials"])


class UCSBDiningCommonsMenuResponse(UCSBDiningCommonsMenuFields):
    id: int


# ── Menu Item Review ──────────────────────────────────────────────────────

class MenuItemReviewFields(CamelModel):
    item_id: int = Field(ge=1, le=MAX_BIGINT, description="Id of the reviewed menu item")
    reviewer_email: str = Field(min_length=3, examples=["cgaucho@ucsb.edu"])
    stars: int = Field(ge=MIN_STARS, le=MAX_STARS)
    date_reviewed: NaiveDatetime = Field(examples=["2023-07-29T00:00:00"])
    comments: str


class MenuItemReviewResponse(MenuItemReviewFields):
    id: int
