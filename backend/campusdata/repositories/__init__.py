"""
Campus Data Backend — Repositories Package
===========================================

One repository class per entity. Generic operations come from
`Repository`; custom finders are declared on the entity's own class.
"""

from campusdata.repositories.base import Repository
from campusdata.repositories.resources import (
    ArticleRepository,
    HelpRequestRepository,
    MenuItemReviewRepository,
    RecommendationRequestRepository,
    UCSBDiningCommonsMenuRepository,
    UCSBDiningCommonsRepository,
    UCSBOrganizationRepository,
)
from campusdata.repositories.ucsb_dates import UCSBDateRepository
from campusdata.repositories.users import UserRepository

__all__ = [
    "ArticleRepository",
    "HelpRequestRepository",
    "MenuItemReviewRepository",
    "RecommendationRequestRepository",
    "Repository",
    "UCSBDateRepository",
    "UCSBDiningCommonsMenuRepository",
    "UCSBDiningCommonsRepository",
    "UCSBOrganizationRepository",
    "UserRepository",
]
