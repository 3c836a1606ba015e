"""
Campus Data Backend — ORM Models Package
=========================================

Importing this package registers every table with `Base.metadata`, which is
what Alembic's autogenerate and the test suite's `create_all` rely on.
"""

from campusdata.models.article import Article
from campusdata.models.dining_commons import UCSBDiningCommons
from campusdata.models.dining_commons_menu import UCSBDiningCommonsMenu
from campusdata.models.help_request import HelpRequest
from campusdata.models.menu_item_review import MenuItemReview
from campusdata.models.organization import UCSBOrganization
from campusdata.models.recommendation_request import RecommendationRequest
from campusdata.models.ucsb_date import UCSBDate
from campusdata.models.user import User

__all__ = [
    "Article",
    "HelpRequest",
    "MenuItemReview",
    "RecommendationRequest",
    "UCSBDate",
    "UCSBDiningCommons",
    "UCSBDiningCommonsMenu",
    "UCSBOrganization",
    "User",
]
