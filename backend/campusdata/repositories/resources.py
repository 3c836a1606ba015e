"""
Campus Data Backend — Plain Resource Repositories
==================================================

Repositories for entities that need only the generic operations.
"""

from campusdata.models.article import Article
from campusdata.models.dining_commons import UCSBDiningCommons
from campusdata.models.dining_commons_menu import UCSBDiningCommonsMenu
from campusdata.models.help_request import HelpRequest
from campusdata.models.menu_item_review import MenuItemReview
from campusdata.models.organization import UCSBOrganization
from campusdata.models.recommendation_request import RecommendationRequest
from campusdata.repositories.base import Repository


class UCSBDiningCommonsRepository(Repository[UCSBDiningCommons, str]):
    model = UCSBDiningCommons


class UCSBDiningCommonsMenuRepository(Repository[UCSBDiningCommonsMenu, int]):
    model = UCSBDiningCommonsMenu


class MenuItemReviewRepository(Repository[MenuItemReview, int]):
    model = MenuItemReview


class RecommendationRequestRepository(Repository[RecommendationRequest, int]):
    model = RecommendationRequest


class UCSBOrganizationRepository(Repository[UCSBOrganization, str]):
    model = UCSBOrganization


class HelpRequestRepository(Repository[HelpRequest, int]):
    model = HelpRequest


class ArticleRepository(Repository[Article, int]):
    model = Article
