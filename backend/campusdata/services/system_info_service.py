"""
Campus Data Backend — System Info Service
==========================================

What:  Read-only facts about the running service that the frontend uses to
       decide what to render (e.g. whether to show a Swagger UI link).
Why:   Values come from settings; nothing here is secret, so the endpoint is
       public.
"""

from typing import Optional

from campusdata import __version__
from campusdata.config import Settings, settings as default_settings
from campusdata.schemas.common import SystemInfoResponse


class SystemInfoService:
    def __init__(self, config: Optional[Settings] = None):
        self.config = config or default_settings

    def get_system_info(self) -> SystemInfoResponse:
        return SystemInfoResponse(
            show_swagger_ui_link=self.config.show_swagger_ui_link,
            version=__version__,
            source_repo=self.config.source_repo,
        )


system_info_service = SystemInfoService()
