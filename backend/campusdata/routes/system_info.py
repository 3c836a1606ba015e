"""Public system facts for the frontend, mounted at /api/systemInfo."""

from fastapi import APIRouter

from campusdata.schemas.common import SystemInfoResponse
from campusdata.services.system_info_service import system_info_service

router = APIRouter(prefix="/api", tags=["System Information"])


@router.get(
    "/systemInfo",
    response_model=SystemInfoResponse,
    summary="Get global information about the application",
)
async def get_system_info() -> SystemInfoResponse:
    return system_info_service.get_system_info()
