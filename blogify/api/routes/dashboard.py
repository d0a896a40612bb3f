"""
FastAPI Routes для кабинета автора.
"""

from fastapi import APIRouter, Depends

from blogify.api.dependencies import get_current_identity, get_dashboard_service
from blogify.api.schemas.dashboard_schemas import DashboardResponse
from blogify.application.services.dashboard_service import DashboardService
from blogify.domain.entities.identity import Identity

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    identity: Identity = Depends(get_current_identity),
    service: DashboardService = Depends(get_dashboard_service),
):
    """Статьи, итоги и вкладки текущего пользователя."""
    view = await service.load(identity)
    return DashboardResponse.from_view(view)
