"""Dashboard API - aggregated stats for the front desk dashboard."""

from fastapi import APIRouter, Depends

from frontdesk.application.services.dashboard_service import summarize
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.domain.schemas.auth import SessionClaims
from frontdesk.domain.schemas.guest import DashboardSummary
from frontdesk.interfaces.api.deps import get_current_user
from frontdesk.interfaces.deps import get_guest_repository, get_room_repository

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"])


@router.get("/summary", response_model=DashboardSummary)
def dashboard_summary(
    rooms: RoomRepository = Depends(get_room_repository),
    guests: GuestStayRepository = Depends(get_guest_repository),
    user: SessionClaims = Depends(get_current_user),
):
    """Room occupancy and in-house guest counts."""
    return summarize(rooms, guests)
