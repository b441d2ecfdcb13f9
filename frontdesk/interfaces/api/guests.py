"""Guest API routes - check-in and in-house listing."""

from typing import List

from fastapi import APIRouter, Depends, status

from frontdesk.application.services.checkin_service import check_in, list_guests
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.domain.schemas.auth import SessionClaims
from frontdesk.domain.schemas.guest import CheckInRequest, GuestRead
from frontdesk.interfaces.api.deps import get_current_user
from frontdesk.interfaces.deps import get_guest_repository, get_room_repository

router = APIRouter(prefix="/api/guests", tags=["Guests"])


@router.post("/checkin", response_model=GuestRead, status_code=status.HTTP_201_CREATED)
def checkin(
    body: CheckInRequest,
    rooms: RoomRepository = Depends(get_room_repository),
    guests: GuestStayRepository = Depends(get_guest_repository),
    user: SessionClaims = Depends(get_current_user),
):
    return check_in(rooms, guests, user, body)


@router.get("", response_model=List[GuestRead])
def get_guests(
    guests: GuestStayRepository = Depends(get_guest_repository),
    user: SessionClaims = Depends(get_current_user),
):
    return list_guests(guests)
