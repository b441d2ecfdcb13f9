"""Room API routes - public inventory listing."""

from typing import List

from fastapi import APIRouter, Depends

from frontdesk.core.exceptions import NotFoundError
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.domain.schemas.room import RoomRead
from frontdesk.interfaces.deps import get_room_repository

router = APIRouter(prefix="/api/rooms", tags=["Rooms"])


@router.get("", response_model=List[RoomRead])
def list_rooms(repo: RoomRepository = Depends(get_room_repository)):
    """All rooms. Public so the check-in form can fill its room selector before login."""
    return repo.list()


@router.get("/{room_id}", response_model=RoomRead)
def get_room(room_id: str, repo: RoomRepository = Depends(get_room_repository)):
    room = repo.get_by_id(room_id)
    if room is None:
        raise NotFoundError(f"Room {room_id} not found.", details={"room": room_id})
    return room
