"""Check-in service - occupies a room and records the guest stay."""

import uuid
from datetime import datetime, timezone
from typing import List

import structlog

from frontdesk.core.validation import parse_count, require_fields
from frontdesk.domain.models.guest_stay import GuestStay
from frontdesk.domain.repositories.guest_repository import GuestStayRepository
from frontdesk.domain.repositories.room_repository import RoomRepository
from frontdesk.domain.schemas.auth import SessionClaims
from frontdesk.domain.schemas.guest import CheckInRequest

logger = structlog.get_logger(__name__)


def check_in(
    rooms: RoomRepository,
    guests: GuestStayRepository,
    claims: SessionClaims,
    details: CheckInRequest,
) -> GuestStay:
    """Check a guest into an Available room.

    Raises ValidationError for missing name/contact/room, NotFoundError for
    an unknown room and ConflictError when the room is not Available. The
    room transition and the stay append happen under the store lock, so a
    room can only be taken once.
    """
    require_fields(
        "Name, contact, and room number are required.",
        name=details.name,
        contact=details.contact,
        room_number=details.room_number,
    )
    room_number = details.room_number.strip()

    with rooms.transaction():
        rooms.occupy(room_number)
        stay = guests.add(
            GuestStay(
                id=str(uuid.uuid4()),
                name=details.name.strip(),
                contact=details.contact.strip(),
                email=details.email or "",
                id_type=details.id_type or "",
                id_number=details.id_number or "",
                nationality=details.nationality or "",
                adults=parse_count(details.adults, default=1, minimum=1),
                children=parse_count(details.children, default=0, minimum=0),
                checkin_time=datetime.now(timezone.utc),
                expected_checkout=details.expected_checkout or "",
                room_number=room_number,
                notes=details.notes or "",
                checked_in_by=claims.identifier,
            )
        )

    logger.info(
        "Guest checked in",
        guest_id=stay.id,
        room=room_number,
        checked_in_by=stay.checked_in_by,
    )
    return stay


def list_guests(guests: GuestStayRepository) -> List[GuestStay]:
    return guests.list()
