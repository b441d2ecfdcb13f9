"""Pydantic schemas for Room."""

from pydantic import BaseModel

from frontdesk.domain.models.room import RoomStatus, RoomType


class RoomRead(BaseModel):
    id: str
    type: RoomType
    rate: float
    status: RoomStatus

    model_config = {"from_attributes": True}
