"""Pydantic schemas for User and Auth."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import Optional


class RegisterRequest(BaseModel):
    email: Optional[str] = None
    phone: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    identifier: Optional[str] = None
    password: Optional[str] = None


class UserRead(BaseModel):
    id: str
    email: Optional[str] = None
    phone: Optional[str] = None
    role: str

    model_config = {"from_attributes": True}


class SessionClaims(UserRead):
    """Identity claims carried by a verified session token."""

    @property
    def identifier(self) -> str:
        return self.email or self.phone or ""


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserRead

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MessageResponse(BaseModel):
    message: str
