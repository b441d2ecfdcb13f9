"""Auth API routes - register, login, me."""

from fastapi import APIRouter, Depends, status

from frontdesk.application.services.auth_service import login as login_user, register_user
from frontdesk.domain.repositories.user_repository import UserRepository
from frontdesk.domain.schemas.auth import (
    LoginRequest,
    MessageResponse,
    RegisterRequest,
    SessionClaims,
    TokenResponse,
    UserRead,
)
from frontdesk.interfaces.api.deps import get_current_user
from frontdesk.interfaces.deps import get_user_repository

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, repo: UserRepository = Depends(get_user_repository)):
    register_user(repo, email=body.email, phone=body.phone, password=body.password)
    return MessageResponse(message="User registered successfully. Please log in.")


@router.post("/login", response_model=TokenResponse)
def login(body: LoginRequest, repo: UserRepository = Depends(get_user_repository)):
    return login_user(repo, body.identifier, body.password)


@router.get("/me", response_model=UserRead)
def get_me(user: SessionClaims = Depends(get_current_user)):
    return user
