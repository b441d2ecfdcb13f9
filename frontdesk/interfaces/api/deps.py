"""FastAPI dependency - JWT session check for protected routes."""

from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from frontdesk.application.services.auth_service import verify_session
from frontdesk.domain.schemas.auth import SessionClaims

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> SessionClaims:
    """Extract and validate the caller's claims from the bearer token."""
    token = credentials.credentials if credentials else None
    return verify_session(token)
