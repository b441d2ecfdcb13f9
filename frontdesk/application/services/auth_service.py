"""Auth service - registration, login, JWT session management and password hashing."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import structlog
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

from frontdesk.config import get_settings
from frontdesk.core.exceptions import AuthError, ConflictError, InternalError, ValidationError
from frontdesk.core.validation import (
    normalize_email,
    normalize_phone,
    require_fields,
    require_min_length,
    require_present,
)
from frontdesk.domain.models.user import User
from frontdesk.domain.repositories.user_repository import UserRepository
from frontdesk.domain.schemas.auth import SessionClaims, TokenResponse, UserRead

logger = structlog.get_logger(__name__)
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

CLAIM_FIELDS = ("id", "email", "phone", "role")


def hash_password(password: str) -> str:
    try:
        return pwd_context.hash(password)
    except ValueError as e:
        raise InternalError("Could not process password") from e


def verify_password(plain_password: str, hashed_password: str) -> bool:
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except ValueError:
        return False


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    settings = get_settings()
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(minutes=settings.JWT_EXPIRATION_MINUTES)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.JWT_ALGORITHM)


def verify_session(token: Optional[str]) -> SessionClaims:
    """Decode a bearer token into identity claims.

    Raises AuthError with reason ``missing``, ``expired`` or ``invalid``.
    """
    if not token:
        raise AuthError(AuthError.MISSING)

    settings = get_settings()
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise AuthError(AuthError.EXPIRED)
    except JWTError:
        raise AuthError(AuthError.INVALID)

    if not payload.get("id") or not payload.get("role"):
        raise AuthError(AuthError.INVALID)
    return SessionClaims(**{field: payload.get(field) for field in CLAIM_FIELDS})


def register_user(
    repo: UserRepository,
    email: Optional[str],
    phone: Optional[str],
    password: Optional[str],
) -> User:
    settings = get_settings()
    normalized_email = normalize_email(email)
    normalized_phone = normalize_phone(phone)

    if normalized_email is None and normalized_phone is None:
        raise ValidationError("Email or phone number is required.")
    require_present("Password is required.", password=password)
    require_min_length(
        password,
        settings.PASSWORD_MIN_LENGTH,
        f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters long.",
    )

    password_hash = hash_password(password)

    with repo.transaction():
        existing = repo.find_by_identifier(normalized_email, normalized_phone)
        if existing:
            field = "Email" if normalized_email and existing.email == normalized_email else "Phone number"
            logger.info("Registration rejected", reason="duplicate", field=field)
            raise ConflictError(f"{field} is already registered.", details={"field": field.lower()})

        user = repo.add(
            User(
                id=str(uuid.uuid4()),
                email=normalized_email,
                phone=normalized_phone,
                password_hash=password_hash,
                role=settings.DEFAULT_ROLE,
            )
        )

    logger.info("User registered", user_id=user.id, identifier=user.identifier)
    return user


def authenticate_user(repo: UserRepository, identifier: str, password: str) -> Optional[User]:
    """Return the user matching identifier + password, or None."""
    normalized_email = normalize_email(identifier)
    # Identifiers without "@" may also be phone numbers typed with separators
    normalized_phone = normalize_phone(identifier) if "@" not in identifier else None

    user = repo.find_by_identifier(normalized_email, normalized_phone)
    if not user or not verify_password(password, user.password_hash):
        return None
    return user


def login(repo: UserRepository, identifier: Optional[str], password: Optional[str]) -> TokenResponse:
    message = "Email/Phone and password are required"
    require_fields(message, identifier=identifier)
    require_present(message, password=password)

    user = authenticate_user(repo, identifier, password)
    if user is None:
        logger.info("Login failed", identifier=normalize_email(identifier))
        raise AuthError(AuthError.CREDENTIALS)

    user_read = UserRead.model_validate(user)
    access_token = create_access_token(data=user_read.model_dump())
    logger.info("User logged in", user_id=user.id)
    return TokenResponse(access_token=access_token, user=user_read)


def ensure_default_user(repo: UserRepository) -> Optional[User]:
    """Create the configured front desk account unless it already exists."""
    settings = get_settings()
    email = normalize_email(settings.DEFAULT_USER_EMAIL)
    if repo.get_by_email(email):
        return None
    user = register_user(repo, email=email, phone=None, password=settings.DEFAULT_USER_PASSWORD)
    logger.info("Default user created", email=email)
    return user
