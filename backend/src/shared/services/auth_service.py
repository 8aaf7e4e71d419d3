"""
Authentication Service

Business logic for user registration and login.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- CredentialStore (users, password policy, hashing)
- TokenService (JWT issuance)

Flows:
======
    register: lookup email ─found──▶ ConflictError
                  │ absent
                  ▼
              CredentialStore.create ─policy──▶ ValidationError
                  │                  ─race────▶ ConflictError
                  ▼
              TokenService.issue ──▶ AuthResult

    login:    lookup email ─absent──▶ AuthenticationError
                  │ found
                  ▼
              verify password ─mismatch──▶ AuthenticationError
                  │
                  ▼
              TokenService.issue ──▶ AuthResult

Both login failures carry the same client-facing message; the log records
which one happened. There is no lockout after repeated failures.

Usage:
======
    from src.shared.services.auth_service import AuthService

    service = AuthService(db, settings)
    result = await service.register("a@x.com", "Secret123!", "Ahmet Kaya")
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import Settings
from src.shared.core.exceptions import AuthenticationError, DuplicateResourceError
from src.shared.core.logging import get_logger
from src.shared.models.user import User
from src.shared.services.credential_store import CredentialStore
from src.shared.services.token_service import TokenService


logger = get_logger("auth")

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


@dataclass(frozen=True)
class AuthResult:
    """Outcome of a successful register or login."""

    user: User
    token: str
    expires_at: datetime


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User registration with email/password/full name
    - User authentication (login)
    - Token generation through TokenService

    Attributes:
        session: Database session
        credentials: CredentialStore instance
        tokens: TokenService instance
    """

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
            settings: Application settings (injected, never read globally)
        """
        self.session = session
        self.credentials = CredentialStore(session, settings)
        self.tokens = TokenService(settings)

    async def register(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> AuthResult:
        """
        Register a new user and issue a token.

        Args:
            email: User's email address
            password: Plain text password (will be hashed)
            full_name: Optional display name

        Returns:
            AuthResult with the user, token and token expiry

        Raises:
            DuplicateResourceError: If email already registered
            ValidationError: If password violates the policy
        """
        if await self.credentials.get_by_email(email):
            logger.info("Registration rejected", reason="email_taken")
            raise DuplicateResourceError("Email already registered")

        display_name = (full_name or "").strip() or None
        user = await self.credentials.create_user(
            email=email,
            password=password,
            full_name=display_name,
        )

        issued = self.tokens.issue(user)
        logger.info("User registered", user_id=str(user.id))

        return AuthResult(user=user, token=issued.token, expires_at=issued.expires_at)

    async def login(
        self,
        email: str,
        password: str,
    ) -> AuthResult:
        """
        Authenticate user and issue a token.

        Args:
            email: User's email address
            password: Plain text password

        Returns:
            AuthResult with the user, token and token expiry

        Raises:
            AuthenticationError: If the user is unknown or the password is wrong
        """
        user = await self.credentials.get_by_email(email)
        if not user:
            self.credentials.burn_verification_time()
            logger.info("Login rejected", reason="user_not_found")
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        if not self.credentials.verify_password(user, password):
            logger.info("Login rejected", reason="invalid_credentials", user_id=str(user.id))
            raise AuthenticationError(INVALID_CREDENTIALS_MESSAGE)

        issued = self.tokens.issue(user)
        logger.info("User logged in", user_id=str(user.id))

        return AuthResult(user=user, token=issued.token, expires_at=issued.expires_at)
