"""
Token Service

Issues and verifies signed session tokens (JWT, HS256 via PyJWT).

Token Claims:
=============
    {
        "sub":   "550e8400-e29b-41d4-a716-446655440000",   ← user id
        "email": "ahmet@x.com",
        "name":  "Ahmet Kaya",                              ← display name ("" if unset)
        "iss":   "yobo-api",
        "aud":   "yobo-client",
        "iat":   1705312200,
        "exp":   1705315800                                 ← iat + ACCESS_TOKEN_EXPIRE_MINUTES
    }

Tokens are self-contained: verification needs only the signing key, issuer
and audience from Settings. There is no revocation list.

Usage:
======
    from src.shared.services.token_service import TokenService

    tokens = TokenService(settings)
    issued = tokens.issue(user)
    principal = tokens.verify(issued.token)
    principal.user_id  # UUID
"""

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import UUID

import jwt

from src.config.settings import Settings
from src.shared.core.exceptions import AuthenticationError
from src.shared.core.logging import get_logger
from src.shared.models.user import User


logger = get_logger("auth.tokens")

REQUIRED_CLAIMS = ["sub", "exp", "iat", "iss", "aud"]


@dataclass(frozen=True)
class IssuedToken:
    """A freshly signed token and the moment it stops being valid."""

    token: str
    expires_at: datetime


@dataclass(frozen=True)
class TokenPrincipal:
    """Identity extracted from a verified token."""

    user_id: UUID
    email: str
    full_name: Optional[str]


class TokenService:
    """
    Service for JWT issuance and verification.

    Attributes:
        settings: Application settings (key, algorithm, issuer, audience, TTL)
    """

    def __init__(self, settings: Settings) -> None:
        """
        Initialize TokenService.

        Args:
            settings: Application settings
        """
        self.settings = settings

    @property
    def ttl(self) -> timedelta:
        """Lifetime of issued tokens."""
        return timedelta(minutes=self.settings.ACCESS_TOKEN_EXPIRE_MINUTES)

    def issue(self, user: User, now: Optional[datetime] = None) -> IssuedToken:
        """
        Create a signed access token for a user.

        Args:
            user: Authenticated or newly registered user
            now: Issue time (defaults to current UTC time)

        Returns:
            IssuedToken with the encoded JWT and its expiry
        """
        issued_at = (now or datetime.now(timezone.utc)).replace(microsecond=0)
        expires_at = issued_at + self.ttl

        claims = {
            "sub": str(user.id),
            "email": user.email,
            "name": user.full_name or "",
            "iss": self.settings.JWT_ISSUER,
            "aud": self.settings.JWT_AUDIENCE,
            "iat": issued_at,
            "exp": expires_at,
        }

        token = jwt.encode(
            claims,
            self.settings.signing_key,
            algorithm=self.settings.JWT_ALGORITHM,
        )
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> TokenPrincipal:
        """
        Verify a token and extract the authenticated principal.

        Rejects tokens with a bad signature, an expired exp, a wrong issuer
        or audience, missing claims, or a subject that is not a user id.

        Args:
            token: Encoded JWT from the Authorization header

        Returns:
            TokenPrincipal for the token's subject

        Raises:
            AuthenticationError: If the token is not acceptable
        """
        try:
            payload = jwt.decode(
                token,
                self.settings.signing_key,
                algorithms=[self.settings.JWT_ALGORITHM],
                audience=self.settings.JWT_AUDIENCE,
                issuer=self.settings.JWT_ISSUER,
                options={"require": REQUIRED_CLAIMS},
            )
        except jwt.ExpiredSignatureError as e:
            logger.info("Token rejected", reason="expired")
            raise AuthenticationError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            logger.info("Token rejected", reason=type(e).__name__)
            raise AuthenticationError("Invalid token") from e

        try:
            user_id = UUID(payload["sub"])
        except (TypeError, ValueError) as e:
            logger.info("Token rejected", reason="malformed_subject")
            raise AuthenticationError("Invalid token") from e

        return TokenPrincipal(
            user_id=user_id,
            email=payload.get("email", ""),
            full_name=payload.get("name") or None,
        )
