"""
Credential Store

Owns user identity records: email lookups, password policy, hashing.

It is the only writer of User rows. Raw passwords go in, bcrypt hashes
are stored; the raw value is never persisted or logged.
"""

from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.settings import Settings
from src.shared.core.exceptions import ValidationError
from src.shared.models.user import User
from src.shared.repositories.user_repository import UserRepository
from src.shared.utils.security import PasswordHasher, PasswordPolicy


class CredentialStore:
    """
    User credentials backed by UserRepository.

    Attributes:
        repo: UserRepository instance
        hasher: bcrypt hasher configured with BCRYPT_ROUNDS
        policy: Password rules from settings
    """

    def __init__(self, session: AsyncSession, settings: Settings) -> None:
        self.repo = UserRepository(session)
        self.hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
        self.policy = PasswordPolicy.from_settings(settings)

    async def get_by_email(self, email: str) -> Optional[User]:
        """Case-insensitive lookup by email."""
        return await self.repo.get_by_email(email)

    async def create_user(
        self,
        email: str,
        password: str,
        full_name: Optional[str] = None,
    ) -> User:
        """
        Create a user after checking the password policy.

        Args:
            email: Email address
            password: Raw password (hashed before storage)
            full_name: Optional display name

        Returns:
            The created User

        Raises:
            ValidationError: Password violates one or more policy rules
            DuplicateResourceError: Email already registered
        """
        violations = self.policy.violations(password)
        if violations:
            raise ValidationError(
                "Password does not meet requirements",
                details={"errors": violations},
            )

        return await self.repo.create_user(
            email=email,
            password_hash=self.hasher.hash(password),
            full_name=full_name,
        )

    def verify_password(self, user: User, password: str) -> bool:
        """Check a raw password against the user's stored hash."""
        return self.hasher.verify(password, user.password_hash)

    def burn_verification_time(self) -> None:
        """Run a throwaway verification for lookups that found no user."""
        self.hasher.dummy_verify()
