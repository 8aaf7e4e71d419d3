"""
User Repository

Database operations specific to the User model.
Extends BaseRepository with user-specific query methods.

Common Operations:
==================
- get_by_email()   → Find user by email address (case-insensitive)
- create_user()    → Insert a user with its normalized email

The unique index on normalized_email is what guarantees one account per
address; the lookup in AuthService.register is only the fast path for a
friendly error.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.shared.repositories.base import BaseRepository
from src.shared.models.user import User, normalize_email


class UserRepository(BaseRepository[User]):
    """
    Repository for User database operations.

    Provides methods for common user queries beyond basic CRUD:
    - Looking up users by email
    """

    conflict_message = "Email already registered"

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize UserRepository.

        Args:
            session: Async database session
        """
        super().__init__(User, session)

    # ═══════════════════════════════════════════════════════════════════════════
    # LOOKUP METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address.

        Matching is case-insensitive: "Ahmet@X.com" finds "ahmet@x.com".

        Args:
            email: Email address to search for

        Returns:
            User if found, None otherwise

        SQL Generated:
            SELECT * FROM users WHERE normalized_email = 'ahmet@x.com'
        """
        result = await self.session.execute(
            select(User).where(User.normalized_email == normalize_email(email))
        )
        return result.scalar_one_or_none()

    # ═══════════════════════════════════════════════════════════════════════════
    # CREATE METHODS
    # ═══════════════════════════════════════════════════════════════════════════

    async def create_user(
        self,
        email: str,
        password_hash: str,
        full_name: Optional[str] = None,
    ) -> User:
        """
        Insert a new user.

        Args:
            email: Email as typed by the user
            password_hash: Already-hashed password
            full_name: Optional display name

        Returns:
            The created User

        Raises:
            DuplicateResourceError: If the normalized email is already taken
        """
        return await self.create(
            email=email.strip(),
            normalized_email=normalize_email(email),
            password_hash=password_hash,
            full_name=full_name,
        )
