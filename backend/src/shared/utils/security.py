"""
Security Utilities

Password hashing and password policy enforcement.

Password Hashing:
=================
Uses passlib's CryptContext with bcrypt: salted per record, adaptive cost,
and constant-time verification. The work factor comes from BCRYPT_ROUNDS.

Password Policy:
================
A list of rules built from settings. Every violated rule yields one
human-readable message so registration can report all problems at once.

Usage:
======
    from src.shared.utils.security import PasswordHasher, PasswordPolicy

    hasher = PasswordHasher(rounds=settings.BCRYPT_ROUNDS)
    hashed = hasher.hash("Secret123!")
    hasher.verify("Secret123!", hashed)     # True

    policy = PasswordPolicy.from_settings(settings)
    policy.violations("abc")
    # ["Passwords must be at least 6 characters.", ...]
"""

from dataclasses import dataclass

from passlib.context import CryptContext

from src.config.settings import Settings


class PasswordHasher:
    """
    bcrypt password hashing via passlib.

    Attributes:
        context: Configured passlib CryptContext
    """

    def __init__(self, rounds: int = 12) -> None:
        self.context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
        )

    def hash(self, password: str) -> str:
        """
        Hash password using bcrypt.

        Args:
            password: Plain text password

        Returns:
            bcrypt hash string (includes salt and cost)
        """
        return self.context.hash(password)

    def verify(self, plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against a stored bcrypt hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Stored hash

        Returns:
            True if password matches, False otherwise
        """
        return self.context.verify(plain_password, hashed_password)

    def dummy_verify(self) -> None:
        """
        Spend roughly the time of a real verification.

        Called when the account does not exist so response timing does not
        reveal which emails are registered.
        """
        self.context.dummy_verify()


@dataclass(frozen=True)
class PasswordPolicy:
    """
    Configurable password rules.

    Defaults mirror the common identity-framework policy: six characters with
    a digit, a lower-case letter, an upper-case letter and a symbol.
    """

    min_length: int = 6
    require_digit: bool = True
    require_lowercase: bool = True
    require_uppercase: bool = True
    require_non_alphanumeric: bool = True

    @classmethod
    def from_settings(cls, config: Settings) -> "PasswordPolicy":
        """Build the policy from application settings."""
        return cls(
            min_length=config.PASSWORD_MIN_LENGTH,
            require_digit=config.PASSWORD_REQUIRE_DIGIT,
            require_lowercase=config.PASSWORD_REQUIRE_LOWERCASE,
            require_uppercase=config.PASSWORD_REQUIRE_UPPERCASE,
            require_non_alphanumeric=config.PASSWORD_REQUIRE_NON_ALPHANUMERIC,
        )

    def violations(self, password: str) -> list[str]:
        """
        Check a password against every rule.

        Args:
            password: Candidate password

        Returns:
            Messages for each violated rule (empty list when valid)
        """
        errors: list[str] = []

        if len(password) < self.min_length:
            errors.append(f"Passwords must be at least {self.min_length} characters.")
        if self.require_non_alphanumeric and password.isalnum():
            errors.append("Passwords must have at least one non alphanumeric character.")
        if self.require_digit and not any("0" <= ch <= "9" for ch in password):
            errors.append("Passwords must have at least one digit ('0'-'9').")
        if self.require_lowercase and not any("a" <= ch <= "z" for ch in password):
            errors.append("Passwords must have at least one lowercase ('a'-'z').")
        if self.require_uppercase and not any("A" <= ch <= "Z" for ch in password):
            errors.append("Passwords must have at least one uppercase ('A'-'Z').")

        return errors
