"""
Utilities Package

Common utility functions and helpers.

Contents:
=========
- security: Password hashing (passlib/bcrypt) and password policy
- slug: Title → URL slug conversion

Usage:
======
    from src.shared.utils.security import PasswordHasher, PasswordPolicy
    from src.shared.utils.slug import to_slug
"""

from src.shared.utils.security import PasswordHasher, PasswordPolicy
from src.shared.utils.slug import to_slug, with_suffix

__all__ = [
    "PasswordHasher",
    "PasswordPolicy",
    "to_slug",
    "with_suffix",
]
