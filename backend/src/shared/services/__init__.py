"""
Business Logic Services

Services encapsulate business logic and coordinate between repositories
and domain rules.

Service Pattern:
================
    Handler → Service → Repository → Database

Services should:
- Contain business logic and validation
- Coordinate multiple repositories if needed
- Receive Settings through their constructor
- NOT handle HTTP concerns (that's for handlers)

Available Services:
===================
- CredentialStore: User records, password policy and hashing
- TokenService: JWT issuance and verification
- AuthService: User registration and authentication
- BlogService: Post CRUD, slug allocation, ownership and visibility

Usage:
======
    from src.shared.services import AuthService, BlogService

    service = AuthService(db, settings)
    result = await service.register(email, password, full_name)
"""

from src.shared.services.credential_store import CredentialStore
from src.shared.services.token_service import IssuedToken, TokenPrincipal, TokenService
from src.shared.services.auth_service import AuthResult, AuthService
from src.shared.services.blog_service import BlogService

__all__ = [
    "CredentialStore",
    "IssuedToken",
    "TokenPrincipal",
    "TokenService",
    "AuthResult",
    "AuthService",
    "BlogService",
]
