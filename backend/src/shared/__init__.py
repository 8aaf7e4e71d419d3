"""
Shared Module

Code used by the API layer:
- Models: SQLAlchemy ORM models
- Repositories: Data access layer
- Services: Business logic layer
- Schemas: Pydantic request/response models
- Core: Logging, exceptions

Package Structure:
==================
    shared/
    ├── core/           ← Logging, exceptions
    ├── db/             ← Database session management
    ├── models/         ← SQLAlchemy models
    ├── repositories/   ← Data access layer
    ├── services/       ← Business logic
    ├── schemas/        ← Pydantic schemas
    ├── migrations/     ← Alembic migrations
    └── utils/          ← Slugs, password hashing and policy

Usage:
======
    from src.shared.models import User, BlogPost
    from src.shared.repositories import UserRepository
    from src.shared.services import AuthService, BlogService
    from src.shared.schemas import RegisterRequest, AuthResponse
    from src.shared.core import logger, YoboException
"""
