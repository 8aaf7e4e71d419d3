"""
Database Module

Database connectivity and session management.

Architecture Overview:
======================
    FastAPI Route
        │  Dependency Injection: get_db()
        ▼
    AsyncSession (one per request, commit on success, rollback on error)
        │  Passed to Services → Repositories
        ▼
    UserRepository / BlogPostRepository
        │  SQL
        ▼
    PostgreSQL (unique indexes on users.normalized_email and blog_posts.slug)

Usage in FastAPI:
=================
    from fastapi import Depends
    from src.shared.db import get_db

    @app.get("/users/{user_id}")
    async def get_user(user_id: UUID, db: AsyncSession = Depends(get_db)):
        return await UserRepository(db).get(user_id)
"""

from src.shared.db.session import (
    get_db,
    init_db,
    close_db,
    build_engine,
    AsyncSessionLocal,
    engine,
)

__all__ = [
    "get_db",
    "init_db",
    "close_db",
    "build_engine",
    "AsyncSessionLocal",
    "engine",
]
