"""
Yobo Backend

Blog API with email/password authentication and author-owned posts.

Package Structure:
==================
    src/
    ├── api/        ← FastAPI application
    ├── shared/     ← Shared code (models, repositories, services, etc.)
    └── config/     ← Configuration

Running the Application:
========================
    # API Server
    uvicorn src.api.main:app --reload

    # Database migrations
    alembic upgrade head
"""
