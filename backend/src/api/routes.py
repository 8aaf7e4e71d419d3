"""
Route Registration

Centralizes all route registration for the FastAPI application.

Route Hierarchy:
================
    /health, /ready, /live  → Health check endpoints
    /api/auth               → Authentication (register, login, me)
    /api/blog               → Blog posts (CRUD)

Usage:
======
    from src.api.routes import register_routes

    app = FastAPI()
    register_routes(app)
"""

from fastapi import FastAPI

from src.api.handlers import (
    auth_handler,
    blog_handler,
    health_handler,
)


def register_routes(app: FastAPI) -> None:
    """
    Register all API routes.

    Args:
        app: FastAPI application instance
    """
    # Health check endpoints (no prefix, root level)
    app.include_router(
        health_handler.router,
        tags=["Health"],
    )

    # Authentication endpoints
    app.include_router(
        auth_handler.router,
        prefix="/api/auth",
        tags=["Authentication"],
    )

    # Blog endpoints
    app.include_router(
        blog_handler.router,
        prefix="/api/blog",
        tags=["Blog"],
    )
