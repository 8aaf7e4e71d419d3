"""
API Handlers

Route handlers for the Yobo API.

Handlers follow the pattern:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

All business logic is delegated to the service layer. Handlers never catch
domain exceptions; the error handler middleware renders them.
"""

from src.api.handlers import (
    auth_handler,
    blog_handler,
    health_handler,
)

__all__ = [
    "auth_handler",
    "blog_handler",
    "health_handler",
]
