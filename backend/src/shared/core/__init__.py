"""
Core Module

Provides core functionality shared across the application:
- Structured logging
- Custom exceptions

Usage:
======
    from src.shared.core.logging import logger, get_logger
    from src.shared.core.exceptions import YoboException, NotFoundError

    logger.info("Starting operation", user_id=user_id)
"""

from src.shared.core.logging import (
    logger,
    get_logger,
)
from src.shared.core.exceptions import (
    YoboException,
    AuthenticationError,
    AuthorizationError,
    NotFoundError,
    UserNotFoundError,
    PostNotFoundError,
    ValidationError,
    ConflictError,
    DuplicateResourceError,
)

__all__ = [
    # Logging
    "logger",
    "get_logger",
    # Exceptions
    "YoboException",
    "AuthenticationError",
    "AuthorizationError",
    "NotFoundError",
    "UserNotFoundError",
    "PostNotFoundError",
    "ValidationError",
    "ConflictError",
    "DuplicateResourceError",
]
