"""
Core configuration and utilities package
"""
from .config import settings
from .database import get_db, init_db, drop_db
from .exceptions import (
    UserServiceError,
    UserNotFoundError,
    IncorrectPasswordError,
    UserOperationError,
    map_errors
)
from .security import hash_password, verify_password

__all__ = [
    "settings",
    "get_db",
    "init_db",
    "drop_db",
    "UserServiceError",
    "UserNotFoundError",
    "IncorrectPasswordError",
    "UserOperationError",
    "map_errors",
    "hash_password",
    "verify_password"
]
