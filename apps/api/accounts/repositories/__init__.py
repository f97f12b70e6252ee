"""
Data access layer (Repository pattern)
"""
from .user_repository import UserRepository

__all__ = [
    "UserRepository"
]
