"""Exceptions raised by the accounts data-access layer."""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class UserServiceError(Exception):
    """Base exception for user account operations"""
    pass


class UserNotFoundError(UserServiceError):
    """Raised when a write operation targets a user that does not exist"""
    
    def __init__(self, user_id: Any):
        self.user_id = user_id
        super().__init__(f"User with ID {user_id} not found")


class IncorrectPasswordError(UserServiceError):
    """Raised when the supplied current password does not match"""
    
    def __init__(self, message: str = "Current password is incorrect"):
        super().__init__(message)


class UserOperationError(UserServiceError):
    """Generic failure of a repository operation"""
    pass


def map_errors(message: str) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator converting store and library failures into UserOperationError.
    
    UserServiceError subclasses pass through unchanged. Any other exception is
    logged with its traceback and replaced by UserOperationError(message); the
    original stays available as __cause__.
    
    Args:
        message: Caller-visible message for the wrapped operation
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs) -> T:
            try:
                return await func(*args, **kwargs)
            except UserServiceError:
                raise
            except Exception as e:
                logger.error(f"{func.__name__} failed: {str(e)}", exc_info=True)
                raise UserOperationError(message) from e
        return wrapper
    return decorator
