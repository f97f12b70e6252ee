"""Password hashing helpers."""

from typing import Optional

import bcrypt

from accounts.core.config import settings


def hash_password(password: str, rounds: Optional[int] = None) -> str:
    """
    Hash a password using bcrypt with configured salt rounds.
    
    Args:
        password: Plain text password to hash
        rounds: Cost factor override, defaults to BCRYPT_SALT_ROUNDS
        
    Returns:
        Hashed password string
    """
    salt = bcrypt.gensalt(rounds=rounds or settings.BCRYPT_SALT_ROUNDS)
    hashed = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed.decode('utf-8')


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """
    Verify a plain password against a hashed password.
    
    Args:
        plain_password: Plain text password to verify
        hashed_password: Hashed password to compare against
        
    Returns:
        True if password matches, False otherwise
    """
    return bcrypt.checkpw(
        plain_password.encode('utf-8'),
        hashed_password.encode('utf-8')
    )
