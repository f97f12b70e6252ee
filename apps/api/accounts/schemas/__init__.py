"""
Pydantic schemas and update types
"""
from .user import UserRecord, UserSummary, MessageResponse, avatar_data_uri, avatar_bytes
from .updates import UNCHANGED, Unchanged, SetTo, Patch, UserUpdate, lift

__all__ = [
    "UserRecord",
    "UserSummary",
    "MessageResponse",
    "avatar_data_uri",
    "avatar_bytes",
    "UNCHANGED",
    "Unchanged",
    "SetTo",
    "Patch",
    "UserUpdate",
    "lift"
]
