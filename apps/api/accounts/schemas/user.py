"""User read schemas."""

import base64
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from accounts.core.config import settings


def avatar_data_uri(avatar: Any) -> Optional[str]:
    """
    Render stored avatar bytes as a data URI.
    
    Strings and None are returned unchanged.
    """
    if isinstance(avatar, (bytes, bytearray, memoryview)):
        encoded = base64.b64encode(bytes(avatar)).decode("ascii")
        return f"data:{settings.AVATAR_MIME_TYPE};base64,{encoded}"
    return avatar


def avatar_bytes(avatar: Any) -> Optional[bytes]:
    """
    Inverse of avatar_data_uri, for avatars handed back by callers.
    
    Base64 data URIs are decoded; other strings are stored as their UTF-8
    bytes. Bytes and None are returned unchanged.
    """
    if isinstance(avatar, str):
        header, sep, payload = avatar.partition(",")
        if sep and header.startswith("data:") and header.endswith(";base64"):
            return base64.b64decode(payload)
        return avatar.encode("utf-8")
    return avatar


class UserRecord(BaseModel):
    """Full user record as returned by the repository."""
    model_config = ConfigDict(from_attributes=True)
    
    id: int
    username: str
    email: str
    # bcrypt hash; readable by callers, left out of dumps
    password: str = Field(..., exclude=True, repr=False)
    avatar: Optional[str] = None
    status: Optional[str] = None
    is_muted: Optional[bool] = None
    is_headphones_on: Optional[bool] = None
    face_descriptor: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    
    @field_validator("avatar", mode="before")
    @classmethod
    def render_avatar(cls, v):
        return avatar_data_uri(v)


class UserSummary(BaseModel):
    """Listing projection; dumps with capitalized keys when by_alias=True."""
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
    
    id: int = Field(..., alias="ID")
    email: str = Field(..., alias="Email")
    username: str = Field(..., alias="Username")
    avatar: Optional[str] = Field(None, alias="Avatar")
    status: Optional[str] = Field(None, alias="Status")
    face_descriptor: Optional[str] = Field(None, alias="FaceDescriptor")
    
    @field_validator("avatar", mode="before")
    @classmethod
    def render_avatar(cls, v):
        return avatar_data_uri(v)


class MessageResponse(BaseModel):
    """Status message returned by auxiliary operations."""
    message: str
