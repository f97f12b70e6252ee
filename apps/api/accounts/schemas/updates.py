"""Explicit partial-update types.

A field of a partial update is either ``UNCHANGED`` or ``SetTo(value)``.
``SetTo(None)`` and ``SetTo(False)`` are real values, distinct from omission.
"""

from dataclasses import dataclass, fields
from datetime import datetime
from typing import Any, Dict, Generic, Optional, TypeVar, Union

T = TypeVar("T")


class Unchanged:
    """Marker for a field the update leaves alone"""
    
    _instance = None
    
    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance
    
    def __repr__(self) -> str:
        return "UNCHANGED"
    
    def __bool__(self) -> bool:
        return False


UNCHANGED = Unchanged()


@dataclass(frozen=True)
class SetTo(Generic[T]):
    """Field assignment carried by a partial update"""
    value: T


Patch = Union[Unchanged, SetTo[T]]


def lift(value: Any) -> Patch:
    """Turn a keyword argument into a patch, keeping UNCHANGED as absent."""
    if isinstance(value, (Unchanged, SetTo)):
        return value
    return SetTo(value)


@dataclass
class UserUpdate:
    """Column-by-column partial update of a User row"""
    username: Patch[str] = UNCHANGED
    email: Patch[str] = UNCHANGED
    password: Patch[str] = UNCHANGED
    avatar: Patch[Optional[bytes]] = UNCHANGED
    status: Patch[Optional[str]] = UNCHANGED
    is_muted: Patch[Optional[bool]] = UNCHANGED
    is_headphones_on: Patch[Optional[bool]] = UNCHANGED
    face_descriptor: Patch[Optional[str]] = UNCHANGED
    updated_at: Patch[datetime] = UNCHANGED
    
    def values(self) -> Dict[str, Any]:
        """Attribute name to value for every field that is set"""
        result = {}
        for field in fields(self):
            patch = getattr(self, field.name)
            if isinstance(patch, SetTo):
                result[field.name] = patch.value
        return result
    
    def apply_to(self, instance: Any) -> None:
        """Set every patched field on a loaded ORM instance"""
        for name, value in self.values().items():
            setattr(instance, name, value)
