"""
User database model
"""
from sqlalchemy import Column, String, Integer, Boolean, LargeBinary, Text
from sqlalchemy import DateTime
from .base import Base


class User(Base):
    """User account row"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False)
    email = Column(String(255), unique=True, nullable=False)
    # bcrypt hash, never plaintext
    password = Column(String(255), nullable=False)
    avatar = Column(LargeBinary, nullable=True)
    status = Column(String(50), nullable=True)
    is_muted = Column("isMuted", Boolean, nullable=True)
    is_headphones_on = Column("isHeadphonesOn", Boolean, nullable=True)
    # JSON text for array descriptors, stored as given otherwise
    face_descriptor = Column("faceDescriptor", Text, nullable=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=False)
    
    def __repr__(self) -> str:
        return f"<User id={self.id} username={self.username!r}>"
