"""
Unit tests for database models
"""
import pytest

from accounts.models import Base, User


@pytest.mark.unit
def test_user_creation():
    """Test user model creation"""
    user = User(
        username="alice",
        email="a@x.com",
        password="$2b$10$hash",
        status="online",
        is_muted=False
    )
    
    assert user.username == "alice"
    assert user.email == "a@x.com"
    assert user.avatar is None
    assert user.is_muted is False
    assert user.is_headphones_on is None
    assert "alice" in repr(user)


@pytest.mark.unit
def test_user_table_columns():
    """Test column names of the users table"""
    table = Base.metadata.tables["users"]
    
    assert {column.name for column in table.columns} == {
        "id", "username", "email", "password", "avatar", "status",
        "isMuted", "isHeadphonesOn", "faceDescriptor", "created_at", "updated_at"
    }
    assert table.columns["email"].unique is True
    assert table.columns["username"].unique is True
    assert table.columns["avatar"].nullable is True
