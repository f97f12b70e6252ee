"""
Unit tests for partial-update types
"""
from datetime import datetime, timezone

import pytest

from accounts.models.user import User
from accounts.schemas.updates import UNCHANGED, Unchanged, SetTo, UserUpdate, lift


@pytest.mark.unit
def test_unchanged_is_singleton():
    """Test UNCHANGED is the only Unchanged instance and is falsy"""
    assert Unchanged() is UNCHANGED
    assert not UNCHANGED
    assert repr(UNCHANGED) == "UNCHANGED"


@pytest.mark.unit
def test_lift_wraps_values():
    """Test lift keeps UNCHANGED absent and wraps everything else"""
    assert lift(UNCHANGED) is UNCHANGED
    assert lift(False) == SetTo(False)
    assert lift(None) == SetTo(None)
    assert lift(SetTo(1)) == SetTo(1)


@pytest.mark.unit
def test_empty_update():
    """Test a default update sets nothing"""
    assert UserUpdate().values() == {}


@pytest.mark.unit
def test_apply_to_sets_only_patched_fields():
    """Test apply_to writes SetTo fields and leaves the rest alone"""
    user = User(username="alice", status="online", face_descriptor=None)
    
    UserUpdate(face_descriptor=SetTo("[1, 2]"), status=SetTo(None)).apply_to(user)
    
    assert user.face_descriptor == "[1, 2]"
    assert user.status is None
    assert user.username == "alice"


@pytest.mark.unit
def test_update_values_distinguish_false_from_omitted():
    """Test SetTo(False) and SetTo(None) are emitted, UNCHANGED is not"""
    now = datetime.now(timezone.utc)
    update = UserUpdate(
        username=SetTo("alice"),
        avatar=SetTo(None),
        is_muted=SetTo(False),
        updated_at=SetTo(now)
    )
    
    assert update.values() == {
        "username": "alice",
        "avatar": None,
        "is_muted": False,
        "updated_at": now
    }
    assert "is_headphones_on" not in update.values()
    assert "password" not in update.values()
