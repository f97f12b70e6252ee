"""
Unit tests for the error-mapping decorator
"""
import logging

import pytest

from accounts.core.exceptions import (
    IncorrectPasswordError,
    UserNotFoundError,
    UserOperationError,
    UserServiceError,
    map_errors,
)


@map_errors("Failed to do the thing")
async def failing(exc):
    raise exc


@map_errors("Failed to do the thing")
async def succeeding(value):
    return value


@pytest.mark.unit
class TestMapErrors:
    """Test the error boundary."""
    
    async def test_passes_result_through(self):
        assert await succeeding(42) == 42
    
    async def test_wraps_unexpected_errors(self, caplog):
        """Test foreign exceptions become UserOperationError and are logged."""
        original = RuntimeError("socket closed")
        
        with caplog.at_level(logging.ERROR, logger="accounts.core.exceptions"):
            with pytest.raises(UserOperationError) as exc_info:
                await failing(original)
        
        assert str(exc_info.value) == "Failed to do the thing"
        assert exc_info.value.__cause__ is original
        assert "failing failed: socket closed" in caplog.text
    
    async def test_not_found_passes_through(self):
        with pytest.raises(UserNotFoundError) as exc_info:
            await failing(UserNotFoundError(3))
        
        assert str(exc_info.value) == "User with ID 3 not found"
    
    async def test_incorrect_password_passes_through(self):
        with pytest.raises(IncorrectPasswordError, match="Current password is incorrect"):
            await failing(IncorrectPasswordError())
    
    def test_hierarchy(self):
        """Test every error shares the service base class."""
        assert issubclass(UserNotFoundError, UserServiceError)
        assert issubclass(IncorrectPasswordError, UserServiceError)
        assert issubclass(UserOperationError, UserServiceError)
    
    def test_preserves_function_name(self):
        assert succeeding.__name__ == "succeeding"
