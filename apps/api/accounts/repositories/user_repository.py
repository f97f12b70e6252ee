"""Repository for user data access."""

import json
import logging
from datetime import datetime, timezone
from typing import Any, List, Optional, Union

from sqlalchemy import select, update

from accounts.core.database import get_db
from accounts.core.exceptions import IncorrectPasswordError, UserNotFoundError, map_errors
from accounts.core.security import hash_password, verify_password
from accounts.models.user import User
from accounts.schemas.updates import UNCHANGED, SetTo, UserUpdate, lift
from accounts.schemas.user import MessageResponse, UserRecord, UserSummary, avatar_bytes

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class UserRepository:
    """Repository for user database operations."""
    
    @map_errors("Failed to create user")
    async def create_user(
        self,
        username: str,
        email: str,
        password: str,
        avatar: Union[bytes, str, None] = None
    ) -> UserRecord:
        """
        Create a new user with a hashed password.
        
        Args:
            username: Login name
            email: Email address
            password: Plain text password, hashed before it is stored
            avatar: Optional avatar image
            
        Returns:
            Created user record with ID
        """
        now = _utcnow()
        user = User(
            username=username,
            email=email,
            password=hash_password(password),
            avatar=avatar_bytes(avatar or None),
            created_at=now,
            updated_at=now
        )
        async with get_db() as session:
            session.add(user)
            await session.commit()  # Explicit commit for write operation
            await session.refresh(user)
        logger.debug(f"Created user {user.id}")
        return UserRecord.model_validate(user)
    
    @map_errors("Failed to retrieve users")
    async def get_all_users(self) -> List[UserSummary]:
        """
        List every user with the public listing columns.
        
        Returns:
            User summaries, possibly empty
        """
        async with get_db() as session:
            result = await session.execute(
                select(
                    User.id.label("ID"),
                    User.email.label("Email"),
                    User.username.label("Username"),
                    User.avatar.label("Avatar"),
                    User.status.label("Status"),
                    User.face_descriptor.label("FaceDescriptor")
                ).order_by(User.id)
            )
            return [UserSummary.model_validate(dict(row._mapping)) for row in result.all()]
    
    @map_errors("Failed to retrieve user")
    async def get_user_by_id(self, user_id: int) -> Optional[UserRecord]:
        """
        Get a user by ID.
        
        Args:
            user_id: Primary key of the user
            
        Returns:
            User record if found, None otherwise
        """
        async with get_db() as session:
            user = await session.get(User, user_id)
            if user is None:
                return None
            return UserRecord.model_validate(user)
    
    @map_errors("Failed to retrieve user")
    async def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        """
        Get a user by email address.
        
        Args:
            email: Email address to search for
            
        Returns:
            User record if found, None otherwise
        """
        return await self._get_first(User.email == email)
    
    @map_errors("Failed to retrieve user by username")
    async def get_user_by_username(self, username: str) -> Optional[UserRecord]:
        """
        Get a user by username.
        
        Args:
            username: Username to search for
            
        Returns:
            User record if found, None otherwise
        """
        return await self._get_first(User.username == username)
    
    @map_errors("Failed to update user")
    async def update_user(
        self,
        user_id: int,
        username: str,
        email: str,
        password: Optional[str] = None,
        avatar: Union[bytes, str, None] = None,
        status: Optional[str] = None,
        is_muted: Any = UNCHANGED,
        is_headphones_on: Any = UNCHANGED
    ) -> int:
        """
        Update a user's profile.
        
        Username, email, avatar and status are always written. The password is
        hashed and written only when given. is_muted and is_headphones_on are
        written only when passed, so False is stored but omission is not.
        
        Returns:
            Number of rows updated
        """
        changes = UserUpdate(
            username=SetTo(username),
            email=SetTo(email),
            avatar=SetTo(avatar_bytes(avatar)),
            status=SetTo(status),
            is_muted=lift(is_muted),
            is_headphones_on=lift(is_headphones_on),
            updated_at=SetTo(_utcnow())
        )
        if password:
            changes.password = SetTo(hash_password(password))
        return await self._apply(user_id, changes)
    
    @map_errors("Failed to update avatar")
    async def update_avatar(self, user_id: int, avatar: Union[bytes, str, None]) -> int:
        """
        Replace a user's avatar.
        
        Returns:
            Number of rows updated
        """
        changes = UserUpdate(avatar=SetTo(avatar_bytes(avatar)), updated_at=SetTo(_utcnow()))
        return await self._apply(user_id, changes)
    
    @map_errors("Failed to change password")
    async def change_password(
        self,
        user_id: int,
        current_password: str,
        new_password: str
    ) -> MessageResponse:
        """
        Change a password after checking the current one.
        
        Raises:
            UserNotFoundError: No user with this ID
            IncorrectPasswordError: current_password does not match
        """
        async with get_db() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            
            if not verify_password(current_password, user.password):
                raise IncorrectPasswordError()
            
            UserUpdate(
                password=SetTo(hash_password(new_password)),
                updated_at=SetTo(_utcnow())
            ).apply_to(user)
            await session.commit()
        
        logger.debug(f"Password changed for user {user_id}")
        return MessageResponse(message="Password changed successfully")
    
    @map_errors("Failed to register face recognition")
    async def register_face_recognition(self, user_id: int, face_descriptor: Any) -> MessageResponse:
        """
        Store a face descriptor for a user.
        
        Lists and tuples are serialized to JSON text; any other value is
        stored as given.
        
        Raises:
            UserNotFoundError: No user with this ID
        """
        async with get_db() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            
            if isinstance(face_descriptor, (list, tuple)):
                face_descriptor = json.dumps(list(face_descriptor))
            UserUpdate(
                face_descriptor=SetTo(face_descriptor),
                updated_at=SetTo(_utcnow())
            ).apply_to(user)
            await session.commit()
        
        logger.debug(f"Face descriptor registered for user {user_id}")
        return MessageResponse(message="Face recognition data registered successfully")
    
    @map_errors("Failed to delete user")
    async def delete_user(self, user_id: int) -> UserRecord:
        """
        Delete a user.
        
        Returns:
            The user record as it was before deletion
            
        Raises:
            UserNotFoundError: No user with this ID
        """
        async with get_db() as session:
            user = await session.get(User, user_id)
            if user is None:
                raise UserNotFoundError(user_id)
            
            snapshot = UserRecord.model_validate(user)
            await session.delete(user)
            await session.commit()
        
        logger.debug(f"Deleted user {user_id}")
        return snapshot
    
    async def _get_first(self, criterion) -> Optional[UserRecord]:
        async with get_db() as session:
            result = await session.execute(
                select(User).where(criterion).order_by(User.id).limit(1)
            )
            user = result.scalars().first()
            if user is None:
                return None
            return UserRecord.model_validate(user)
    
    async def _apply(self, user_id: int, changes: UserUpdate) -> int:
        values = {getattr(User, name): value for name, value in changes.values().items()}
        async with get_db() as session:
            result = await session.execute(
                update(User)
                .where(User.id == user_id)
                .values(values)
                .execution_options(synchronize_session=False)
            )
            await session.commit()
        logger.debug(f"Updated {result.rowcount} row(s) for user {user_id}")
        return result.rowcount
