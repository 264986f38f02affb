"""User service - business logic for user management."""

import logging
from datetime import datetime, timezone
from typing import List

from testbed.errors import NotFoundError, ValidationError
from testbed.models.domain import User
from testbed.models.dto import UserCreateRequest, UserDTO, UserUpdateRequest
from testbed.repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """
    Service for user management business logic.

    Responsibilities:
    - Enforce required fields on creation
    - Turn missing IDs into NotFoundError
    - Convert between domain entities and DTOs

    Does NOT:
    - Parse HTTP requests (that's API layer)
    - Lock or store anything (that's repository layer)
    """

    def __init__(self, user_repo: UserRepository):
        self.user_repo = user_repo

    def list_users(self) -> List[UserDTO]:
        """List all users."""
        return [self._to_dto(u) for u in self.user_repo.list()]

    def get_user(self, user_id: int) -> UserDTO:
        """Get user by ID.

        Raises:
            NotFoundError: If no user has this ID
        """
        user = self.user_repo.get(user_id)
        if user is None:
            raise NotFoundError("User not found")
        return self._to_dto(user)

    def create_user(self, request: UserCreateRequest) -> UserDTO:
        """
        Create a new user.

        Business rules:
        - Name and email must both be non-empty
        - ID and creation time are assigned here, never by the caller
        """
        if not request.name or not request.email:
            raise ValidationError("Name and email are required")

        user = self.user_repo.create(
            lambda user_id: User(
                id=user_id,
                name=request.name,
                email=request.email,
                created_at=datetime.now(timezone.utc),
            )
        )
        logger.info("Created user %d", user.id)
        return self._to_dto(user)

    def update_user(self, user_id: int, request: UserUpdateRequest) -> UserDTO:
        """Merge the supplied non-empty fields into an existing user."""
        user = self.user_repo.update(user_id, name=request.name, email=request.email)
        if user is None:
            raise NotFoundError("User not found")
        logger.info("Updated user %d", user_id)
        return self._to_dto(user)

    def delete_user(self, user_id: int) -> None:
        """Delete a user. Deleting twice is NotFound the second time."""
        if not self.user_repo.delete(user_id):
            raise NotFoundError("User not found")
        logger.info("Deleted user %d", user_id)

    @staticmethod
    def _to_dto(user: User) -> UserDTO:
        """Convert domain entity to DTO."""
        return UserDTO(
            id=user.id,
            name=user.name,
            email=user.email,
            created_at=user.created_at,
        )
