"""User repository - in-memory implementation."""

from typing import Optional

from testbed.models.domain import User
from testbed.repositories.base import InMemoryRepository


class UserRepository(InMemoryRepository[User]):
    """
    Repository for user data.

    Current implementation: In-memory (dict)
    Rationale: demo data, nothing survives a restart
    """

    def update(
        self,
        user_id: int,
        name: Optional[str] = None,
        email: Optional[str] = None,
    ) -> Optional[User]:
        """Merge non-empty fields into the stored user.

        id and created_at are never touched. Returns the merged user, or
        None if the ID is unknown.
        """
        def apply(user: User) -> None:
            if name:
                user.name = name
            if email:
                user.email = email

        return self._merge(user_id, apply)
