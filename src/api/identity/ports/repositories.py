"""Repository protocols (ports) for identity bounded context.

Repository protocols define the interface for persisting and retrieving
User aggregates. Implementations must enforce a unique index on the
normalized email.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from identity.domain.aggregates import User
from identity.domain.value_objects import Email, UserId


@runtime_checkable
class IUserRepository(Protocol):
    """Repository for User aggregate persistence.

    The store is the only resource shared across requests. Its unique email
    constraint is what makes concurrent registrations with the same email
    safe: at most one ``add`` succeeds.
    """

    async def get_by_email(self, email: Email) -> User | None:
        """Retrieve a user by their normalized email.

        Args:
            email: The normalized email to search for

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID.

        Args:
            user_id: The unique identifier of the user

        Returns:
            The User aggregate, or None if not found
        """
        ...

    async def list_all(self) -> list[User]:
        """List every user in the store's enumeration order.

        Returns:
            List of all User aggregates
        """
        ...

    async def add(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The User aggregate to insert

        Returns:
            The persisted User aggregate

        Raises:
            DuplicateEmailError: If the email is already registered
        """
        ...

    async def update(self, user: User) -> User:
        """Persist changes to an existing user.

        Args:
            user: The User aggregate to persist

        Returns:
            The persisted User aggregate
        """
        ...
