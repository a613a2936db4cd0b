"""In-memory implementation of IUserRepository.

Used for local development and tests. Enforces the same unique-email rule
as the database index and keeps users in insertion order.
"""

from __future__ import annotations

import asyncio
import copy

from identity.domain.aggregates import User
from identity.domain.value_objects import Email, UserId
from identity.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from identity.ports.exceptions import DuplicateEmailError
from identity.ports.repositories import IUserRepository


class InMemoryUserRepository(IUserRepository):
    """Dict-backed user store.

    Stores and returns copies so in-flight mutations on an aggregate are not
    visible until ``add`` or ``update`` is called, as with a real database.
    """

    def __init__(self, probe: UserRepositoryProbe | None = None) -> None:
        self._users: dict[str, User] = {}
        self._lock = asyncio.Lock()
        self._probe = probe or DefaultUserRepositoryProbe()

    async def get_by_email(self, email: Email) -> User | None:
        for user in self._users.values():
            if user.email == email:
                self._probe.user_retrieved(user.id.value)
                return copy.deepcopy(user)

        self._probe.email_not_found(email.value)
        return None

    async def get_by_id(self, user_id: UserId) -> User | None:
        user = self._users.get(user_id.value)
        if user is None:
            self._probe.user_not_found(user_id.value)
            return None

        self._probe.user_retrieved(user_id.value)
        return copy.deepcopy(user)

    async def list_all(self) -> list[User]:
        return [copy.deepcopy(user) for user in self._users.values()]

    async def add(self, user: User) -> User:
        async with self._lock:
            if any(u.email == user.email for u in self._users.values()):
                self._probe.duplicate_email(user.email.value)
                raise DuplicateEmailError(user.email.value)
            self._users[user.id.value] = copy.deepcopy(user)

        self._probe.user_saved(user.id.value, user.email.value)
        return copy.deepcopy(user)

    async def update(self, user: User) -> User:
        async with self._lock:
            if user.id.value not in self._users:
                raise ValueError(f"User {user.id} does not exist")
            if any(
                u.email == user.email and u.id != user.id
                for u in self._users.values()
            ):
                self._probe.duplicate_email(user.email.value)
                raise DuplicateEmailError(user.email.value)
            self._users[user.id.value] = copy.deepcopy(user)

        self._probe.user_saved(user.id.value, user.email.value)
        return copy.deepcopy(user)
