"""PostgreSQL implementation of IUserRepository.

Maps User aggregates to the users table. The unique index on the
normalized email is translated into DuplicateEmailError.
"""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from identity.domain.aggregates import User
from identity.domain.value_objects import Email, Password, UserId
from identity.infrastructure.models import EMAIL_INDEX_NAME, UserModel
from identity.infrastructure.observability import (
    DefaultUserRepositoryProbe,
    UserRepositoryProbe,
)
from identity.ports.exceptions import DuplicateEmailError
from identity.ports.repositories import IUserRepository
from shared_kernel.result import Err


class UserRepository(IUserRepository):
    """PostgreSQL-backed repository for User aggregates.

    Each write commits its own transaction, so one handler call is one
    unit of work against the store.
    """

    def __init__(
        self, session: AsyncSession, probe: UserRepositoryProbe | None = None
    ) -> None:
        """Initialize repository with database session and probe.

        Args:
            session: Request-scoped AsyncSession
            probe: Optional domain probe for observability
        """
        self._session = session
        self._probe = probe or DefaultUserRepositoryProbe()

    async def get_by_email(self, email: Email) -> User | None:
        """Retrieve a user by their normalized email."""
        stmt = select(UserModel).where(UserModel.email == email.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.email_not_found(email.value)
            return None

        self._probe.user_retrieved(model.id)
        return self._to_domain(model)

    async def get_by_id(self, user_id: UserId) -> User | None:
        """Retrieve a user by their ID."""
        stmt = select(UserModel).where(UserModel.id == user_id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            self._probe.user_not_found(user_id.value)
            return None

        self._probe.user_retrieved(user_id.value)
        return self._to_domain(model)

    async def list_all(self) -> list[User]:
        """List every user ordered by registration time."""
        stmt = select(UserModel).order_by(UserModel.created_at, UserModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def add(self, user: User) -> User:
        """Insert a new user.

        Raises:
            DuplicateEmailError: If the email index rejects the insert
        """
        model = UserModel(id=user.id.value)
        self._apply(model, user)
        self._session.add(model)
        await self._commit(user)
        return user

    async def update(self, user: User) -> User:
        """Persist changes to an existing user.

        Raises:
            ValueError: If the user does not exist
        """
        stmt = select(UserModel).where(UserModel.id == user.id.value)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            raise ValueError(f"User {user.id} does not exist")

        self._apply(model, user)
        await self._commit(user)
        return user

    async def _commit(self, user: User) -> None:
        try:
            # Flush first so constraint violations surface before commit
            await self._session.flush()
            await self._session.commit()
        except IntegrityError as e:
            await self._session.rollback()
            if EMAIL_INDEX_NAME in str(e):
                self._probe.duplicate_email(user.email.value)
                raise DuplicateEmailError(user.email.value) from e
            raise
        except SQLAlchemyError:
            await self._session.rollback()
            raise

        self._probe.user_saved(user.id.value, user.email.value)

    @staticmethod
    def _apply(model: UserModel, user: User) -> None:
        model.email = user.email.value
        model.password_hash = user.password.value
        model.first_name = user.first_name
        model.last_name = user.last_name
        model.is_active = user.is_active
        model.created_at = user.created_at
        model.updated_at = user.updated_at
        model.last_login_at = user.last_login_at

    @staticmethod
    def _to_domain(model: UserModel) -> User:
        # Stored values were validated on write
        password = Password.from_hash(model.password_hash)
        if isinstance(password, Err):
            raise ValueError(f"User {model.id} has no password hash")

        return User(
            id=UserId(value=model.id),
            email=Email.from_trusted(model.email),
            password=password.value,
            first_name=model.first_name,
            last_name=model.last_name,
            created_at=model.created_at,
            updated_at=model.updated_at,
            is_active=model.is_active,
            last_login_at=model.last_login_at,
        )
