"""List-users query."""

from __future__ import annotations

from identity.application.commands import ListUsersQuery
from identity.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from identity.application.results import (
    INTERNAL_FAILURE_MESSAGE,
    OperationResult,
    UseCaseErrorKind,
    UserView,
)
from identity.ports.repositories import IUserRepository


class ListUsersHandler:
    """Read-only listing of users in the store's enumeration order."""

    def __init__(
        self,
        user_repository: IUserRepository,
        probe: UserServiceProbe | None = None,
    ):
        self._user_repository = user_repository
        self._probe = probe or DefaultUserServiceProbe()

    async def handle(self, query: ListUsersQuery) -> OperationResult[list[UserView]]:
        try:
            users = await self._user_repository.list_all()
        except Exception as e:
            self._probe.users_list_failed(error=str(e))
            return OperationResult.failure(
                UseCaseErrorKind.INTERNAL_FAILURE, INTERNAL_FAILURE_MESSAGE
            )

        views = [
            UserView.from_user(user)
            for user in users
            if user.is_active or not query.active_only
        ]

        self._probe.users_listed(count=len(views), active_only=query.active_only)
        return OperationResult.success(views)
