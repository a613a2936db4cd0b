"""Update-profile use case."""

from __future__ import annotations

from datetime import UTC, datetime

from identity.application.commands import UpdateProfileCommand
from identity.application.observability import (
    DefaultUserServiceProbe,
    UserServiceProbe,
)
from identity.application.results import (
    INTERNAL_FAILURE_MESSAGE,
    USER_NOT_FOUND_MESSAGE,
    OperationResult,
    ProfileView,
    UseCaseErrorKind,
)
from identity.ports.repositories import IUserRepository
from shared_kernel.result import Err


class UpdateProfileHandler:
    """Handles first/last name changes.

    Name validation runs once, inside the aggregate, and covers both names
    before either is applied. A rejected update never reaches the store.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        probe: UserServiceProbe | None = None,
    ):
        self._user_repository = user_repository
        self._probe = probe or DefaultUserServiceProbe()

    async def handle(
        self, command: UpdateProfileCommand
    ) -> OperationResult[ProfileView]:
        """Update a user's names.

        Args:
            command: The update-profile command

        Returns:
            Success with the updated profile, or a failure carrying
            USER_NOT_FOUND, VALIDATION or INTERNAL_FAILURE
        """
        try:
            return await self._update(command)
        except Exception as e:
            self._probe.profile_update_failed(
                user_id=command.user_id.value, error=str(e)
            )
            return OperationResult.failure(
                UseCaseErrorKind.INTERNAL_FAILURE, INTERNAL_FAILURE_MESSAGE
            )

    async def _update(
        self, command: UpdateProfileCommand
    ) -> OperationResult[ProfileView]:
        user = await self._user_repository.get_by_id(command.user_id)
        if user is None:
            self._probe.profile_update_rejected(
                user_id=command.user_id.value, reason="user_not_found"
            )
            return OperationResult.failure(
                UseCaseErrorKind.USER_NOT_FOUND, USER_NOT_FOUND_MESSAGE
            )

        update_result = user.update_profile(command.first_name, command.last_name)
        if isinstance(update_result, Err):
            self._probe.profile_update_rejected(
                user_id=user.id.value, reason="validation"
            )
            return OperationResult.failure(
                UseCaseErrorKind.VALIDATION, *(e.message for e in update_result.error)
            )

        updated = await self._user_repository.update(user)

        self._probe.profile_updated(user_id=updated.id.value)
        return OperationResult.success(
            ProfileView(
                id=updated.id.value,
                email=updated.email.value,
                first_name=updated.first_name,
                last_name=updated.last_name,
                is_active=updated.is_active,
                updated_at=updated.updated_at or datetime.now(UTC),
            )
        )
