"""Protocol for user profile observability.

Defines the interface for domain probes that capture application-level
events for profile updates and user listing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserServiceProbe(Protocol):
    """Domain probe for user profile operations."""

    def profile_updated(self, user_id: str) -> None:
        """Record that a user's profile was updated."""
        ...

    def profile_update_rejected(self, user_id: str, reason: str) -> None:
        """Record that a profile update was refused."""
        ...

    def profile_update_failed(self, user_id: str, error: str) -> None:
        """Record that a profile update failed unexpectedly."""
        ...

    def users_listed(self, count: int, active_only: bool) -> None:
        """Record that users were listed."""
        ...

    def users_list_failed(self, error: str) -> None:
        """Record that listing users failed unexpectedly."""
        ...

    def with_context(self, context: ObservationContext) -> UserServiceProbe:
        """Return a copy of this probe bound to a request context."""
        ...


class DefaultUserServiceProbe:
    """Default implementation of UserServiceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Return bound context fields as logging kwargs."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultUserServiceProbe:
        """Return a copy of this probe bound to a request context."""
        return DefaultUserServiceProbe(logger=self._logger, context=context)

    def profile_updated(self, user_id: str) -> None:
        """Record that a user's profile was updated."""
        self._logger.info(
            "profile_updated",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def profile_update_rejected(self, user_id: str, reason: str) -> None:
        """Record that a profile update was refused."""
        self._logger.warning(
            "profile_update_rejected",
            user_id=user_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def profile_update_failed(self, user_id: str, error: str) -> None:
        """Record that a profile update failed unexpectedly."""
        self._logger.error(
            "profile_update_failed",
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def users_listed(self, count: int, active_only: bool) -> None:
        """Record that users were listed."""
        self._logger.debug(
            "users_listed",
            count=count,
            active_only=active_only,
            **self._get_context_kwargs(),
        )

    def users_list_failed(self, error: str) -> None:
        """Record that listing users failed unexpectedly."""
        self._logger.error(
            "users_list_failed",
            error=error,
            **self._get_context_kwargs(),
        )
