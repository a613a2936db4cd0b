"""Probe for user store reads and writes.

Shared by the PostgreSQL and in-memory stores so both emit the same events.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class UserRepositoryProbe(Protocol):
    """Events raised while loading and saving User aggregates."""

    def user_saved(self, user_id: str, email: str) -> None:
        """Record a committed insert or update."""
        ...

    def user_retrieved(self, user_id: str) -> None:
        """Record a successful lookup."""
        ...

    def user_not_found(self, user_id: str) -> None:
        """Record that a user was not found by id."""
        ...

    def email_not_found(self, email: str) -> None:
        """Record that no user is registered with an email."""
        ...

    def duplicate_email(self, email: str) -> None:
        """Record that the unique email constraint rejected a user."""
        ...

    def with_context(self, context: ObservationContext) -> UserRepositoryProbe:
        """Return a copy of this probe bound to a request context."""
        ...


class DefaultUserRepositoryProbe:
    """UserRepositoryProbe that writes structlog events."""

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

    def with_context(self, context: ObservationContext) -> DefaultUserRepositoryProbe:
        """Return a copy of this probe bound to a request context."""
        return DefaultUserRepositoryProbe(logger=self._logger, context=context)

    def user_saved(self, user_id: str, email: str) -> None:
        """Record a committed insert or update."""
        self._logger.info(
            "user_saved",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def user_retrieved(self, user_id: str) -> None:
        """Record a successful lookup."""
        self._logger.debug(
            "user_retrieved",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def user_not_found(self, user_id: str) -> None:
        """Record that a user was not found by id."""
        self._logger.debug(
            "user_not_found",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def email_not_found(self, email: str) -> None:
        """Record that no user is registered with an email."""
        self._logger.debug(
            "email_not_found",
            email=email,
            **self._get_context_kwargs(),
        )

    def duplicate_email(self, email: str) -> None:
        """Record that the unique email constraint rejected a user."""
        self._logger.warning(
            "duplicate_email",
            email=email,
            **self._get_context_kwargs(),
        )
