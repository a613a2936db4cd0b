"""Protocol for authentication observability.

Defines the interface for domain probes that capture registration and
login events. Probes never receive passwords, hashes or tokens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from infrastructure.observability.context import ObservationContext


class AuthenticationProbe(Protocol):
    """Domain probe for sign-up and login operations."""

    def user_signed_up(self, user_id: str, email: str) -> None:
        """Record that a new account was registered."""
        ...

    def sign_up_rejected(self, email: str, reason: str) -> None:
        """Record that a registration was refused (validation or conflict)."""
        ...

    def sign_up_failed(self, email: str, error: str) -> None:
        """Record that a registration failed unexpectedly."""
        ...

    def user_logged_in(self, user_id: str) -> None:
        """Record a successful login."""
        ...

    def login_rejected(self, reason: str) -> None:
        """Record a refused login.

        Args:
            reason: Failure reason (unknown_email, wrong_password, malformed_input)
        """
        ...

    def login_stamp_failed(self, user_id: str, error: str) -> None:
        """Record that persisting the last-login timestamp failed."""
        ...

    def login_failed(self, error: str) -> None:
        """Record that a login failed unexpectedly."""
        ...

    def with_context(self, context: ObservationContext) -> AuthenticationProbe:
        """Return a copy of this probe bound to a request context."""
        ...


class DefaultAuthenticationProbe:
    """Default implementation of AuthenticationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAuthenticationProbe:
        """Return a copy of this probe bound to a request context."""
        return DefaultAuthenticationProbe(logger=self._logger, context=context)

    def user_signed_up(self, user_id: str, email: str) -> None:
        """Record that a new account was registered."""
        self._logger.info(
            "user_signed_up",
            user_id=user_id,
            email=email,
            **self._get_context_kwargs(),
        )

    def sign_up_rejected(self, email: str, reason: str) -> None:
        """Record that a registration was refused."""
        self._logger.warning(
            "sign_up_rejected",
            email=email,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def sign_up_failed(self, email: str, error: str) -> None:
        """Record that a registration failed unexpectedly."""
        self._logger.error(
            "sign_up_failed",
            email=email,
            error=error,
            **self._get_context_kwargs(),
        )

    def user_logged_in(self, user_id: str) -> None:
        """Record a successful login."""
        self._logger.info(
            "user_logged_in",
            user_id=user_id,
            **self._get_context_kwargs(),
        )

    def login_rejected(self, reason: str) -> None:
        """Record a refused login."""
        self._logger.warning(
            "login_rejected",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def login_stamp_failed(self, user_id: str, error: str) -> None:
        """Record that persisting the last-login timestamp failed."""
        self._logger.error(
            "login_stamp_failed",
            user_id=user_id,
            error=error,
            **self._get_context_kwargs(),
        )

    def login_failed(self, error: str) -> None:
        """Record that a login failed unexpectedly."""
        self._logger.error(
            "login_failed",
            error=error,
            **self._get_context_kwargs(),
        )
