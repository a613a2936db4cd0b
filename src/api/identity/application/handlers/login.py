"""Login use case.

Verifies credentials, issues a bearer token and stamps the login time.
"""

from __future__ import annotations

from identity.application.commands import LoginCommand
from identity.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from identity.application.results import (
    INTERNAL_FAILURE_MESSAGE,
    INVALID_CREDENTIALS_MESSAGE,
    AuthData,
    OperationResult,
    UseCaseErrorKind,
    UserView,
)
from identity.domain.value_objects import Email
from identity.ports.repositories import IUserRepository
from identity.ports.services import IPasswordHasher, ITokenIssuer
from shared_kernel.result import Err


class LoginHandler:
    """Handles credential verification.

    Unknown emails and wrong passwords produce the same failure so callers
    cannot probe which emails are registered.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        probe: AuthenticationProbe | None = None,
    ):
        """Initialize LoginHandler with dependencies.

        Args:
            user_repository: Repository for user persistence
            password_hasher: Capability for verifying passwords
            token_issuer: Capability for issuing bearer tokens
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._probe = probe or DefaultAuthenticationProbe()

    async def handle(self, command: LoginCommand) -> OperationResult[AuthData]:
        """Authenticate a user.

        The token is issued before the login timestamp is persisted. Persisting
        the timestamp is best-effort: if it fails, the failure is recorded and
        the login still succeeds with the issued token.

        Args:
            command: The login command

        Returns:
            Success with token and public user view, or a failure carrying
            INVALID_CREDENTIALS or INTERNAL_FAILURE
        """
        try:
            return await self._login(command)
        except Exception as e:
            self._probe.login_failed(error=str(e))
            return OperationResult.failure(
                UseCaseErrorKind.INTERNAL_FAILURE, INTERNAL_FAILURE_MESSAGE
            )

    async def _login(self, command: LoginCommand) -> OperationResult[AuthData]:
        email_result = Email.create(command.email)
        if isinstance(email_result, Err) or not command.password:
            return self._invalid_credentials("malformed_input")

        user = await self._user_repository.get_by_email(email_result.value)
        if user is None:
            return self._invalid_credentials("unknown_email")

        if not self._password_hasher.verify(command.password, user.password.value):
            return self._invalid_credentials("wrong_password")

        token = self._token_issuer.issue(user.id, user.email)

        user.record_login()
        try:
            await self._user_repository.update(user)
        except Exception as e:
            self._probe.login_stamp_failed(user_id=user.id.value, error=str(e))

        self._probe.user_logged_in(user_id=user.id.value)
        return OperationResult.success(
            AuthData(token=token, user=UserView.from_user(user))
        )

    def _invalid_credentials(self, reason: str) -> OperationResult[AuthData]:
        self._probe.login_rejected(reason=reason)
        return OperationResult.failure(
            UseCaseErrorKind.INVALID_CREDENTIALS, INVALID_CREDENTIALS_MESSAGE
        )
