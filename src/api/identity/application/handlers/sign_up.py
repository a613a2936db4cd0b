"""Sign-up use case.

Registers a new account and issues a bearer token for it.
"""

from __future__ import annotations

from identity.application.commands import SignUpCommand
from identity.application.observability import (
    AuthenticationProbe,
    DefaultAuthenticationProbe,
)
from identity.application.results import (
    EMAIL_IN_USE_MESSAGE,
    INTERNAL_FAILURE_MESSAGE,
    AuthData,
    OperationResult,
    UseCaseErrorKind,
    UserView,
)
from identity.domain.aggregates import User
from identity.domain.aggregates.user import validate_name
from identity.domain.value_objects import Email, Password
from identity.ports.exceptions import DuplicateEmailError
from identity.ports.repositories import IUserRepository
from identity.ports.services import IPasswordHasher, ITokenIssuer
from shared_kernel.result import Err, Ok


class SignUpHandler:
    """Handles account registration.

    Flow: validate input, check the email is free, hash the password, build
    the User aggregate, persist it, issue a token. The pre-check is only an
    optimization; the store's unique email index decides concurrent races.
    """

    def __init__(
        self,
        user_repository: IUserRepository,
        password_hasher: IPasswordHasher,
        token_issuer: ITokenIssuer,
        probe: AuthenticationProbe | None = None,
    ):
        """Initialize SignUpHandler with dependencies.

        Args:
            user_repository: Repository for user persistence
            password_hasher: Capability for one-way password hashing
            token_issuer: Capability for issuing bearer tokens
            probe: Optional domain probe for observability
        """
        self._user_repository = user_repository
        self._password_hasher = password_hasher
        self._token_issuer = token_issuer
        self._probe = probe or DefaultAuthenticationProbe()

    async def handle(self, command: SignUpCommand) -> OperationResult[AuthData]:
        """Register a new user.

        Args:
            command: The sign-up command

        Returns:
            Success with token and public user view, or a failure carrying
            VALIDATION, EMAIL_IN_USE or INTERNAL_FAILURE
        """
        try:
            return await self._sign_up(command)
        except Exception as e:
            self._probe.sign_up_failed(email=command.email, error=str(e))
            return OperationResult.failure(
                UseCaseErrorKind.INTERNAL_FAILURE, INTERNAL_FAILURE_MESSAGE
            )

    async def _sign_up(self, command: SignUpCommand) -> OperationResult[AuthData]:
        email_result = Email.create(command.email)
        password_result = Password.from_plaintext(command.password)
        input_results = (
            email_result,
            password_result,
            validate_name(command.first_name, "first_name"),
            validate_name(command.last_name, "last_name"),
        )
        errors = [r.error.message for r in input_results if isinstance(r, Err)]
        if errors:
            self._probe.sign_up_rejected(email=command.email, reason="validation")
            return OperationResult.failure(UseCaseErrorKind.VALIDATION, *errors)

        assert isinstance(email_result, Ok) and isinstance(password_result, Ok)
        email = email_result.value

        existing = await self._user_repository.get_by_email(email)
        if existing is not None:
            return self._email_in_use(email)

        hashed = self._password_hasher.hash(password_result.value.value)

        user_result = User.create(
            email=email.value,
            hashed_password=hashed,
            first_name=command.first_name,
            last_name=command.last_name,
        )
        if isinstance(user_result, Err):
            self._probe.sign_up_rejected(email=email.value, reason="validation")
            return OperationResult.failure(
                UseCaseErrorKind.VALIDATION, *(e.message for e in user_result.error)
            )

        try:
            saved = await self._user_repository.add(user_result.value)
        except DuplicateEmailError:
            # Lost a race with a concurrent sign-up for the same email
            return self._email_in_use(email)

        token = self._token_issuer.issue(saved.id, saved.email)

        self._probe.user_signed_up(user_id=saved.id.value, email=saved.email.value)
        return OperationResult.success(
            AuthData(token=token, user=UserView.from_user(saved))
        )

    def _email_in_use(self, email: Email) -> OperationResult[AuthData]:
        self._probe.sign_up_rejected(email=email.value, reason="email_in_use")
        return OperationResult.failure(
            UseCaseErrorKind.EMAIL_IN_USE, EMAIL_IN_USE_MESSAGE
        )
