"""Composition of identity use-case handlers.

Capabilities are constructed from settings and passed explicitly to each
handler; there are no module-level singletons for the hasher or the token
issuer.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta

from identity.application.handlers import (
    ListUsersHandler,
    LoginHandler,
    SignUpHandler,
    UpdateProfileHandler,
)
from identity.application.observability import (
    DefaultAuthenticationProbe,
    DefaultUserServiceProbe,
)
from identity.application.security import BcryptPasswordHasher
from identity.infrastructure.token_issuer import JWTTokenIssuer
from identity.ports.repositories import IUserRepository
from identity.ports.services import IPasswordHasher, ITokenIssuer
from infrastructure.observability import ObservationContext
from infrastructure.settings import JWTSettings, SecuritySettings


@dataclass(frozen=True)
class IdentityHandlers:
    """The four identity use cases wired to one user store."""

    sign_up: SignUpHandler
    login: LoginHandler
    update_profile: UpdateProfileHandler
    list_users: ListUsersHandler


def build_password_hasher(settings: SecuritySettings) -> IPasswordHasher:
    """Create the bcrypt hasher from settings."""
    return BcryptPasswordHasher(rounds=settings.bcrypt_rounds)


def build_token_issuer(settings: JWTSettings) -> ITokenIssuer:
    """Create the JWT issuer from settings."""
    return JWTTokenIssuer(
        secret_key=settings.secret_key.get_secret_value(),
        issuer=settings.issuer,
        audience=settings.audience,
        expiration=timedelta(minutes=settings.expiration_minutes),
        algorithm=settings.algorithm,
    )


def build_handlers(
    user_repository: IUserRepository,
    password_hasher: IPasswordHasher,
    token_issuer: ITokenIssuer,
    context: ObservationContext | None = None,
) -> IdentityHandlers:
    """Wire the use-case handlers for one request scope.

    Args:
        user_repository: Store bound to the request's session
        password_hasher: Password hashing capability
        token_issuer: Bearer token capability
        context: Request metadata bound to every handler event

    Returns:
        The wired handlers
    """
    auth_probe = DefaultAuthenticationProbe()
    user_service_probe = DefaultUserServiceProbe()
    if context is not None:
        auth_probe = auth_probe.with_context(context)
        user_service_probe = user_service_probe.with_context(context)

    return IdentityHandlers(
        sign_up=SignUpHandler(
            user_repository=user_repository,
            password_hasher=password_hasher,
            token_issuer=token_issuer,
            probe=auth_probe,
        ),
        login=LoginHandler(
            user_repository=user_repository,
            password_hasher=password_hasher,
            token_issuer=token_issuer,
            probe=auth_probe,
        ),
        update_profile=UpdateProfileHandler(
            user_repository=user_repository, probe=user_service_probe
        ),
        list_users=ListUsersHandler(
            user_repository=user_repository, probe=user_service_probe
        ),
    )
