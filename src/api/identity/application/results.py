"""Outbound result types for identity use cases.

Every handler returns an ``OperationResult``: either a data payload or an
ordered list of human-readable error messages. Callers never need to catch
exceptions from a handler.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum
from typing import Generic, TypeVar

from identity.domain.aggregates import User

T = TypeVar("T")

INVALID_CREDENTIALS_MESSAGE = "Credenciais inválidas"
EMAIL_IN_USE_MESSAGE = "Email já está em uso"
USER_NOT_FOUND_MESSAGE = "Usuário não encontrado"
INTERNAL_FAILURE_MESSAGE = "Erro interno do servidor"


class UseCaseErrorKind(StrEnum):
    """Failure categories surfaced to callers."""

    VALIDATION = "validation"
    INVALID_CREDENTIALS = "invalid_credentials"
    EMAIL_IN_USE = "email_in_use"
    USER_NOT_FOUND = "user_not_found"
    INTERNAL_FAILURE = "internal_failure"


@dataclass(frozen=True)
class UserView:
    """Public view of a user. Never includes the password hash."""

    id: str
    email: str
    first_name: str
    last_name: str
    is_active: bool
    created_at: datetime
    updated_at: datetime | None = None
    last_login_at: datetime | None = None

    @classmethod
    def from_user(cls, user: User) -> UserView:
        return cls(
            id=user.id.value,
            email=user.email.value,
            first_name=user.first_name,
            last_name=user.last_name,
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )


@dataclass(frozen=True)
class AuthData:
    """Payload of a successful sign-up or login."""

    token: str = field(repr=False)
    user: UserView


@dataclass(frozen=True)
class ProfileView:
    """Payload of a successful profile update."""

    id: str
    email: str
    first_name: str
    last_name: str
    is_active: bool
    updated_at: datetime


@dataclass(frozen=True)
class OperationResult(Generic[T]):
    """Discriminated success/failure outcome of a use case.

    Attributes:
        is_success: Whether the use case succeeded
        data: Payload when successful
        errors: Ordered error messages when failed
        error_kind: Failure category when failed
    """

    is_success: bool
    data: T | None = None
    errors: list[str] = field(default_factory=list)
    error_kind: UseCaseErrorKind | None = None

    @classmethod
    def success(cls, data: T) -> OperationResult[T]:
        return cls(is_success=True, data=data)

    @classmethod
    def failure(cls, kind: UseCaseErrorKind, *errors: str) -> OperationResult[T]:
        return cls(is_success=False, errors=list(errors), error_kind=kind)
