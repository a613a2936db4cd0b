"""User aggregate for identity context."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from identity.domain.errors import DomainError, ErrorKind
from identity.domain.value_objects import Email, Password, UserId
from shared_kernel.result import Err, Ok, Result

NAME_MAX_LENGTH = 50
NAME_PATTERN = re.compile(r"[a-zA-ZÀ-ÿ\s]+")

FIRST_NAME_EMPTY_MESSAGE = "Nome não pode ser vazio"
FIRST_NAME_LENGTH_MESSAGE = "Nome deve ter no máximo 50 caracteres"
FIRST_NAME_PATTERN_MESSAGE = "Nome deve conter apenas letras e espaços"
LAST_NAME_EMPTY_MESSAGE = "Sobrenome não pode ser vazio"
LAST_NAME_LENGTH_MESSAGE = "Sobrenome deve ter no máximo 50 caracteres"
LAST_NAME_PATTERN_MESSAGE = "Sobrenome deve conter apenas letras e espaços"

_NAME_MESSAGES = {
    "first_name": (
        FIRST_NAME_EMPTY_MESSAGE,
        FIRST_NAME_LENGTH_MESSAGE,
        FIRST_NAME_PATTERN_MESSAGE,
    ),
    "last_name": (
        LAST_NAME_EMPTY_MESSAGE,
        LAST_NAME_LENGTH_MESSAGE,
        LAST_NAME_PATTERN_MESSAGE,
    ),
}


def _utc_now() -> datetime:
    return datetime.now(UTC)


def validate_name(value: str | None, field: str) -> Result[str, DomainError]:
    """Validate and trim a first or last name.

    Args:
        value: Raw name
        field: Either ``first_name`` or ``last_name``

    Returns:
        Ok with the trimmed name, or Err describing the first failed rule
    """
    empty_message, length_message, pattern_message = _NAME_MESSAGES[field]

    if value is None or not value.strip():
        return Err(DomainError(ErrorKind.VALIDATION, empty_message, field))

    trimmed = value.strip()
    if len(trimmed) > NAME_MAX_LENGTH:
        return Err(DomainError(ErrorKind.VALIDATION, length_message, field))

    if NAME_PATTERN.fullmatch(trimmed) is None:
        return Err(DomainError(ErrorKind.VALIDATION, pattern_message, field))

    return Ok(trimmed)


def _validate_names(
    first_name: str | None, last_name: str | None
) -> Result[tuple[str, str], list[DomainError]]:
    first = validate_name(first_name, "first_name")
    last = validate_name(last_name, "last_name")

    errors = [r.error for r in (first, last) if isinstance(r, Err)]
    if errors:
        return Err(errors)

    assert isinstance(first, Ok) and isinstance(last, Ok)
    return Ok((first.value, last.value))


@dataclass
class User:
    """User aggregate representing a registered account.

    Business rules:
    - The id and created_at are set once at creation and never change
    - The stored password is always the hashed variant
    - Names are trimmed, non-empty, at most 50 characters of letters and spaces
    - Every mutation stamps updated_at

    Email uniqueness across users is enforced by the user store, not here;
    the aggregate cannot see other users.
    """

    id: UserId
    email: Email
    password: Password
    first_name: str
    last_name: str
    created_at: datetime
    updated_at: datetime | None = None
    is_active: bool = True
    last_login_at: datetime | None = None

    @classmethod
    def create(
        cls,
        email: str,
        hashed_password: str,
        first_name: str,
        last_name: str,
    ) -> Result[User, list[DomainError]]:
        """Factory method for registering a new user.

        Email and password validation is delegated to their value objects.
        The password must already be hashed; the plaintext policy is checked
        by the caller before hashing.

        Args:
            email: Raw email address
            hashed_password: Hash produced by the password hasher
            first_name: Given name
            last_name: Family name

        Returns:
            Ok with the new User, or Err with every violated rule
        """
        errors: list[DomainError] = []

        email_result = Email.create(email)
        if isinstance(email_result, Err):
            errors.append(email_result.error)

        password_result = Password.from_hash(hashed_password)
        if isinstance(password_result, Err):
            errors.append(password_result.error)

        names_result = _validate_names(first_name, last_name)
        if isinstance(names_result, Err):
            errors.extend(names_result.error)

        if errors:
            return Err(errors)

        assert isinstance(email_result, Ok)
        assert isinstance(password_result, Ok)
        assert isinstance(names_result, Ok)
        first, last = names_result.value

        return Ok(
            cls(
                id=UserId.generate(),
                email=email_result.value,
                password=password_result.value,
                first_name=first,
                last_name=last,
                created_at=_utc_now(),
            )
        )

    @property
    def full_name(self) -> str:
        """Return first and last name joined by a space."""
        return f"{self.first_name} {self.last_name}".strip()

    def update_profile(
        self, first_name: str | None, last_name: str | None
    ) -> Result[None, list[DomainError]]:
        """Replace both name fields.

        Both names are validated before either is applied, so a failure
        leaves the aggregate untouched.
        """
        names_result = _validate_names(first_name, last_name)
        if isinstance(names_result, Err):
            return names_result

        self.first_name, self.last_name = names_result.value
        self.updated_at = _utc_now()
        return Ok(None)

    def change_password(self, hashed_password: str) -> Result[None, DomainError]:
        """Replace the stored password with a new hash."""
        password_result = Password.from_hash(hashed_password)
        if isinstance(password_result, Err):
            return password_result

        self.password = password_result.value
        self.updated_at = _utc_now()
        return Ok(None)

    def record_login(self) -> None:
        """Stamp a successful login.

        Only in-memory state changes; persisting is the caller's job.
        """
        now = _utc_now()
        self.last_login_at = now
        self.updated_at = now

    def activate(self) -> None:
        """Mark the user as active. No-op if already active."""
        if self.is_active:
            return
        self.is_active = True
        self.updated_at = _utc_now()

    def deactivate(self) -> None:
        """Mark the user as inactive. No-op if already inactive."""
        if not self.is_active:
            return
        self.is_active = False
        self.updated_at = _utc_now()

    def __str__(self) -> str:
        """Return string representation."""
        return f"User({self.email})"

    def __eq__(self, other: object) -> bool:
        """Users are equal if they have the same ID (identity-based equality)."""
        if not isinstance(other, User):
            return False
        return self.id == other.id

    def __hash__(self) -> int:
        """Hash based on ID for use in sets and dicts."""
        return hash(self.id)
