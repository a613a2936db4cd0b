"""Inbound commands and queries for identity use cases.

Commands arrive already deserialized from the transport layer. Their
contents are untrusted; handlers validate them through the domain.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from identity.domain.value_objects import UserId


@dataclass(frozen=True)
class SignUpCommand:
    """Register a new account."""

    email: str
    password: str = field(repr=False)
    first_name: str
    last_name: str


@dataclass(frozen=True)
class LoginCommand:
    """Authenticate with email and plaintext password."""

    email: str
    password: str = field(repr=False)


@dataclass(frozen=True)
class UpdateProfileCommand:
    """Replace a user's first and last name."""

    user_id: UserId
    first_name: str
    last_name: str


@dataclass(frozen=True)
class ListUsersQuery:
    """List users, optionally only active ones."""

    active_only: bool = False
