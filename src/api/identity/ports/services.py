"""Capability protocols for credentials.

Password hashing and token issuance are consumed as capabilities; the
identity core never implements hashing or token cryptography itself.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from identity.domain.value_objects import Email, UserId


@runtime_checkable
class IPasswordHasher(Protocol):
    """One-way password hashing."""

    def hash(self, plaintext: str) -> str:
        """Hash a plaintext password.

        Args:
            plaintext: The password to hash

        Returns:
            An opaque hash string
        """
        ...

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Check a plaintext password against a stored hash.

        Args:
            plaintext: The candidate password
            hashed: The stored hash

        Returns:
            True if the password matches, False otherwise
        """
        ...


@runtime_checkable
class ITokenIssuer(Protocol):
    """Issues and validates opaque bearer credentials bound to a user id."""

    def issue(self, user_id: UserId, email: Email | None = None) -> str:
        """Issue a bearer token for a user.

        Args:
            user_id: The subject of the token
            email: Optional email claim

        Returns:
            The encoded token
        """
        ...

    def validate(self, token: str) -> bool:
        """Return True if the token is authentic and not expired."""
        ...

    def subject_of(self, token: str) -> UserId | None:
        """Return the user id the token is bound to, or None if invalid."""
        ...
