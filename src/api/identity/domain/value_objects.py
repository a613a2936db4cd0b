"""Value objects for the identity domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers, email addresses and credentials.

Each value object offers two construction paths:

- a validating factory (``create`` / ``from_plaintext``) used on the write
  path, returning a ``Result`` so expected failures never raise;
- a trusted factory (``from_trusted`` / ``from_hash``) used when
  reconstituting values that were validated before they were stored.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from ulid import ULID

from identity.domain.errors import DomainError, ErrorKind
from shared_kernel.result import Err, Ok, Result

EMAIL_PATTERN = re.compile(
    r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}", re.IGNORECASE
)

EMAIL_MAX_LENGTH = 100

PASSWORD_MIN_LENGTH = 8
PASSWORD_SYMBOLS = "@$!%*?&"
PASSWORD_PATTERN = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}"
)

EMAIL_EMPTY_MESSAGE = "Email não pode ser vazio"
EMAIL_FORMAT_MESSAGE = "Formato de email inválido"
EMAIL_LENGTH_MESSAGE = "Email deve ter no máximo 100 caracteres"
PASSWORD_EMPTY_MESSAGE = "Senha não pode ser vazia"
PASSWORD_LENGTH_MESSAGE = "Senha deve ter pelo menos 8 caracteres"
PASSWORD_COMPOSITION_MESSAGE = (
    "Senha deve conter pelo menos uma letra maiúscula, uma minúscula, "
    "um número e um caractere especial"
)
HASH_EMPTY_MESSAGE = "Senha hasheada não pode ser vazia"


@dataclass(frozen=True)
class UserId:
    """Identifier for a User aggregate.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> UserId:
        """Generate a new UserId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> UserId:
        """Create UserId from string value.

        Args:
            value: ULID string

        Returns:
            UserId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid UserId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class Email:
    """A normalized (trimmed, lowercased) email address.

    Equality and hashing are case-insensitive so values reconstituted from
    storage compare equal to freshly validated ones.
    """

    value: str

    @classmethod
    def create(cls, raw: str | None) -> Result[Email, DomainError]:
        """Validate and normalize raw user input.

        Args:
            raw: Email address as typed by the user

        Returns:
            Ok with the normalized Email, or Err with an INVALID_FORMAT error
        """
        if raw is None or not raw.strip():
            return Err(
                DomainError(ErrorKind.INVALID_FORMAT, EMAIL_EMPTY_MESSAGE, "email")
            )

        candidate = raw.strip()
        if EMAIL_PATTERN.fullmatch(candidate) is None:
            return Err(
                DomainError(ErrorKind.INVALID_FORMAT, EMAIL_FORMAT_MESSAGE, "email")
            )

        if len(candidate) > EMAIL_MAX_LENGTH:
            return Err(
                DomainError(ErrorKind.INVALID_FORMAT, EMAIL_LENGTH_MESSAGE, "email")
            )

        return Ok(cls(value=candidate.lower()))

    @classmethod
    def from_trusted(cls, raw: str) -> Email:
        """Reconstitute an Email already normalized by the store.

        No validation is performed.
        """
        return cls(value=raw)

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Email):
            return False
        return self.value.lower() == other.value.lower()

    def __hash__(self) -> int:
        return hash(self.value.lower())


@dataclass(frozen=True)
class Password:
    """An opaque password value.

    Either a plaintext candidate that passed the complexity policy, or a
    hash produced by the password hasher. Equality is byte-exact on the
    opaque value; comparing plaintext against a hash is the hasher's job.
    """

    value: str = field(repr=False)
    is_hashed: bool = field(default=True, compare=False)

    @classmethod
    def from_plaintext(cls, raw: str | None) -> Result[Password, DomainError]:
        """Validate a plaintext candidate against the password policy.

        The length rule is reported separately from the composition rule.

        Args:
            raw: Plaintext password as typed by the user

        Returns:
            Ok with a plaintext Password, or Err with a WEAK_PASSWORD error
        """
        if raw is None or not raw.strip():
            return Err(
                DomainError(ErrorKind.WEAK_PASSWORD, PASSWORD_EMPTY_MESSAGE, "password")
            )

        if len(raw) < PASSWORD_MIN_LENGTH:
            return Err(
                DomainError(
                    ErrorKind.WEAK_PASSWORD, PASSWORD_LENGTH_MESSAGE, "password"
                )
            )

        if PASSWORD_PATTERN.fullmatch(raw) is None:
            return Err(
                DomainError(
                    ErrorKind.WEAK_PASSWORD, PASSWORD_COMPOSITION_MESSAGE, "password"
                )
            )

        return Ok(cls(value=raw, is_hashed=False))

    @classmethod
    def from_hash(cls, hashed: str | None) -> Result[Password, DomainError]:
        """Wrap a hash produced by the password hasher.

        Only emptiness is checked; the hash format belongs to the hasher.
        """
        if hashed is None or not hashed.strip():
            return Err(
                DomainError(ErrorKind.EMPTY_HASH, HASH_EMPTY_MESSAGE, "password")
            )

        return Ok(cls(value=hashed, is_hashed=True))

    def __str__(self) -> str:
        """Never expose the opaque value."""
        return "********"
