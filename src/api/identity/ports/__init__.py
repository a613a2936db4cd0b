"""Ports (interfaces) for identity bounded context.

Ports define the contracts for the user store and the credential
capabilities (password hashing, token issuance) without specifying
implementation details. This allows for dependency inversion and keeps the
domain and application layers independent of infrastructure.
"""

from identity.ports.exceptions import DuplicateEmailError
from identity.ports.repositories import IUserRepository
from identity.ports.services import IPasswordHasher, ITokenIssuer

__all__ = [
    "IUserRepository",
    "IPasswordHasher",
    "ITokenIssuer",
    "DuplicateEmailError",
]
