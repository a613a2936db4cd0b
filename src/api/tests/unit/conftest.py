"""Unit test fixtures with mocked dependencies."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from identity.domain.aggregates import User
from identity.ports.repositories import IUserRepository
from identity.ports.services import IPasswordHasher, ITokenIssuer
from shared_kernel.result import Ok

VALID_PASSWORD = "SecurePassword123!"
FAKE_HASH = "$2b$12$fakehashfakehashfakehashfakehashfakehashfakehashfake"


@pytest.fixture
def make_user():
    """Build a valid User aggregate."""

    def _make_user(
        email: str = "joao@example.com",
        first_name: str = "João",
        last_name: str = "Silva",
        hashed_password: str = FAKE_HASH,
    ) -> User:
        result = User.create(
            email=email,
            hashed_password=hashed_password,
            first_name=first_name,
            last_name=last_name,
        )
        assert isinstance(result, Ok)
        return result.value

    return _make_user


@pytest.fixture
def mock_user_repository():
    """Create mock user repository."""
    repository = create_autospec(IUserRepository, instance=True)
    repository.get_by_email = AsyncMock(return_value=None)
    repository.get_by_id = AsyncMock(return_value=None)
    repository.list_all = AsyncMock(return_value=[])
    repository.add = AsyncMock(side_effect=lambda user: user)
    repository.update = AsyncMock(side_effect=lambda user: user)
    return repository


@pytest.fixture
def mock_password_hasher():
    """Create mock password hasher."""
    hasher = create_autospec(IPasswordHasher, instance=True)
    hasher.hash.return_value = FAKE_HASH
    hasher.verify.return_value = True
    return hasher


@pytest.fixture
def mock_token_issuer():
    """Create mock token issuer."""
    issuer = create_autospec(ITokenIssuer, instance=True)
    issuer.issue.return_value = "signed.jwt.token"
    return issuer
