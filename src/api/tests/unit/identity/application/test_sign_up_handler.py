"""Unit tests for SignUpHandler."""

from unittest.mock import AsyncMock, create_autospec

import pytest

from identity.application.commands import SignUpCommand
from identity.application.handlers import SignUpHandler
from identity.application.observability import AuthenticationProbe
from identity.application.results import UseCaseErrorKind
from identity.ports.exceptions import DuplicateEmailError

VALID_PASSWORD = "SecurePassword123!"


@pytest.fixture
def mock_probe():
    """Create mock authentication probe."""
    return create_autospec(AuthenticationProbe, instance=True)


@pytest.fixture
def handler(mock_user_repository, mock_password_hasher, mock_token_issuer, mock_probe):
    """Create SignUpHandler with mock dependencies."""
    return SignUpHandler(
        user_repository=mock_user_repository,
        password_hasher=mock_password_hasher,
        token_issuer=mock_token_issuer,
        probe=mock_probe,
    )


def _command(**overrides) -> SignUpCommand:
    fields = {
        "email": "test@example.com",
        "password": VALID_PASSWORD,
        "first_name": "João",
        "last_name": "Silva",
    }
    fields.update(overrides)
    return SignUpCommand(**fields)


class TestSignUpHandlerInit:
    """Tests for SignUpHandler initialization."""

    def test_uses_default_probe_when_not_provided(
        self, mock_user_repository, mock_password_hasher, mock_token_issuer
    ):
        """Handler should create default probe when not provided."""
        handler = SignUpHandler(
            user_repository=mock_user_repository,
            password_hasher=mock_password_hasher,
            token_issuer=mock_token_issuer,
        )
        assert handler._probe is not None


class TestSignUpSuccess:
    """Tests for successful registration."""

    @pytest.mark.asyncio
    async def test_returns_token_and_user_view(
        self, handler, mock_user_repository, mock_token_issuer, mock_probe
    ):
        """Should persist the user and return token plus public view."""
        result = await handler.handle(_command(email="  Test@Example.com "))

        assert result.is_success
        assert result.errors == []
        assert result.data.token == "signed.jwt.token"
        assert result.data.user.email == "test@example.com"
        assert result.data.user.first_name == "João"
        assert result.data.user.last_name == "Silva"
        assert result.data.user.is_active is True

        mock_user_repository.add.assert_called_once()
        saved_user = mock_user_repository.add.call_args[0][0]
        mock_token_issuer.issue.assert_called_once_with(saved_user.id, saved_user.email)
        mock_probe.user_signed_up.assert_called_once_with(
            user_id=saved_user.id.value, email="test@example.com"
        )

    @pytest.mark.asyncio
    async def test_stores_hash_not_plaintext(
        self, handler, mock_user_repository, mock_password_hasher
    ):
        """The persisted aggregate holds the hasher's output."""
        await handler.handle(_command())

        mock_password_hasher.hash.assert_called_once_with(VALID_PASSWORD)
        saved_user = mock_user_repository.add.call_args[0][0]
        assert saved_user.password.value == mock_password_hasher.hash.return_value
        assert saved_user.password.is_hashed is True

    @pytest.mark.asyncio
    async def test_looks_up_normalized_email(self, handler, mock_user_repository):
        """The duplicate pre-check uses the normalized email."""
        await handler.handle(_command(email="TEST@EXAMPLE.COM"))

        looked_up = mock_user_repository.get_by_email.call_args[0][0]
        assert looked_up.value == "test@example.com"


class TestSignUpConflicts:
    """Tests for email conflicts."""

    @pytest.mark.asyncio
    async def test_existing_email_fails_without_hashing(
        self, handler, mock_user_repository, mock_password_hasher, make_user
    ):
        """A pre-check hit fails with EMAIL_IN_USE and computes no hash."""
        mock_user_repository.get_by_email = AsyncMock(return_value=make_user())

        result = await handler.handle(_command())

        assert not result.is_success
        assert result.error_kind == UseCaseErrorKind.EMAIL_IN_USE
        assert result.errors == ["Email já está em uso"]
        mock_password_hasher.hash.assert_not_called()
        mock_user_repository.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_store_constraint_maps_to_email_in_use(
        self, handler, mock_user_repository, mock_token_issuer
    ):
        """Losing the race at the unique index is still EMAIL_IN_USE."""
        mock_user_repository.add = AsyncMock(
            side_effect=DuplicateEmailError("test@example.com")
        )

        result = await handler.handle(_command())

        assert not result.is_success
        assert result.error_kind == UseCaseErrorKind.EMAIL_IN_USE
        assert result.errors == ["Email já está em uso"]
        mock_token_issuer.issue.assert_not_called()


class TestSignUpValidation:
    """Tests for input validation."""

    @pytest.mark.asyncio
    async def test_weak_password_fails_before_hashing(
        self, handler, mock_user_repository, mock_password_hasher
    ):
        """Weak passwords are rejected before any store or hasher call."""
        result = await handler.handle(_command(password="weak"))

        assert not result.is_success
        assert result.error_kind == UseCaseErrorKind.VALIDATION
        assert result.errors == ["Senha deve ter pelo menos 8 caracteres"]
        mock_password_hasher.hash.assert_not_called()
        mock_user_repository.get_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_reports_every_invalid_field(self, handler):
        """All invalid fields are reported in order."""
        result = await handler.handle(
            _command(email="bad", password="", first_name="", last_name="")
        )

        assert result.error_kind == UseCaseErrorKind.VALIDATION
        assert result.errors == [
            "Formato de email inválido",
            "Senha não pode ser vazia",
            "Nome não pode ser vazio",
            "Sobrenome não pode ser vazio",
        ]

    @pytest.mark.asyncio
    async def test_invalid_name_pattern(self, handler):
        """Names with digits are rejected."""
        result = await handler.handle(_command(last_name="Silva2"))

        assert result.errors == ["Sobrenome deve conter apenas letras e espaços"]

    @pytest.mark.asyncio
    async def test_overlong_email_fails_before_store(
        self, handler, mock_user_repository, mock_password_hasher
    ):
        """Emails too long for the users table are a validation failure."""
        result = await handler.handle(_command(email="a" * 95 + "@example.com"))

        assert result.error_kind == UseCaseErrorKind.VALIDATION
        assert result.errors == ["Email deve ter no máximo 100 caracteres"]
        mock_password_hasher.hash.assert_not_called()
        mock_user_repository.add.assert_not_called()


class TestSignUpUnexpectedFailures:
    """Tests for capability faults."""

    @pytest.mark.asyncio
    async def test_hasher_fault_maps_to_internal_failure(
        self, handler, mock_password_hasher, mock_probe
    ):
        """Unexpected exceptions never leak to the caller."""
        mock_password_hasher.hash.side_effect = RuntimeError("bcrypt exploded")

        result = await handler.handle(_command())

        assert not result.is_success
        assert result.error_kind == UseCaseErrorKind.INTERNAL_FAILURE
        assert result.errors == ["Erro interno do servidor"]
        mock_probe.sign_up_failed.assert_called_once()

    @pytest.mark.asyncio
    async def test_store_fault_maps_to_internal_failure(
        self, handler, mock_user_repository
    ):
        """Store faults other than duplicates are internal failures."""
        mock_user_repository.add = AsyncMock(side_effect=ConnectionError("db down"))

        result = await handler.handle(_command())

        assert result.error_kind == UseCaseErrorKind.INTERNAL_FAILURE
        assert "db down" not in result.errors[0]
