"""Unit tests for User aggregate."""

from datetime import UTC, datetime, timedelta

import pytest

from identity.domain.aggregates import User
from identity.domain.aggregates import user as user_module
from identity.domain.errors import ErrorKind
from shared_kernel.result import Err, Ok

HASH = "$2b$12$somehash"


@pytest.fixture
def ticking_clock(monkeypatch):
    """Replace the aggregate clock with one that advances a second per call."""
    start = datetime(2024, 1, 1, tzinfo=UTC)
    ticks = iter(range(1_000))

    def _now():
        return start + timedelta(seconds=next(ticks))

    monkeypatch.setattr(user_module, "_utc_now", _now)
    return start


def _create(**overrides) -> User:
    kwargs = {
        "email": "joao@example.com",
        "hashed_password": HASH,
        "first_name": "João",
        "last_name": "Silva",
    }
    kwargs.update(overrides)
    result = User.create(**kwargs)
    assert isinstance(result, Ok), result
    return result.value


class TestUserCreation:
    """Tests for User.create factory."""

    def test_creates_with_defaults(self):
        """New users are active with no update or login stamps."""
        user = _create()

        assert user.email.value == "joao@example.com"
        assert user.password.value == HASH
        assert user.password.is_hashed is True
        assert user.first_name == "João"
        assert user.last_name == "Silva"
        assert user.is_active is True
        assert user.updated_at is None
        assert user.last_login_at is None
        assert user.created_at.tzinfo is not None

    def test_generates_unique_ids(self):
        """Each created user gets a fresh id."""
        assert _create().id != _create().id

    def test_normalizes_email_and_trims_names(self):
        """Email is normalized and names are trimmed."""
        user = _create(
            email="  JOAO@Example.COM ",
            first_name="  João Pedro ",
            last_name=" Silva ",
        )

        assert user.email.value == "joao@example.com"
        assert user.first_name == "João Pedro"
        assert user.last_name == "Silva"

    def test_rejects_invalid_email(self):
        """Invalid emails are reported by the Email value object."""
        result = User.create("not-an-email", HASH, "João", "Silva")

        assert isinstance(result, Err)
        assert [e.kind for e in result.error] == [ErrorKind.INVALID_FORMAT]

    def test_rejects_empty_hash(self):
        """The stored password must be a non-empty hash."""
        result = User.create("joao@example.com", "", "João", "Silva")

        assert isinstance(result, Err)
        assert [e.kind for e in result.error] == [ErrorKind.EMPTY_HASH]

    @pytest.mark.parametrize(
        "first_name,message",
        [
            ("", "Nome não pode ser vazio"),
            ("   ", "Nome não pode ser vazio"),
            ("A" * 51, "Nome deve ter no máximo 50 caracteres"),
            ("João3", "Nome deve conter apenas letras e espaços"),
            ("Ana-Maria", "Nome deve conter apenas letras e espaços"),
        ],
    )
    def test_rejects_invalid_first_name(self, first_name, message):
        """First name rules are enforced with field context."""
        result = User.create("joao@example.com", HASH, first_name, "Silva")

        assert isinstance(result, Err)
        assert len(result.error) == 1
        assert result.error[0].message == message
        assert result.error[0].field == "first_name"
        assert result.error[0].kind == ErrorKind.VALIDATION

    def test_accepts_fifty_character_name(self):
        """The length limit is inclusive."""
        user = _create(first_name="A" * 50)
        assert len(user.first_name) == 50

    def test_reports_all_violations(self):
        """Every violated rule is returned in field order."""
        result = User.create("bad", "", "", "")

        assert isinstance(result, Err)
        assert [e.field for e in result.error] == [
            "email",
            "password",
            "first_name",
            "last_name",
        ]


class TestUpdateProfile:
    """Tests for User.update_profile."""

    def test_updates_names_and_stamps(self, ticking_clock):
        """Names are replaced and updated_at is later than created_at."""
        user = _create()

        result = user.update_profile("João Pedro", "Silva Santos")

        assert isinstance(result, Ok)
        assert user.first_name == "João Pedro"
        assert user.last_name == "Silva Santos"
        assert user.updated_at is not None
        assert user.updated_at > user.created_at

    def test_trims_names(self):
        """Names are stored trimmed."""
        user = _create()

        user.update_profile("  Maria  ", " Souza ")

        assert user.first_name == "Maria"
        assert user.last_name == "Souza"

    def test_empty_first_name_leaves_user_untouched(self):
        """A rejected update applies neither name."""
        user = _create()

        result = user.update_profile("", "Santos")

        assert isinstance(result, Err)
        assert [e.message for e in result.error] == ["Nome não pode ser vazio"]
        assert user.first_name == "João"
        assert user.last_name == "Silva"
        assert user.updated_at is None

    def test_invalid_last_name_leaves_first_name_untouched(self):
        """Validation covers both names before applying either."""
        user = _create()

        result = user.update_profile("Maria", "   ")

        assert isinstance(result, Err)
        assert [e.message for e in result.error] == ["Sobrenome não pode ser vazio"]
        assert user.first_name == "João"


class TestStateTransitions:
    """Tests for login, activation and password changes."""

    def test_record_login_sets_both_stamps(self):
        """Login stamps last_login_at and updated_at with the same instant."""
        user = _create()

        user.record_login()

        assert user.last_login_at is not None
        assert user.updated_at == user.last_login_at

    def test_deactivate_and_activate(self):
        """Activation flag toggles and updated_at is stamped."""
        user = _create()

        user.deactivate()
        assert user.is_active is False
        assert user.updated_at is not None

        user.activate()
        assert user.is_active is True

    def test_activate_is_idempotent(self):
        """Activating an active user changes nothing."""
        user = _create()

        user.activate()

        assert user.is_active is True
        assert user.updated_at is None

    def test_deactivate_is_idempotent(self, ticking_clock):
        """Deactivating twice keeps the first stamp."""
        user = _create()
        user.deactivate()
        first_stamp = user.updated_at

        user.deactivate()

        assert user.is_active is False
        assert user.updated_at == first_stamp

    def test_change_password_replaces_hash(self):
        """A new hash replaces the old one."""
        user = _create()

        result = user.change_password("$2b$12$newhash")

        assert isinstance(result, Ok)
        assert user.password.value == "$2b$12$newhash"
        assert user.updated_at is not None

    def test_change_password_rejects_empty_hash(self):
        """An empty hash is rejected and the old one kept."""
        user = _create()

        result = user.change_password("")

        assert isinstance(result, Err)
        assert result.error.kind == ErrorKind.EMPTY_HASH
        assert user.password.value == HASH


class TestUserIdentity:
    """Tests for identity-based equality and representation."""

    def test_equal_when_same_id(self):
        """Users with the same id are equal regardless of state."""
        user = _create()
        other = _create()
        other.id = user.id

        assert user == other
        assert hash(user) == hash(other)

    def test_full_name(self):
        """Full name joins first and last name."""
        assert _create().full_name == "João Silva"

    def test_str_does_not_expose_password(self):
        """String forms never include the hash."""
        user = _create()

        assert HASH not in str(user)
        assert HASH not in repr(user)
