from sqlalchemy.exc import OperationalError

from accounts.models import User
from accounts.repositories import SaveErrorKind, UserRepository


def test_get_by_user_name(test_session, make_user):
    user = make_user(user_name="alice")
    repo = UserRepository(test_session)

    assert repo.get_by_user_name("alice").id == user.id
    assert repo.get_by_user_name("bob") is None


def test_save_persists_changes(test_session, make_user):
    user = make_user()
    repo = UserRepository(test_session)

    user.first_name = "Paul"
    result = repo.save(user)

    assert result.ok
    assert result.user is user
    assert repo.get_by_id(user.id).first_name == "Paul"


def test_save_duplicate_user_name_is_conflict(test_session, make_user):
    make_user(user_name="alice")
    other = make_user(user_name="bob")
    repo = UserRepository(test_session)

    other.user_name = "alice"
    result = repo.save(other)

    assert result.kind is SaveErrorKind.CONFLICT
    assert result.errors[0].field == "userName"
    assert result.detail()["kind"] == "conflict"
    assert repo.get_by_id(other.id).user_name == "bob"


def test_save_blank_name_is_validation(test_session, make_user):
    user = make_user()
    repo = UserRepository(test_session)

    user.first_name = ""
    user.last_name = None
    result = repo.save(user)

    assert result.kind is SaveErrorKind.VALIDATION
    assert [e.field for e in result.errors] == ["firstName", "lastName"]
    assert repo.get_by_id(user.id).first_name == "Jean"


def test_save_too_long_name_is_validation(test_session, make_user):
    user = make_user()
    repo = UserRepository(test_session)

    user.user_name = "u" * 256
    result = repo.save(user)

    assert result.kind is SaveErrorKind.VALIDATION
    assert result.errors[0].field == "userName"


def test_save_missing_column_is_validation(test_session):
    repo = UserRepository(test_session)
    user = User(first_name="Jean", last_name="Dupont", user_name="jdupont", password=None)

    result = repo.save(user)

    assert result.kind is SaveErrorKind.VALIDATION
    assert result.errors[0].field == "passwordHash"


def test_save_database_failure_is_unexpected(test_session, make_user, monkeypatch):
    user = make_user()
    repo = UserRepository(test_session)

    def broken_flush(*args, **kwargs):
        raise OperationalError("UPDATE users", {}, Exception("disk I/O error"))

    monkeypatch.setattr(test_session, "flush", broken_flush)
    user.first_name = "Paul"
    result = repo.save(user)

    assert result.kind is SaveErrorKind.UNEXPECTED
    assert result.detail() == {"kind": "unexpected"}
