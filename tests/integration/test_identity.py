import pytest

from linksaver.adapters.auth.crypto import Argon2PasswordHasher
from linksaver.adapters.auth.identity import SQLiteIdentityProvider
from linksaver.ports.identity import IdentityProviderError


def error_code(excinfo) -> str:
    return excinfo.value.code


def test_create_user_signs_in(identity):
    user = identity.create_user(" A@X.com ", "secret1")

    assert user.email == "a@x.com"
    assert identity.current_user() == user


def test_duplicate_email(identity):
    identity.create_user("a@x.com", "secret1")
    with pytest.raises(IdentityProviderError) as excinfo:
        identity.create_user("A@x.com", "another1")
    assert error_code(excinfo) == "email-already-in-use"


def test_invalid_email(identity):
    with pytest.raises(IdentityProviderError) as excinfo:
        identity.create_user("not-an-email", "secret1")
    assert error_code(excinfo) == "invalid-email"


def test_weak_password(db_path):
    identity = SQLiteIdentityProvider(db_path, Argon2PasswordHasher(), password_min_length=8)
    with pytest.raises(IdentityProviderError) as excinfo:
        identity.create_user("a@x.com", "short")
    assert error_code(excinfo) == "weak-password"


def test_sign_in_errors(identity):
    identity.create_user("a@x.com", "secret1")
    identity.sign_out()

    with pytest.raises(IdentityProviderError) as excinfo:
        identity.sign_in("b@x.com", "secret1")
    assert error_code(excinfo) == "user-not-found"

    with pytest.raises(IdentityProviderError) as excinfo:
        identity.sign_in("a@x.com", "wrong-one")
    assert error_code(excinfo) == "wrong-password"

    assert identity.current_user() is None


def test_argon2_round_trip(db_path):
    hasher = Argon2PasswordHasher()
    identity = SQLiteIdentityProvider(db_path, hasher)

    created = identity.create_user("a@x.com", "secret1")
    identity.sign_out()

    assert identity.sign_in("a@x.com", "secret1").uid == created.uid
    assert hasher.verify_password("secret1", "not-a-hash") is False


def test_accounts_survive_new_instance(db_path, identity):
    created = identity.create_user("a@x.com", "secret1")

    fresh = SQLiteIdentityProvider(db_path, identity.hasher)
    assert fresh.current_user() is None
    assert fresh.sign_in("a@x.com", "secret1").uid == created.uid


def test_listeners_see_changes(identity):
    seen = []
    unsubscribe = identity.add_listener(seen.append)

    identity.create_user("a@x.com", "secret1")
    identity.sign_out()
    unsubscribe()
    identity.sign_in("a@x.com", "secret1")

    assert [u.email if u else None for u in seen] == ["a@x.com", None]


def test_failing_listener_does_not_block_session(identity):
    def broken(user):
        raise RuntimeError("boom")

    seen = []
    identity.add_listener(broken)
    identity.add_listener(seen.append)

    user = identity.create_user("a@x.com", "secret1")

    assert identity.current_user() == user
    assert seen == [user]
