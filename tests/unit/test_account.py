"""
Unit tests for Account domain model.
"""

import hashlib
import pytest
from types import SimpleNamespace
from workspace_auth.adapters.bcrypt_hasher import BcryptPasswordHasher
from workspace_auth.domain.account import Account, AccountRole
from workspace_auth.domain.security_key import SecurityKey


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(work_factor=4)


@pytest.fixture
def account(hasher):
    return Account.create(
        account_id="acc_1",
        organization_id="org_1",
        email="Alice.Ng@Example.com",
        first_name="Alice",
        last_name="Ng",
        hasher=hasher,
        organization_name="Example News",
    )


def test_account_creation(account):
    """New accounts are contributors with a pending credential."""
    assert account.account_id == "acc_1"
    assert account.organization_id == "org_1"
    assert account.role == AccountRole.CONTRIBUTOR
    assert account.pending is True
    assert account.security_key is None
    assert account.is_administrator is False


def test_role_values():
    assert AccountRole.ADMINISTRATOR.value == 1
    assert AccountRole.CONTRIBUTOR.value == 2


def test_set_password_clears_pending(account):
    account.set_password("correct-horse")

    assert account.pending is False
    assert account.credential.verify("correct-horse") is True


def test_authenticate_writes_session(account):
    """Login stores account and organization IDs in the session."""
    session = {"csrf": "abc"}

    result = account.authenticate(session)

    assert result is account
    assert session == {"csrf": "abc", "account_id": "acc_1", "organization_id": "org_1"}


def test_owns(account):
    """Ownership is decided by the resource's account_id."""
    assert account.owns(SimpleNamespace(account_id="acc_1")) is True
    assert account.owns(SimpleNamespace(account_id="acc_2")) is False
    assert account.owns({"account_id": "acc_1"}) is True
    assert account.owns({"title": "untagged"}) is False
    assert account.owns(object()) is False


def test_names(account):
    assert account.full_name == "Alice Ng"
    assert account.rfc_email == '"Alice Ng" <Alice.Ng@Example.com>'


def test_hashed_email(account):
    """MD5 of the lowercased email with whitespace removed."""
    expected = hashlib.md5(b"alice.ng@example.com").hexdigest()
    assert account.hashed_email == expected

    account.email = " Alice.Ng@Example.com \n"
    assert account.hashed_email == expected


def test_to_dict_hides_secrets(account):
    """Public projection has pending but no hash or key."""
    account.set_password("correct-horse")
    account.security_key = SecurityKey.generate()

    data = account.to_dict()

    assert data == {
        "id": "acc_1",
        "first_name": "Alice",
        "last_name": "Ng",
        "email": "Alice.Ng@Example.com",
        "hashed_email": account.hashed_email,
        "pending": False,
    }
    assert account.credential.hashed_secret not in str(data)
    assert account.security_key.key not in str(data)


def test_record_round_trip(account, hasher):
    """Storage projection keeps the hash, role, and key."""
    account.role = AccountRole.ADMINISTRATOR
    account.set_password("correct-horse")
    account.security_key = SecurityKey.generate()

    restored = Account.from_record(account.to_record(), hasher)

    assert restored.account_id == account.account_id
    assert restored.role == AccountRole.ADMINISTRATOR
    assert restored.organization_name == "Example News"
    assert restored.credential.hashed_secret == account.credential.hashed_secret
    assert restored.credential.verify("correct-horse") is True
    assert restored.security_key.key == account.security_key.key
    assert restored.created_at == account.created_at


def test_pending_record_round_trip(account, hasher):
    restored = Account.from_record(account.to_record(), hasher)

    assert restored.pending is True
    assert restored.to_record()["hashed_password"] is None
