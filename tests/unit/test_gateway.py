"""
Unit tests for the authentication gateway.
"""

import pytest
from workspace_auth.adapters import BcryptPasswordHasher, MemoryAccountRepository
from workspace_auth.domain.account import Account
from workspace_auth.domain.verification import VerificationResult
from workspace_auth.exceptions import AccountNotFoundError, InvalidInputError
from workspace_auth.sdk.gateway import AuthenticationGateway


class SpyHasher(BcryptPasswordHasher):
    """Counts password checks."""

    def __init__(self, work_factor: int = 4):
        super().__init__(work_factor=work_factor)
        self.check_calls = 0

    def check(self, plaintext, parsed):
        self.check_calls += 1
        return super().check(plaintext, parsed)


@pytest.fixture
def hasher():
    return SpyHasher(work_factor=4)


@pytest.fixture
def accounts(hasher):
    return MemoryAccountRepository(hasher)


@pytest.fixture
def gateway(accounts):
    return AuthenticationGateway(accounts)


def add_account(accounts, hasher, password=None, account_id="acc_1", email="alice@example.com"):
    account = Account.create(
        account_id=account_id,
        organization_id="org_1",
        email=email,
        first_name="Alice",
        last_name="Ng",
        hasher=hasher,
    )
    if password is not None:
        account.set_password(password)
    return accounts.add(account)


class TestCheck:
    """Fine-grained verification outcomes."""

    def test_no_such_account(self, gateway):
        assert gateway.check("nobody@example.com", "anything") is VerificationResult.NO_SUCH_ACCOUNT

    def test_pending(self, gateway, accounts, hasher):
        add_account(accounts, hasher)

        assert gateway.check("alice@example.com", "anything") is VerificationResult.PENDING_CREDENTIAL
        assert hasher.check_calls == 0

    def test_mismatch(self, gateway, accounts, hasher):
        add_account(accounts, hasher, password="correct-horse")

        assert gateway.check("alice@example.com", "wrong-guess") is VerificationResult.MISMATCH

    def test_success(self, gateway, accounts, hasher):
        add_account(accounts, hasher, password="correct-horse")

        result = gateway.check("alice@example.com", "correct-horse")
        assert result is VerificationResult.SUCCESS
        assert result.ok is True

    def test_only_success_is_ok(self):
        assert [r for r in VerificationResult if r.ok] == [VerificationResult.SUCCESS]


class TestLogIn:
    """Collapsed login behaviour."""

    def test_success_writes_session(self, gateway, accounts, hasher):
        add_account(accounts, hasher, password="correct-horse")
        session = {}

        account = gateway.log_in("alice@example.com", "correct-horse", session)

        assert account is not None
        assert account.account_id == "acc_1"
        assert session == {"account_id": "acc_1", "organization_id": "org_1"}

    @pytest.mark.parametrize(
        "email,password",
        [
            ("nobody@example.com", "correct-horse"),
            ("alice@example.com", "wrong-guess"),
            ("pending@example.com", "anything"),
        ],
    )
    def test_failures_collapse_to_none(self, gateway, accounts, hasher, email, password):
        """No such account, mismatch, and pending all look the same."""
        add_account(accounts, hasher, password="correct-horse")
        add_account(accounts, hasher, account_id="acc_2", email="pending@example.com")
        session = {}

        assert gateway.log_in(email, password, session) is None
        assert session == {}

    def test_rehash_on_login(self, hasher):
        """A hash made with an older cost is upgraded after a successful login."""
        old_hasher = BcryptPasswordHasher(work_factor=4)
        new_hasher = BcryptPasswordHasher(work_factor=5)
        accounts = MemoryAccountRepository(new_hasher)
        add_account(accounts, old_hasher, password="correct-horse")
        assert accounts.get("acc_1").credential.hashed_secret.startswith("$2b$04$")

        account = AuthenticationGateway(accounts).log_in("alice@example.com", "correct-horse", {})

        assert account is not None
        stored = accounts.get("acc_1").credential
        assert stored.hashed_secret.startswith("$2b$05$")
        assert stored.verify("correct-horse") is True

    def test_account_deleted_during_rehash(self):
        """A login racing a delete fails quietly instead of raising."""

        class DeletingRepository(MemoryAccountRepository):
            def update_hashed_secret(self, account_id, hashed_secret):
                self.delete(account_id)
                return super().update_hashed_secret(account_id, hashed_secret)

        accounts = DeletingRepository(BcryptPasswordHasher(work_factor=5))
        add_account(accounts, BcryptPasswordHasher(work_factor=4), password="correct-horse")
        session = {}

        assert AuthenticationGateway(accounts).log_in("alice@example.com", "correct-horse", session) is None
        assert session == {}

    def test_rehash_disabled(self):
        old_hasher = BcryptPasswordHasher(work_factor=4)
        accounts = MemoryAccountRepository(BcryptPasswordHasher(work_factor=5))
        add_account(accounts, old_hasher, password="correct-horse")

        gateway = AuthenticationGateway(accounts, rehash_on_login=False)
        assert gateway.log_in("alice@example.com", "correct-horse", {}) is not None
        assert accounts.get("acc_1").credential.hashed_secret.startswith("$2b$04$")


class TestSetPassword:
    """Password changes go through to the store."""

    def test_set_password_persists(self, gateway, accounts, hasher):
        account = add_account(accounts, hasher)

        gateway.set_password(account, "correct-horse")

        assert accounts.get("acc_1").pending is False
        assert gateway.check("alice@example.com", "correct-horse") is VerificationResult.SUCCESS

    def test_change_password(self, gateway, accounts, hasher):
        account = add_account(accounts, hasher, password="old-password")

        gateway.set_password(account, "new-password")

        assert gateway.check("alice@example.com", "new-password") is VerificationResult.SUCCESS
        assert gateway.check("alice@example.com", "old-password") is VerificationResult.MISMATCH

    def test_empty_password_rejected(self, gateway, accounts, hasher):
        account = add_account(accounts, hasher)

        with pytest.raises(InvalidInputError):
            gateway.set_password(account, "")

        assert accounts.get("acc_1").pending is True

    def test_unknown_account(self, gateway, hasher):
        stray = Account.create(
            account_id="ghost",
            organization_id="org_1",
            email="ghost@example.com",
            first_name="G",
            last_name="Host",
            hasher=hasher,
        )

        with pytest.raises(AccountNotFoundError):
            gateway.set_password(stray, "whatever")
