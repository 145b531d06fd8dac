"""
Authentication Gateway - Email/password login on top of the account store.
"""

import logging
from collections.abc import MutableMapping
from typing import Optional
from workspace_auth.domain.account import Account
from workspace_auth.domain.verification import VerificationResult
from workspace_auth.exceptions import AccountNotFoundError
from workspace_auth.ports.account_repository_port import AccountRepositoryPort

logger = logging.getLogger(__name__)


class AuthenticationGateway:
    """
    Decide whether an email/password pair may log in.

    Two entry points:
    - check() returns the exact VerificationResult, for callers that need
      to tell a pending account apart (e.g. to offer "set your password")
    - log_in() collapses every failure into None, so the caller cannot
      leak which accounts exist or are pending

    Example:
        gateway = AuthenticationGateway(accounts=MemoryAccountRepository(hasher))
        session = {}
        account = gateway.log_in("alice@example.com", "correct-horse", session)
    """

    def __init__(self, accounts: AccountRepositoryPort, rehash_on_login: bool = True):
        """
        Initialize gateway.

        Args:
            accounts: Account repository
            rehash_on_login: Re-hash with the current work factor after a
                successful login when the stored hash used another one
        """
        self._accounts = accounts
        self._rehash_on_login = rehash_on_login

    @property
    def accounts(self) -> AccountRepositoryPort:
        return self._accounts

    def check(self, email: str, plaintext: str) -> VerificationResult:
        """
        Check an email/password pair without touching any session.

        Args:
            email: Public login identifier
            plaintext: Candidate password

        Returns:
            The verification outcome
        """
        result, _ = self._check(email, plaintext)
        return result

    def log_in(self, email: str, plaintext: str, session: MutableMapping) -> Optional[Account]:
        """
        Attempt to log in with an email address and password.

        On success the account's ID and organization ID are written into
        the session.

        Args:
            email: Public login identifier
            plaintext: Candidate password
            session: Key-value session store to write into

        Returns:
            The account on success, None for any failure
        """
        result, account = self._check(email, plaintext)
        if not result.ok:
            return None

        if self._rehash_on_login and account.credential.needs_rehash():
            try:
                self._store_password(account, plaintext)
            except AccountNotFoundError:
                # Deleted between lookup and rehash; nothing left to log in to
                logger.warning("Account %s vanished during login", account.account_id)
                return None
            logger.info("Re-hashed password for account %s with current work factor", account.account_id)

        return account.authenticate(session)

    def set_password(self, account: Account, plaintext: str) -> Account:
        """
        Set a new password and persist the hash.

        Args:
            account: Account to update
            plaintext: New password

        Returns:
            The updated account

        Raises:
            InvalidInputError: If plaintext is empty
            AccountNotFoundError: If the account is not stored
        """
        self._store_password(account, plaintext)
        logger.info("Password set for account %s", account.account_id)
        return account

    def _store_password(self, account: Account, plaintext: str) -> None:
        account.set_password(plaintext)
        if not self._accounts.update_hashed_secret(account.account_id, account.credential.hashed_secret):
            raise AccountNotFoundError(account.account_id)

    def _check(self, email: str, plaintext: str):
        account = self._accounts.get_by_email(email)
        if account is None:
            logger.info("Login failed: no such account")
            return VerificationResult.NO_SUCH_ACCOUNT, None

        # No hash to compare against; skip the expensive path entirely
        if account.credential.is_pending():
            logger.info("Login failed: account %s is pending", account.account_id)
            return VerificationResult.PENDING_CREDENTIAL, account

        if not account.credential.verify(plaintext):
            logger.info("Login failed: password mismatch for account %s", account.account_id)
            return VerificationResult.MISMATCH, account

        logger.info("Login succeeded for account %s", account.account_id)
        return VerificationResult.SUCCESS, account
