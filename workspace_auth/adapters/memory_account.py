"""
Memory Account Repository - In-memory account storage (testing and development).
"""

import copy
import logging
import threading
from typing import Optional, Dict, Any
from workspace_auth.domain.account import Account
from workspace_auth.domain.security_key import SecurityKey
from workspace_auth.exceptions import DuplicateEmailError
from workspace_auth.ports.account_repository_port import AccountRepositoryPort
from workspace_auth.ports.password_hasher_port import PasswordHasherPort

logger = logging.getLogger(__name__)


class MemoryAccountRepository(AccountRepositoryPort):
    """
    In-memory account storage.

    Keeps plain records (like database rows) and builds a fresh Account on
    every read, so callers never share mutable state through the store.
    A lock serializes writes against reads.

    WARNING: Accounts are lost on restart.
    """

    def __init__(self, hasher: PasswordHasherPort):
        """
        Initialize in-memory storage.

        Args:
            hasher: Hasher given to credentials of accounts read back
        """
        self._hasher = hasher
        self._records: Dict[str, Dict[str, Any]] = {}
        self._by_email: Dict[str, str] = {}
        self._lock = threading.RLock()

    def add(self, account: Account) -> Account:
        """Store a new account."""
        with self._lock:
            existing = self._by_email.get(account.email)
            if existing is not None and existing != account.account_id:
                raise DuplicateEmailError(account.email)

            previous = self._records.get(account.account_id)
            if previous is not None and previous["email"] != account.email:
                self._by_email.pop(previous["email"], None)

            self._records[account.account_id] = account.to_record()
            self._by_email[account.email] = account.account_id

        logger.info("Stored account %s", account.account_id)
        return account

    def get(self, account_id: str) -> Optional[Account]:
        """Get an account by ID."""
        with self._lock:
            record = self._records.get(account_id)
            if record is None:
                return None
            record = copy.deepcopy(record)
        return Account.from_record(record, self._hasher)

    def get_by_email(self, email: str) -> Optional[Account]:
        """Get an account by email."""
        with self._lock:
            account_id = self._by_email.get(email)
            if account_id is None:
                return None
            return self.get(account_id)

    def update_hashed_secret(self, account_id: str, hashed_secret: Optional[str]) -> bool:
        """Replace the stored hash in one step."""
        with self._lock:
            record = self._records.get(account_id)
            if record is None:
                return False
            record["hashed_password"] = hashed_secret
        return True

    def set_security_key(self, account_id: str, security_key: Optional[SecurityKey]) -> bool:
        """Store or clear the security key."""
        with self._lock:
            record = self._records.get(account_id)
            if record is None:
                return False
            record["security_key"] = security_key.to_dict() if security_key else None
        return True

    def consume_security_key(self, account_id: str, presented_key: str) -> bool:
        """Match and clear the stored key under the lock."""
        with self._lock:
            record = self._records.get(account_id)
            if record is None or record.get("security_key") is None:
                return False
            if not SecurityKey.from_dict(record["security_key"]).matches(presented_key):
                return False
            record["security_key"] = None
        return True

    def delete(self, account_id: str) -> bool:
        """Delete an account."""
        with self._lock:
            record = self._records.pop(account_id, None)
            if record is None:
                return False
            self._by_email.pop(record["email"], None)

        logger.info("Deleted account %s", account_id)
        return True
