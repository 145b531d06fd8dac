"""
Account Repository Port - Interface for account persistence.

Implementations:
- MemoryAccountRepository: In-memory storage (testing and development)

A real deployment backs this with a database table; the single-field
update below must be atomic there (a transaction or row lock) so a
concurrent verify never reads a half-written hash.
"""

from abc import ABC, abstractmethod
from typing import Optional
from workspace_auth.domain.account import Account
from workspace_auth.domain.security_key import SecurityKey


class AccountRepositoryPort(ABC):
    """Port: Store and look up accounts."""

    @abstractmethod
    def add(self, account: Account) -> Account:
        """
        Persist a new account.

        Args:
            account: Account to store

        Returns:
            Stored account

        Raises:
            DuplicateEmailError: If another account uses the same email
        """
        pass

    @abstractmethod
    def get(self, account_id: str) -> Optional[Account]:
        """
        Get an account by ID.

        Args:
            account_id: Account ID

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    def get_by_email(self, email: str) -> Optional[Account]:
        """
        Get an account by its email address.

        Args:
            email: Email address (public login identifier)

        Returns:
            Account if found, None otherwise
        """
        pass

    @abstractmethod
    def update_hashed_secret(self, account_id: str, hashed_secret: Optional[str]) -> bool:
        """
        Atomically replace the stored password hash.

        Args:
            account_id: Account ID
            hashed_secret: New hash (None makes the account pending again)

        Returns:
            True if updated, False if not found
        """
        pass

    @abstractmethod
    def set_security_key(self, account_id: str, security_key: Optional[SecurityKey]) -> bool:
        """
        Store or clear the account's security key.

        Args:
            account_id: Account ID
            security_key: Key to store, or None to clear it

        Returns:
            True if updated, False if not found
        """
        pass

    @abstractmethod
    def consume_security_key(self, account_id: str, presented_key: str) -> bool:
        """
        Check a presented key against the stored one and clear it, in one step.

        Two callers presenting the same key concurrently must not both win.

        Args:
            account_id: Account ID
            presented_key: Key from the emailed link

        Returns:
            True if the stored key matched and has been cleared, False otherwise
        """
        pass

    @abstractmethod
    def delete(self, account_id: str) -> bool:
        """
        Delete an account.

        Args:
            account_id: Account ID

        Returns:
            True if deleted, False if not found
        """
        pass
