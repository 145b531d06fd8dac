"""
Session Port - Where a successful login is recorded.

Implementations:
- RedisSessionAdapter: Redis-backed sessions
- MemorySessionAdapter: In-memory sessions (testing only)
"""

from abc import ABC, abstractmethod
from typing import Optional, List, Dict, Any
from workspace_auth.domain.session import Session


class SessionPort(ABC):
    """Port: Store sessions keyed by session ID, indexed by account."""

    @abstractmethod
    def create(
        self,
        account_id: str,
        organization_id: Optional[str] = None,
        ttl: int = 3600,
        data: Optional[Dict[str, Any]] = None,
    ) -> Session:
        """
        Record a new session.

        Args:
            account_id: Logged-in account
            organization_id: Its organization
            ttl: Seconds until the session expires
            data: Extra payload to store with it

        Returns:
            Created session
        """
        pass

    @abstractmethod
    def get(self, session_id: str) -> Optional[Session]:
        """Return the session if it exists and has not expired."""
        pass

    @abstractmethod
    def delete(self, session_id: str) -> bool:
        """Remove a session. False if there was none."""
        pass

    @abstractmethod
    def list_by_account(self, account_id: str) -> List[Session]:
        """All unexpired sessions of one account."""
        pass

    @abstractmethod
    def extend(self, session_id: str, ttl: int) -> bool:
        """
        Move a session's expiry `ttl` seconds further out.

        Returns:
            True if extended, False if the session is gone
        """
        pass
