"""
Auth Client - High-level SDK for login and session workflows.

Simplifies common auth workflows for application developers.
"""

from typing import Optional, Dict, Any
from workspace_auth.config import load_settings
from workspace_auth.ports.session_port import SessionPort
from workspace_auth.domain.session import Session
from workspace_auth.sdk.gateway import AuthenticationGateway


class AuthClient:
    """
    High-level auth client combining the gateway with a session store.

    Example:
        from workspace_auth import AuthClient, AuthenticationGateway
        from workspace_auth.adapters import (
            BcryptPasswordHasher, MemoryAccountRepository, RedisSessionAdapter,
        )

        hasher = BcryptPasswordHasher.from_settings()
        client = AuthClient(
            gateway=AuthenticationGateway(MemoryAccountRepository(hasher)),
            sessions=RedisSessionAdapter.from_settings(),
        )

        # Login
        session = client.login("alice@example.com", "correct-horse")

        # Logout
        client.logout(session["session_id"])
    """

    def __init__(
        self,
        gateway: AuthenticationGateway,
        sessions: Optional[SessionPort] = None,
        default_ttl: Optional[int] = None,
    ):
        """
        Initialize auth client.

        Args:
            gateway: Authentication gateway (required)
            sessions: Session adapter (optional)
            default_ttl: Session TTL in seconds (defaults to configured session_ttl)
        """
        self._gateway = gateway
        self._sessions = sessions
        self._default_ttl = default_ttl

    def login(
        self,
        email: str,
        password: str,
        ttl: Optional[int] = None,
    ) -> Optional[Dict[str, Any]]:
        """
        Log in with email and password.

        Args:
            email: Account email
            password: Candidate password
            ttl: Session TTL in seconds

        Returns:
            Dict with 'account' and, when a session store is configured,
            'session'; None if the credentials are not accepted
        """
        data: Dict[str, Any] = {}
        account = self._gateway.log_in(email, password, data)
        if account is None:
            return None

        result: Dict[str, Any] = {"account": account.to_dict()}

        if self._sessions:
            session = self._sessions.create(
                account_id=data["account_id"],
                organization_id=data["organization_id"],
                ttl=ttl or self._ttl(),
                data=data,
            )
            result["session"] = session.to_dict()

        return result

    def logout(self, session_id: str) -> bool:
        """
        Log out (delete the session).

        Args:
            session_id: Session to end

        Returns:
            True if a session was deleted
        """
        if not self._sessions:
            return False

        return self._sessions.delete(session_id)

    def logout_everywhere(self, account_id: str) -> int:
        """
        Delete every session of an account.

        Returns:
            Number of sessions deleted
        """
        if not self._sessions:
            return 0

        sessions = self._sessions.list_by_account(account_id)
        return sum(1 for s in sessions if self._sessions.delete(s.session_id))

    def current_account_id(self, session_id: str) -> Optional[str]:
        """Account ID stored in a valid session, if any."""
        session = self.get_session(session_id)
        if session is None:
            return None
        return session.data.get("account_id")

    def get_session(self, session_id: str) -> Optional[Session]:
        """
        Get a session by ID.

        Args:
            session_id: Session ID

        Returns:
            Session if found and valid, None otherwise
        """
        if not self._sessions:
            return None

        return self._sessions.get(session_id)

    def extend_session(self, session_id: str, ttl: Optional[int] = None) -> bool:
        """
        Extend a session's TTL.

        Args:
            session_id: Session ID
            ttl: Additional seconds to extend

        Returns:
            True if extended, False otherwise
        """
        if not self._sessions:
            return False

        return self._sessions.extend(session_id, ttl or self._ttl())

    def _ttl(self) -> int:
        if self._default_ttl is not None:
            return self._default_ttl
        return load_settings().session_ttl
