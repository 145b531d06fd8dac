"""
Memory Session Adapter - In-memory session storage (testing only).
"""

import threading
from typing import Optional, List, Dict, Any, Set
from workspace_auth.ports.session_port import SessionPort
from workspace_auth.domain.session import Session


class MemorySessionAdapter(SessionPort):
    """
    Sessions in a dict, plus an account -> session IDs index.

    Expired sessions are dropped when they are next looked at. A lock
    keeps the two dicts consistent across threads.

    WARNING: Only for testing. Sessions are lost on restart.
    """

    def __init__(self):
        self._sessions: Dict[str, Session] = {}
        self._by_account: Dict[str, Set[str]] = {}
        self._lock = threading.RLock()

    def create(
        self,
        account_id: str,
        organization_id: Optional[str] = None,
        ttl: int = 3600,
        data: Optional[Dict[str, Any]] = None,
    ) -> Session:
        session = Session.create(account_id, organization_id, ttl=ttl, data=data)
        with self._lock:
            self._sessions[session.session_id] = session
            self._by_account.setdefault(account_id, set()).add(session.session_id)
        return session

    def get(self, session_id: str) -> Optional[Session]:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return None
            if not session.is_valid():
                self._drop(session)
                return None
            return session

    def delete(self, session_id: str) -> bool:
        with self._lock:
            session = self._sessions.get(session_id)
            if session is None:
                return False
            self._drop(session)
            return True

    def list_by_account(self, account_id: str) -> List[Session]:
        with self._lock:
            ids = list(self._by_account.get(account_id, ()))
            return [s for s in (self.get(sid) for sid in ids) if s is not None]

    def extend(self, session_id: str, ttl: int) -> bool:
        with self._lock:
            session = self.get(session_id)
            if session is None:
                return False
            session.extend(ttl)
            return True

    def _drop(self, session: Session) -> None:
        self._sessions.pop(session.session_id, None)
        ids = self._by_account.get(session.account_id)
        if ids is not None:
            ids.discard(session.session_id)
            if not ids:
                del self._by_account[session.account_id]
