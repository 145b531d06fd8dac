"""
Redis Session Adapter - Redis-backed session storage.
"""

import json
import logging
from typing import Optional, List, Dict, Any
from workspace_auth.config import AuthSettings, load_settings
from workspace_auth.ports.session_port import SessionPort
from workspace_auth.domain.session import Session

logger = logging.getLogger(__name__)


class RedisSessionAdapter(SessionPort):
    """
    Sessions stored as JSON strings under "<prefix><session_id>".

    Every write sets the key's Redis TTL to the seconds the session has
    left, so Redis drops it exactly when it expires. A per-account set
    "<prefix>account:<account_id>" indexes session IDs; it lives as long
    as the longest-lived session in it.
    """

    def __init__(
        self,
        redis_client=None,
        prefix: str = "workspace:session:",
        redis_url: str = "redis://localhost:6379/0",
    ):
        """
        Args:
            redis_client: redis.Redis instance (decode_responses=True)
            prefix: Key prefix for sessions
            redis_url: Used to connect lazily when no client is given
        """
        self._redis = redis_client
        self._prefix = prefix
        self._redis_url = redis_url

    @classmethod
    def from_settings(cls, settings: Optional[AuthSettings] = None) -> "RedisSessionAdapter":
        """Build an adapter from configured URL and key prefix."""
        settings = settings or load_settings()
        return cls(prefix=settings.session_prefix, redis_url=settings.redis_url)

    def _client(self):
        if self._redis is None:
            try:
                import redis
            except ImportError:
                raise ImportError("redis package required: pip install redis")
            self._redis = redis.Redis.from_url(self._redis_url, decode_responses=True)
        return self._redis

    def _key(self, session_id: str) -> str:
        return f"{self._prefix}{session_id}"

    def _account_key(self, account_id: str) -> str:
        return f"{self._prefix}account:{account_id}"

    def create(
        self,
        account_id: str,
        organization_id: Optional[str] = None,
        ttl: int = 3600,
        data: Optional[Dict[str, Any]] = None,
    ) -> Session:
        session = Session.create(account_id, organization_id, ttl=ttl, data=data)
        self._save(session)
        return session

    def get(self, session_id: str) -> Optional[Session]:
        raw = self._client().get(self._key(session_id))
        if not raw:
            return None

        try:
            session = Session.from_dict(json.loads(raw))
        except (ValueError, KeyError):
            logger.warning("Discarding unreadable session %s", session_id)
            return None

        return session if session.is_valid() else None

    def delete(self, session_id: str) -> bool:
        session = self.get(session_id)
        if session is None:
            return False

        client = self._client()
        client.delete(self._key(session_id))
        client.srem(self._account_key(session.account_id), session_id)
        return True

    def list_by_account(self, account_id: str) -> List[Session]:
        client = self._client()
        account_key = self._account_key(account_id)

        sessions = []
        for session_id in client.smembers(account_key):
            session = self.get(session_id)
            if session is None:
                client.srem(account_key, session_id)
            else:
                sessions.append(session)
        return sessions

    def extend(self, session_id: str, ttl: int) -> bool:
        session = self.get(session_id)
        if session is None:
            return False

        session.extend(ttl)
        self._save(session)
        return True

    def _save(self, session: Session) -> None:
        remaining = session.remaining_seconds()
        if remaining <= 0:
            return

        client = self._client()
        client.setex(self._key(session.session_id), remaining, json.dumps(session.to_dict()))

        account_key = self._account_key(session.account_id)
        client.sadd(account_key, session.session_id)
        if client.ttl(account_key) < remaining:
            client.expire(account_key, remaining)
